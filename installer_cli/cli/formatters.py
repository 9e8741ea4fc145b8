"""
Functions for formatting and displaying data in the console using Rich.
"""

from rich import box
from rich.console import Console
from rich.filesize import decimal
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from installer_cli.models.catalog import ACTION_LABELS, product_menu_labels
from installer_cli.models.summary import RunSummary

ERROR_SUGGESTIONS = {
    "InvalidSelectionError": (
        "Enter only one of the numbers shown in the menu.",
        "Run the program again to start over.",
    ),
    "DownloadError": (
        "Check your internet connection.",
        "The vendor's download server may be temporarily unavailable.",
        "Make sure the current directory is writable.",
    ),
    "LaunchError": (
        "Make sure the downloaded file is a valid installer.",
        "On Windows, try running the terminal as Administrator.",
        "Security software may have quarantined the file.",
    ),
    "ClientConnectorError": (
        "A network connection issue occurred.",
        "Check proxy and firewall settings.",
    ),
}
DEFAULT_SUGGESTIONS = ("Run the command with -vv for detailed logs.",)


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Renders an error and what the user can do about it as a red Panel."""
    suggestions = ERROR_SUGGESTIONS.get(type(error).__name__, DEFAULT_SUGGESTIONS)

    body = Text.assemble(
        (f"{type(error).__name__}: ", "bold red"),
        str(error),
        "\n\n",
        ("Suggestions", "bold yellow"),
    )
    for line in suggestions:
        body.append(f"\n• {line}")
    if context:
        body.append(f"\n\nContext: {context}", style="dim")

    return Panel(
        body,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def format_download_size(num_bytes: int) -> str:
    """Formats a byte count for download narration (e.g. '48.2 MB')."""
    return decimal(num_bytes)




def _menu_table(rows: list[tuple[str, str]]) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()
    for choice, label in rows:
        table.add_row(f"{choice}.", label)
    return table


def print_action_menu(console: Console):
    """Displays the action menu."""
    rows = [(action.value, label) for action, label in ACTION_LABELS.items()]
    console.print(
        Panel(
            _menu_table(rows),
            title="[bold]Select Action[/bold]",
            border_style="cyan",
            expand=False,
        )
    )


def print_product_menu(console: Console, title: str):
    """Displays the product menu under the given header."""
    console.print(
        Panel(
            _menu_table(product_menu_labels()),
            title=f"[bold]{title}[/bold]",
            border_style="cyan",
            expand=False,
        )
    )


def print_summary_panel(summary: RunSummary, console: Console | None = None):
    """Displays the final summary of the run."""
    console = console or Console()

    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column(style="bold cyan", justify="right", width=20)
    stats_table.add_column(style="white", justify="left")

    if summary.downloaded or summary.download_failed:
        stats_table.add_row(
            "✓ Downloaded:",
            f"[bold green]{summary.downloaded}[/bold green]"
            f" [dim]({format_download_size(summary.bytes_downloaded)})[/dim]",
        )
    if summary.launched or summary.launch_failed or summary.missing:
        stats_table.add_row(
            "✓ Launched:", f"[bold green]{summary.launched}[/bold green]"
        )
    if summary.missing > 0:
        stats_table.add_row("⚠ Not Found:", f"[yellow]{summary.missing}[/yellow]")
    if summary.download_failed > 0:
        stats_table.add_row(
            "✗ Download Failed:", f"[bold red]{summary.download_failed}[/bold red]"
        )
    if summary.launch_failed > 0:
        stats_table.add_row(
            "✗ Launch Failed:", f"[bold red]{summary.launch_failed}[/bold red]"
        )
    stats_table.add_row("⏱ Duration:", f"{summary.elapsed_s:.1f}s")

    border = "green" if summary.failures == 0 else "yellow"
    console.print(
        Panel(
            stats_table,
            title="[bold]Summary[/bold]",
            border_style=border,
            box=box.ROUNDED,
            expand=False,
        )
    )
