"""
Defines the command-line interface for the application using Typer.
The program takes no arguments: everything is chosen through prompts.
"""

import asyncio
import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from installer_cli import __version__
from installer_cli.core.controller import InstallController
from installer_cli.exceptions import InstallerCliError
from installer_cli.models.config import InstallerConfig
from installer_cli.models.summary import RunSummary
from installer_cli.transfer.downloader import Downloader, create_session

from .formatters import format_error_with_suggestions, print_summary_panel

console = Console()
err_console = Console(stderr=True)

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=err_console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("installer_cli")

app = typer.Typer(
    name="installer-cli",
    help="Download and launch the EzDent-i, Ez3D-i and EzServer installers.",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


async def _run_async(config: InstallerConfig) -> RunSummary:
    async with create_session(config) as session:
        downloader = Downloader(config, session, console=console)
        controller = InstallController(config, downloader, console=console)
        return await controller.run()


@app.command()
def main(
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
):
    """Interactively download and/or launch installers in the current directory."""
    if version:
        console.print(f"[bold]installer-cli[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("installer_cli").setLevel(log_level)

    try:
        config = InstallerConfig()
    except ValidationError as e:
        err_console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(code=1) from e

    try:
        summary = asyncio.run(_run_async(config))
    except InstallerCliError as e:
        log.warning(f"[yellow]⚠️  {escape(str(e))}[/yellow]")
        err_console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e

    print_summary_panel(summary, console)
