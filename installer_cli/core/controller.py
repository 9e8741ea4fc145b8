"""
The interactive controller that drives a run from the menus to completion.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from installer_cli.cli.formatters import print_action_menu, print_product_menu
from installer_cli.exceptions import LaunchError
from installer_cli.models.catalog import (
    Action,
    Product,
    parse_action,
    resolve_selection,
)
from installer_cli.models.config import InstallerConfig
from installer_cli.models.summary import RunSummary
from installer_cli.system.launcher import LaunchResult, launch
from installer_cli.system.locator import locate
from installer_cli.transfer.downloader import Downloader

log = logging.getLogger(__name__)

Prompt = Callable[[str], str]
Launcher = Callable[[Path], LaunchResult]
Locator = Callable[[str, Path], Path | None]


class InstallController:
    """
    Runs the SelectAction -> SelectProducts -> Resolve -> ProcessEach -> Done
    sequence.

    An invalid menu answer raises InvalidSelectionError out of run(); every
    other problem is reported per entry and processing moves on.
    """

    def __init__(
        self,
        config: InstallerConfig,
        downloader: Downloader,
        console: Console | None = None,
        prompt: Prompt = typer.prompt,
        launcher: Launcher = launch,
        locator: Locator = locate,
    ):
        self.config = config
        self.downloader = downloader
        self.console = console or Console()
        self.prompt = prompt
        self.launcher = launcher
        self.locator = locator
        self.summary = RunSummary()

    def select_action(self) -> Action:
        print_action_menu(self.console)
        return parse_action(self.prompt("Select an option"))

    def select_products(self, action: Action) -> tuple[Product, ...]:
        # Header text is cosmetic; the choices are identical.
        title = "Install Options" if action is Action.INSTALL_ONLY else "Download Options"
        print_product_menu(self.console, title)
        return resolve_selection(self.prompt("Select an option"))

    async def run(self) -> RunSummary:
        """Prompts for the action and products, then processes the selection."""
        action = self.select_action()
        products = self.select_products(action)
        names = ", ".join(p.name for p in products)
        self.console.print(f"\n[bold cyan]{action.label}: {escape(names)}[/bold cyan]")

        await self.process(action, products)

        self.console.print("\n[bold green]✓ All selected items processed.[/bold green]")
        return self.summary

    async def process(self, action: Action, products: tuple[Product, ...]) -> None:
        """Applies action to each product in order."""
        for product in products:
            log.debug(f"Processing {product.name} ({action.name})")
            if action is Action.INSTALL_ONLY:
                self._install_existing(product)
                continue

            ok = await self._download(product)
            if action is Action.DOWNLOAD_ONLY:
                continue
            if ok:
                self._launch(product, self.config.output_path(product.output_file_name))
            else:
                log.warning(
                    f"[yellow]⚠️  Skipping install of {escape(product.name)}"
                    " because the download failed.[/yellow]"
                )

    async def _download(self, product: Product) -> bool:
        ok = await self.downloader.download(
            product.url, product.output_file_name, label=product.name
        )
        if ok:
            self.summary.downloaded += 1
            self.summary.bytes_downloaded += os.path.getsize(
                self.config.output_path(product.output_file_name)
            )
        else:
            self.summary.download_failed += 1
        return ok

    def _install_existing(self, product: Product) -> None:
        expected = self.config.output_path(product.output_file_name)
        if expected.is_file():
            self._launch(product, expected)
            return

        found = self.locator(product.name, self.config.work_dir)
        if found is None:
            self.summary.missing += 1
            log.warning(
                f"[yellow]⚠️  No installer found for {escape(product.name)}"
                f" in {escape(str(self.config.work_dir))}.[/yellow]"
            )
            return

        self.console.print(
            f"[dim]{escape(product.output_file_name)} not found, using"
            f" {escape(found.name)}.[/dim]"
        )
        self._launch(product, found)

    def _launch(self, product: Product, path: Path) -> None:
        self.console.print(f"[cyan]Launching installer for {escape(product.name)}...[/cyan]")
        try:
            result = self.launcher(path)
        except LaunchError as e:
            self.summary.launch_failed += 1
            log.error(f"[red]✗ {escape(str(e))}[/red]")
            return

        self.summary.launched += 1
        pid = f" (pid {result.pid})" if result.pid is not None else ""
        self.console.print(f"[green]✓ Started {escape(result.path.name)}{pid}.[/green]")
