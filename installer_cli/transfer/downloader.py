"""
Handles fetching installer files over HTTPS.

A single best-effort attempt is made per file: there is no retry, resume, or
checksum validation. The TLS floor comes from the run configuration and is
fixed when the session is created.
"""

import asyncio
import logging
import os
import ssl
from pathlib import Path

import aiofiles
import aiohttp
from rich.console import Console
from rich.markup import escape

from installer_cli.cli.formatters import format_download_size
from installer_cli.exceptions import DownloadError
from installer_cli.models.config import InstallerConfig

from .integrity import FileIntegrityChecker

log = logging.getLogger(__name__)


def build_ssl_context(min_version: ssl.TLSVersion) -> ssl.SSLContext:
    """Creates a verifying TLS context that refuses anything below min_version."""
    context = ssl.create_default_context()
    context.minimum_version = min_version
    return context


def create_session(config: InstallerConfig) -> aiohttp.ClientSession:
    """
    Creates the HTTPS session used for every download in a run.

    Must be called from inside a running event loop.
    """
    connector = aiohttp.TCPConnector(
        ssl=build_ssl_context(config.tls_version),
        limit=1,
        enable_cleanup_closed=True,
    )
    # No timeout: a stalled transfer blocks the run until the user aborts it.
    timeout = aiohttp.ClientTimeout(total=None)
    session = aiohttp.ClientSession(
        connector=connector,
        timeout=timeout,
        headers={"User-Agent": config.user_agent},
    )
    log.debug(f"Created download session with TLS floor {config.min_tls_version}")
    return session


class Downloader:
    """Fetches a URL into a file in the working directory."""

    def __init__(
        self,
        config: InstallerConfig,
        session: aiohttp.ClientSession,
        console: Console | None = None,
    ):
        self.config = config
        self.session = session
        self.console = console or Console()

    async def fetch(self, url: str, output_file_name: str) -> Path:
        """
        Downloads url to output_file_name, overwriting any existing file.

        Returns:
            The absolute path of the verified, non-empty file.

        Raises:
            DownloadError: On transport failure or a missing/empty result.
        """
        destination = self.config.output_path(output_file_name)
        log.debug(f"GET {url} -> {destination}")
        try:
            async with self.session.get(url, allow_redirects=True) as response:
                response.raise_for_status()
                async with aiofiles.open(destination, "wb") as f:
                    async for chunk in response.content.iter_chunked(
                        self.config.chunk_size
                    ):
                        await f.write(chunk)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise DownloadError(
                f"Transfer of '{output_file_name}' failed: {str(e) or type(e).__name__}"
            ) from e
        except OSError as e:
            raise DownloadError(f"Could not write '{destination}': {e}") from e

        if not await asyncio.to_thread(
            FileIntegrityChecker.check_installer, destination
        ):
            raise DownloadError(
                f"Downloaded file '{output_file_name}' is missing or empty."
            )
        return destination

    async def download(
        self, url: str, output_file_name: str, label: str | None = None
    ) -> bool:
        """
        Downloads url to output_file_name and reports the outcome.

        Failures are logged rather than raised so that one bad entry never
        aborts the run. A partial or empty file may be left behind.

        Args:
            url: The HTTPS source.
            output_file_name: Bare file name inside the working directory.
            label: Name used in the narration, defaults to output_file_name.

        Returns:
            True only if the file exists and is non-empty after the transfer.
        """
        label = escape(label or output_file_name)
        self.console.print(f"[cyan]Downloading {label}...[/cyan]")
        try:
            destination = await self.fetch(url, output_file_name)
        except DownloadError as e:
            log.error(f"[red]✗ {label}: {escape(str(e))}[/red]")
            return False

        size = format_download_size(os.path.getsize(destination))
        self.console.print(
            f"[green]✓ Downloaded {label} to {escape(destination.name)} ({size}).[/green]"
        )
        return True
