"""
Console entry point for installer-cli.

typer's standalone mode already turns invalid menu answers into exit code 1
and Ctrl+C into "Aborted!"; only errors that escape the command reach the
handler here.
"""

import logging
import os
import sys

from rich.console import Console

from installer_cli.cli.app import app
from installer_cli.cli.formatters import format_error_with_suggestions


def main() -> None:
    """Runs the interactive app, rendering unexpected failures as an error panel."""
    if os.name == "nt":
        try:
            sys.stdout.reconfigure(encoding="utf-8")
            sys.stderr.reconfigure(encoding="utf-8")
        except (TypeError, AttributeError):
            pass

    try:
        app()
    except Exception as e:
        err_console = Console(stderr=True)
        err_console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        logging.getLogger("installer_cli").debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
