"""
Starts installer executables as detached processes.

The launcher's responsibility ends once the operating system has created the
process: it never waits for the installer or inspects its exit code.
"""

import logging
import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

from installer_cli.exceptions import LaunchError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LaunchResult:
    """The outcome of a successful launch. pid is None when the shell started it."""

    path: Path
    pid: int | None = None


def launch(file_path: str | os.PathLike) -> LaunchResult:
    """
    Spawns the executable at file_path and returns immediately.

    On Windows the file is handed to the shell so installers that request
    elevation still start. Elsewhere the process is put in its own session with
    stdio detached.

    Raises:
        LaunchError: If the file is missing or the process cannot be created.
    """
    path = Path(file_path).resolve()
    if not path.is_file():
        raise LaunchError(f"Installer not found: {path}")

    log.debug(f"Launching {path}")
    try:
        if sys.platform == "win32":
            os.startfile(path)  # noqa: S606
            return LaunchResult(path=path)
        process = subprocess.Popen(  # noqa: S603
            [str(path)],
            cwd=path.parent,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        raise LaunchError(f"Could not start '{path.name}': {e}") from e
    return LaunchResult(path=path, pid=process.pid)
