"""
Provides methods for checking the integrity of downloaded installer files.
"""

import logging
import os

log = logging.getLogger(__name__)


class FileIntegrityChecker:
    """A collection of static methods for validating downloaded files."""

    @staticmethod
    def check_installer(filepath: str | os.PathLike) -> bool:
        """
        Performs a basic integrity check on a downloaded installer.

        No checksum or signature is verified; the file only has to exist and
        hold at least one byte.

        Args:
            filepath: Path to the downloaded file.

        Returns:
            True if the file exists and is non-empty, False otherwise.
        """
        try:
            size = os.path.getsize(filepath)
        except FileNotFoundError:
            log.warning(f"Integrity check failed for '{filepath}': File is missing.")
            return False
        except OSError as e:
            log.warning(f"Integrity check failed for '{filepath}': {e}")
            return False
        if size <= 0:
            log.warning(f"Integrity check failed for '{filepath}': File is empty.")
            return False
        return True
