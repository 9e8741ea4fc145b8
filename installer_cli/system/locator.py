"""
Fallback search for an installer whose expected file name is absent.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

log = logging.getLogger(__name__)

# Informal product hints and the file name fragment that identifies them.
KNOWN_PATTERNS = ("EzDent", "Ez3D", "EzServer")


def search_pattern_for(hint: str) -> str:
    """
    Maps an informal product hint to the pattern used to find its installer.

    A hint naming a known product (e.g. 'EzDent-i v3') maps to that product's
    pattern; any other hint is used verbatim.
    """
    folded = hint.casefold()
    for pattern in KNOWN_PATTERNS:
        if pattern.casefold() in folded:
            return pattern
    return hint


def match_installer(hint: str, file_names: Iterable[str]) -> str | None:
    """
    Returns the first file name containing the hint's pattern, ignoring case.

    Pure function: the caller decides the order of file_names, and therefore
    which name wins when several match.
    """
    pattern = search_pattern_for(hint).casefold()
    for name in file_names:
        if pattern in name.casefold():
            return name
    return None


def list_files(directory: Path) -> list[str]:
    """
    Lists the regular files directly inside directory (non-recursive).

    Names are sorted case-insensitively, then by their exact spelling, so the
    search result does not depend on filesystem enumeration order.
    """
    with os.scandir(directory) as entries:
        names = [entry.name for entry in entries if entry.is_file()]
    return sorted(names, key=lambda n: (n.casefold(), n))


def locate(hint: str, directory: str | os.PathLike) -> Path | None:
    """
    Searches directory for a file plausibly belonging to the hinted product.

    Returns:
        The absolute path of the first match in sorted name order, or None.
    """
    directory = Path(directory).resolve()
    found = match_installer(hint, list_files(directory))
    if found is None:
        log.debug(f"No file in '{directory}' matches '{search_pattern_for(hint)}'")
        return None
    return directory / found
