"""
Counters for a single run, displayed in the completion panel.
"""

import time
from dataclasses import dataclass, field


@dataclass
class RunSummary:
    """Tracks what happened to each selected product during a run."""

    downloaded: int = 0
    download_failed: int = 0
    bytes_downloaded: int = 0
    launched: int = 0
    launch_failed: int = 0
    missing: int = 0
    _started: float = field(default_factory=time.monotonic, repr=False)

    @property
    def elapsed_s(self) -> float:
        """Seconds since the run started."""
        return time.monotonic() - self._started

    @property
    def failures(self) -> int:
        """Total number of per-entry problems reported during the run."""
        return self.download_failed + self.launch_failed + self.missing
