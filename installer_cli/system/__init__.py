"""
System Integration Layer.

This package handles interaction with the host: starting installer
processes and searching the working directory for installer files.
"""

from .launcher import LaunchResult, launch
from .locator import locate, match_installer, search_pattern_for

__all__ = ["LaunchResult", "launch", "locate", "match_installer", "search_pattern_for"]
