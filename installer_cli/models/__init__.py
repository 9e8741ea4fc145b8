"""
Data Models Layer.

This package contains the catalog, configuration, and run summary models
used throughout the application.
"""

from .catalog import CATALOG, Action, Product
from .config import InstallerConfig
from .summary import RunSummary

__all__ = ["CATALOG", "Action", "InstallerConfig", "Product", "RunSummary"]
