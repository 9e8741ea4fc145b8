"""
Transfer Layer.

This package is responsible for fetching installers over HTTPS and checking
the downloaded files.
"""

from .downloader import Downloader, build_ssl_context, create_session
from .integrity import FileIntegrityChecker

__all__ = ["Downloader", "FileIntegrityChecker", "build_ssl_context", "create_session"]
