"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class InstallerCliError(Exception):
    """Base exception for all application-specific errors."""


class InvalidSelectionError(InstallerCliError):
    """Raised when a menu answer is not one of the offered choices."""


class DownloadError(InstallerCliError):
    """Raised when an installer could not be fetched or failed verification."""


class LaunchError(InstallerCliError):
    """Raised when the operating system refuses to start an installer process."""
