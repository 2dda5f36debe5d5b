"""Exception hierarchy for header-cleaner."""

from typing import Dict, Optional


class HeaderCleanerError(Exception):
    """Base exception for all header-cleaner errors."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class CircularDependencyError(HeaderCleanerError):
    """
    Raised when adding an include edge would close a cycle.

    Attributes:
        source: Relative path of the file whose include closed the cycle.
        target: Relative path of the included file.
    """

    def __init__(self, source: str, target: str):
        super().__init__(f"circular dependency detected. {target} <-> {source}")
        self.source = source
        self.target = target


class ScanRootError(HeaderCleanerError):
    """Raised when the scan root does not exist or is not a directory."""

    def __init__(self, path: str):
        super().__init__(f"'{path}' is not a directory")
        self.path = path


class ConfigError(HeaderCleanerError):
    """Raised when a configuration file cannot be read or is invalid."""

    def __init__(self, message: str, path: Optional[str] = None):
        details = {"config": path} if path else None
        super().__init__(message, details)
        self.path = path
