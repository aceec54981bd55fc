"""Error handling for Folio pipelines."""
from typing import Any, Dict, Optional


class FolioError(Exception):
    """Base exception for Folio errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize error.

        Args:
            message: Error message.
            details: Optional context dictionary.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(FolioError):
    """Invalid construction arguments or configuration."""
    pass
