"""Base exceptions for cache-options.

All exceptions inherit from CacheOptionsError and carry an error code and
structured details next to the human-readable message.
"""

from typing import Any, Dict, Optional


class CacheOptionsError(Exception):
    """Base exception for all cache-options errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }
