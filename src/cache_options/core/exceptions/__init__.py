"""Cache option exceptions.

One exception per file following maximum separation architecture.
"""

from .base import CacheOptionsError
from .hook_validation_error import HookValidationError

__all__ = [
    "CacheOptionsError",
    "HookValidationError",
]
