"""Cache option validators."""

from .hook_validator import HookValidationResult, HookValidator, create_hook_validator

__all__ = [
    "HookValidationResult",
    "HookValidator",
    "create_hook_validator",
]
