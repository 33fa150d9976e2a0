"""Hook validation exception.

ONLY hook errors - exception raised when an entry of the assembled hook
list does not satisfy the hook descriptor contract.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Optional

from .base import CacheOptionsError


class HookValidationError(CacheOptionsError):
    """Hook descriptor validation error.

    Raised when a hook entry:
    - Is not a hook descriptor at all
    - References something that is not a hook implementation
    - Carries an unknown phase
    - Has malformed startup arguments or delivery settings
    """

    def __init__(
        self,
        index: int,
        hook: Any,
        reason: str,
        error_code: Optional[str] = None,
        details: Optional[dict] = None
    ):
        """Initialize hook validation error.

        Args:
            index: Position of the offending entry in the hook list
            hook: The offending entry
            reason: Human-readable reason for validation failure
            error_code: Optional machine-readable error code
            details: Optional additional error details
        """
        self.index = index
        self.hook = hook
        self.reason = reason

        super().__init__(
            f"Invalid hook at position {index} ({hook!r}): {reason}",
            error_code=error_code or "HOOK_INVALID",
            details={"index": index, **(details or {})}
        )

    @classmethod
    def not_a_hook(cls, index: int, hook: Any) -> "HookValidationError":
        """Create exception for an entry that is not a hook descriptor."""
        return cls(
            index=index,
            hook=hook,
            reason=f"expected a Hook descriptor, got {type(hook).__name__}",
            error_code="HOOK_NOT_A_DESCRIPTOR"
        )

    @classmethod
    def invalid_implementation(cls, index: int, hook: Any) -> "HookValidationError":
        """Create exception for a descriptor without a valid implementation."""
        return cls(
            index=index,
            hook=hook,
            reason="implementation must be a CacheHook subclass",
            error_code="HOOK_INVALID_IMPLEMENTATION",
            details={"implementation": repr(getattr(hook, "implementation", None))}
        )

    @classmethod
    def invalid_phase(cls, index: int, hook: Any) -> "HookValidationError":
        """Create exception for a descriptor with an unknown phase."""
        return cls(
            index=index,
            hook=hook,
            reason="phase must be HookPhase.PRE or HookPhase.POST",
            error_code="HOOK_INVALID_PHASE",
            details={"phase": repr(getattr(hook, "phase", None))}
        )

    @classmethod
    def invalid_server_args(cls, index: int, hook: Any) -> "HookValidationError":
        """Create exception for malformed startup arguments."""
        return cls(
            index=index,
            hook=hook,
            reason="server_args must be a mapping with string keys",
            error_code="HOOK_INVALID_SERVER_ARGS"
        )

    @classmethod
    def invalid_flag(cls, index: int, hook: Any, flag: str) -> "HookValidationError":
        """Create exception for a non-boolean delivery flag."""
        return cls(
            index=index,
            hook=hook,
            reason=f"{flag} must be a boolean",
            error_code="HOOK_INVALID_FLAG",
            details={"flag": flag}
        )

    @classmethod
    def invalid_timeout(cls, index: int, hook: Any) -> "HookValidationError":
        """Create exception for a malformed notification timeout."""
        return cls(
            index=index,
            hook=hook,
            reason="max_timeout must be None or a positive integer",
            error_code="HOOK_INVALID_TIMEOUT"
        )

    @classmethod
    def invalid_provide(cls, index: int, hook: Any) -> "HookValidationError":
        """Create exception for a malformed provide list."""
        return cls(
            index=index,
            hook=hook,
            reason="provide must be a sequence of strings",
            error_code="HOOK_INVALID_PROVIDE"
        )
