"""Hook validator.

ONLY hook validation - checks assembled hook descriptors against the
descriptor contract and splits them by notification phase.

Following maximum separation architecture - one file = one purpose.
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from ...core.entities.hook import Hook, HookPhase
from ...core.exceptions.hook_validation_error import HookValidationError
from ...hooks.base import CacheHook


@dataclass
class HookValidationResult:
    """Result of hook validation."""

    is_valid: bool
    hooks: List[Hook] = field(default_factory=list)
    error: Optional[HookValidationError] = None

    @property
    def errors(self) -> List[str]:
        return [self.error.message] if self.error else []


class HookValidator:
    """Hook descriptor validator.

    Validates each descriptor for:
    - A ``CacheHook`` subclass as implementation
    - A known ``HookPhase``
    - Mapping ``server_args`` with string keys
    - Boolean ``asynchronous`` and ``results`` flags
    - ``max_timeout`` of None or a positive integer
    - ``provide`` as a sequence of strings

    The list is validated as a unit: the first offending entry fails the
    whole list.
    """

    def validate(self, hooks: Sequence[Any]) -> HookValidationResult:
        """Validate a hook list.

        Args:
            hooks: Candidate hook descriptors in assembly order

        Returns:
            Validation result holding the hooks or the first error
        """
        for index, hook in enumerate(hooks):
            error = self._check(index, hook)
            if error is not None:
                return HookValidationResult(is_valid=False, error=error)

        return HookValidationResult(is_valid=True, hooks=list(hooks))

    def validate_strict(self, hooks: Sequence[Any]) -> List[Hook]:
        """Validate a hook list, raising on the first invalid entry.

        Raises:
            HookValidationError: If any entry is invalid
        """
        result = self.validate(hooks)

        if not result.is_valid:
            raise result.error

        return result.hooks

    def group_by_phase(self, hooks: Sequence[Hook], phase: HookPhase) -> List[Hook]:
        """Hooks of ``phase`` in their original relative order."""
        return [hook for hook in hooks if hook.phase == phase]

    def partition(self, hooks: Sequence[Hook]) -> Tuple[List[Hook], List[Hook]]:
        """Split hooks into (pre, post) lists in a single pass."""
        pre_hooks: List[Hook] = []
        post_hooks: List[Hook] = []

        for hook in hooks:
            if hook.phase == HookPhase.PRE:
                pre_hooks.append(hook)
            else:
                post_hooks.append(hook)

        return pre_hooks, post_hooks

    def _check(self, index: int, hook: Any) -> Optional[HookValidationError]:
        if not isinstance(hook, Hook):
            return HookValidationError.not_a_hook(index, hook)

        implementation = hook.implementation
        if (
            not inspect.isclass(implementation)
            or not issubclass(implementation, CacheHook)
            or inspect.isabstract(implementation)
        ):
            return HookValidationError.invalid_implementation(index, hook)

        if not isinstance(hook.phase, HookPhase):
            return HookValidationError.invalid_phase(index, hook)

        server_args = hook.server_args
        if not isinstance(server_args, Mapping) or not all(isinstance(key, str) for key in server_args):
            return HookValidationError.invalid_server_args(index, hook)

        for flag in ("asynchronous", "results"):
            if not isinstance(getattr(hook, flag), bool):
                return HookValidationError.invalid_flag(index, hook, flag)

        timeout = hook.max_timeout
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0):
            return HookValidationError.invalid_timeout(index, hook)

        provide = hook.provide
        if not isinstance(provide, (list, tuple)) or not all(isinstance(item, str) for item in provide):
            return HookValidationError.invalid_provide(index, hook)

        return None


def create_hook_validator() -> HookValidator:
    """Create hook validator."""
    return HookValidator()
