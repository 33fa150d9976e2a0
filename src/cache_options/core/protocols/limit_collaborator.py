"""Limit collaborator protocol.

ONLY limit contract - normalises raw ``limit`` option values and turns
a limit into the eviction hooks enforcing it.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, List, Optional
from typing_extensions import Protocol, runtime_checkable

from ..entities.hook import Hook
from ..entities.limit import Limit


@runtime_checkable
class LimitCollaborator(Protocol):
    """Limit normalisation and hook generation."""

    def parse(self, raw: Any) -> Optional[Limit]:
        """Normalise a raw ``limit`` option value.

        Args:
            raw: Value supplied by the caller, None when absent

        Returns:
            Normalised limit, None when the cache is unbounded
        """
        ...

    def to_hooks(self, limit: Optional[Limit]) -> List[Hook]:
        """Eviction hooks for ``limit``, in notification order."""
        ...
