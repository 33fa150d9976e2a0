"""Default limit collaborator.

ONLY limit normalisation - accepts a ``Limit``, a positive entry count or
a mapping of ``Limit`` fields, and produces the policy hook for it.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from dataclasses import fields
from typing import Any, List, Mapping, Optional

from ...core.entities.hook import Hook, HookPhase
from ...core.entities.limit import Limit

logger = logging.getLogger(__name__)

_LIMIT_FIELDS = frozenset(f.name for f in fields(Limit))


class DefaultLimitCollaborator:
    """Limit handling used when no other collaborator is injected."""

    def parse(self, raw: Any) -> Optional[Limit]:
        """Normalise a raw ``limit`` option value.

        Mappings go through ``Limit`` validation, so a malformed policy or
        options value yields no limit rather than a broken policy hook.

        Args:
            raw: ``Limit``, positive int, mapping of ``Limit`` fields or None

        Returns:
            Normalised limit, None for unbounded caches or unusable values
        """
        if raw is None:
            return None

        if isinstance(raw, Limit):
            return raw

        if isinstance(raw, int) and not isinstance(raw, bool):
            return self._build(raw, size=raw)

        if isinstance(raw, Mapping):
            known = {key: value for key, value in raw.items() if key in _LIMIT_FIELDS}
            return self._build(raw, **known)

        logger.debug("Unsupported limit value %r, cache is unbounded", raw)
        return None

    def to_hooks(self, limit: Optional[Limit]) -> List[Hook]:
        """Eviction hooks for ``limit``, empty for unbounded caches."""
        if limit is None:
            return []

        return [
            Hook(
                implementation=limit.policy,
                args=(limit.size, limit.reclaim, dict(limit.options)),
                phase=HookPhase.POST,
                provide=("worker",)
            )
        ]

    def _build(self, raw: Any, **kwargs: Any) -> Optional[Limit]:
        try:
            return Limit(**kwargs)
        except (TypeError, ValueError) as e:
            logger.debug("Invalid limit value %r (%s), cache is unbounded", raw, e)
            return None


def create_limit_collaborator() -> DefaultLimitCollaborator:
    """Create the default limit collaborator."""
    return DefaultLimitCollaborator()
