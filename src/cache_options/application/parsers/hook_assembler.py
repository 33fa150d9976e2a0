"""Hook assembler.

ONLY hook assembly - collects the stats hook, the limit eviction hooks
and the caller hooks, validates them as one list and splits them into
pre and post hooks.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Any, List, Optional, Tuple

from ..validators.hook_validator import HookValidator
from ...core.entities.hook import Hook, HookPhase
from ...core.entities.limit import Limit
from ...core.exceptions.hook_validation_error import HookValidationError
from ...core.protocols.limit_collaborator import LimitCollaborator
from ...core.protocols.name_deriver import NameDeriver
from ...core.value_objects.option_list import OptionList
from ...core.value_objects.option_name import OptionName
from ...hooks.stats import StatsHook

logger = logging.getLogger(__name__)


class HookAssembler:
    """Assembles and validates the hooks of a cache instance.

    Hooks are ordered as: stats hook (when ``record_stats`` is set), then
    the limit hooks in collaborator order, then the caller hooks. Within
    each phase this order is the order notifications are delivered in.
    """

    def __init__(
        self,
        names: NameDeriver,
        limits: LimitCollaborator,
        validator: HookValidator
    ):
        self._names = names
        self._limits = limits
        self._validator = validator

    def assemble(
        self,
        cache: Any,
        options: OptionList,
        limit: Optional[Limit]
    ) -> Tuple[List[Hook], List[Hook]]:
        """Build the (pre, post) hook lists.

        Args:
            cache: Cache identifier
            options: Parsed option list
            limit: Resolved limit, None for unbounded caches

        Returns:
            Tuple of pre hooks and post hooks

        Raises:
            HookValidationError: If any assembled entry is invalid
        """
        candidates: List[Any] = []

        if options.get(OptionName.RECORD_STATS):
            candidates.append(self.stats_hook(cache))

        candidates.extend(self._limits.to_hooks(limit))
        candidates.extend(self._caller_hooks(options))

        try:
            hooks = self._validator.validate_strict(candidates)
        except HookValidationError as e:
            logger.warning("Hook validation failed for cache %r: %s", cache, e.message)
            raise

        return self._validator.partition(hooks)

    def stats_hook(self, cache: Any) -> Hook:
        """Descriptor of the statistics hook of ``cache``."""
        return Hook(
            implementation=StatsHook,
            server_args={"name": self._names.stats(cache)},
            phase=HookPhase.POST
        )

    def _caller_hooks(self, options: OptionList) -> List[Any]:
        hooks = options.get(OptionName.HOOKS, default=[])

        if hooks is None:
            return []

        # a lone descriptor counts as a one element list
        if not isinstance(hooks, (list, tuple)):
            return [hooks]

        return list(hooks)
