"""Eviction policy hooks.

ONLY eviction policy contracts - hooks produced from a cache size limit.
The hook runtime drives them after writes; removing entries is done by
the table owner using the reclaim count computed here.

Following maximum separation architecture - one file = one purpose.
"""

import math
from typing import Any, Dict, Optional

from .base import CacheHook


class LeastRecentlyWritten(CacheHook):
    """Evicts the oldest written entries once the size limit is crossed.

    Started with ``args = (size, reclaim, options)`` as produced by the
    limit collaborator.
    """

    WRITE_ACTIONS = frozenset({"set", "update", "incr", "decr", "get_and_update"})

    def __init__(self, **server_args: Any):
        super().__init__(**server_args)
        self.size: Optional[int] = None
        self.reclaim: float = 0.1
        self.options: Dict[str, Any] = {}
        self.writes = 0

    def init(self, args: Any) -> None:
        super().init(args)
        self.size, self.reclaim, self.options = args

    def handle_notify(self, action: Any, result: Any = None) -> None:
        action_name = action[0] if isinstance(action, (list, tuple)) and action else action
        if action_name in self.WRITE_ACTIONS:
            self.writes += 1

    def reclaim_count(self, current_size: int) -> int:
        """Number of entries to remove for a table of ``current_size`` entries.

        Returns 0 while the table is within its limit, otherwise the overflow
        plus ``reclaim`` of the limit (rounded up).
        """
        if self.size is None or current_size <= self.size:
            return 0

        overflow = current_size - self.size
        return overflow + math.ceil(self.size * self.reclaim)
