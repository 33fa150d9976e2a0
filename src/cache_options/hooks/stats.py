"""Statistics hook.

ONLY usage statistics - built-in post hook counting cache actions,
enabled through the ``record_stats`` option.
"""

from collections import Counter
from typing import Any, Dict

from .base import CacheHook


class StatsHook(CacheHook):
    """Counts cache actions and their outcomes."""

    def __init__(self, **server_args: Any):
        super().__init__(**server_args)
        self.actions: Counter = Counter()
        self.outcomes: Counter = Counter()

    @property
    def name(self) -> Any:
        return self.server_args.get("name")

    def handle_notify(self, action: Any, result: Any = None) -> None:
        action_name = action[0] if isinstance(action, (list, tuple)) and action else action
        self.actions[str(action_name)] += 1

        # results arrive as (status, value) pairs
        if isinstance(result, (list, tuple)) and result:
            self.outcomes[str(result[0])] += 1

    def get_stats(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "total": sum(self.actions.values()),
            "actions": dict(self.actions),
            "outcomes": dict(self.outcomes),
        }

    def reset(self) -> None:
        self.actions.clear()
        self.outcomes.clear()
