"""Cache hook base class.

ONLY the hook implementation contract - every hook referenced by a hook
descriptor must derive from ``CacheHook``.

Following maximum separation architecture - one file = one purpose.
"""

from abc import ABC, abstractmethod
from typing import Any


class CacheHook(ABC):
    """Base class for cache notification hooks.

    The hook runtime creates one instance per descriptor, calls ``init`` with
    the descriptor ``args`` and then ``handle_notify`` for every cache action,
    either before (pre hooks) or after (post hooks) the action runs.
    """

    def __init__(self, **server_args: Any):
        self.server_args = server_args
        self.args: Any = None

    def init(self, args: Any) -> None:
        """Receive the descriptor arguments when the hook starts."""
        self.args = args

    @abstractmethod
    def handle_notify(self, action: Any, result: Any = None) -> Any:
        """Handle a cache action notification.

        Args:
            action: The cache action, e.g. ``("get", "key")``
            result: Outcome of the action (post hooks only)
        """
        ...
