"""Cache option entities."""

from .hook import Hook, HookPhase
from .limit import Limit
from .cache_state import CacheState

__all__ = [
    "Hook",
    "HookPhase",
    "Limit",
    "CacheState",
]
