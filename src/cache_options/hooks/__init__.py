"""Built-in cache hook implementations."""

from .base import CacheHook
from .stats import StatsHook
from .policies import LeastRecentlyWritten

__all__ = [
    "CacheHook",
    "StatsHook",
    "LeastRecentlyWritten",
]
