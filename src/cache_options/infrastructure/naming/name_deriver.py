"""Default name deriver.

ONLY name derivation - suffix based names (``<cache>_stats``,
``<cache>_janitor``, ``<cache>_manager``) for cache support processes.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Optional

from ...config.settings import OptionsSettings, get_settings


class DefaultNameDeriver:
    """Derives process names by appending a suffix to the cache name."""

    def __init__(self, settings: Optional[OptionsSettings] = None):
        self._settings = settings or get_settings()

    def stats(self, cache: Any) -> str:
        return self._derive(cache, self._settings.stats_suffix)

    def janitor(self, cache: Any) -> str:
        return self._derive(cache, self._settings.janitor_suffix)

    def manager(self, cache: Any) -> str:
        return self._derive(cache, self._settings.manager_suffix)

    def _derive(self, cache: Any, suffix: str) -> str:
        return f"{cache}{self._settings.name_separator}{suffix}"


def create_name_deriver(settings: Optional[OptionsSettings] = None) -> DefaultNameDeriver:
    """Create the default name deriver."""
    return DefaultNameDeriver(settings=settings)
