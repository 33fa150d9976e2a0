"""Name deriver protocol.

ONLY naming contract - derives the registered names of the processes
supporting a cache instance from the cache identifier.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class NameDeriver(Protocol):
    """Deterministic naming of cache support processes.

    Names are derived rather than handed out as live references, so any
    process started later for the cache must register under exactly the
    name returned here.
    """

    def stats(self, cache: Any) -> str:
        """Name of the statistics hook of ``cache``."""
        ...

    def janitor(self, cache: Any) -> str:
        """Name of the expiry sweeper of ``cache``."""
        ...

    def manager(self, cache: Any) -> str:
        """Name of the transaction manager of ``cache``."""
        ...
