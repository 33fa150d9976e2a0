"""Cache state entity.

ONLY the parsed cache settings - the fully populated, read-only record
handed to the table, janitor, hook runtime, transaction manager and
fallback machinery of one cache instance.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .hook import Hook
from .limit import Limit


@dataclass(frozen=True)
class CacheState:
    """Settings of a single cache instance.

    Built once by ``OptionsParser.parse`` right before the supporting
    processes of the cache are started, and never modified afterwards.
    Every field other than the cache and its manager name carries an
    explicit default so a state is always complete.
    """

    # Core identity
    cache: Any
    manager: str  # transaction manager, resolved even when transactions are off

    # Table settings
    disable_ode: bool = False
    table_options: Mapping[str, Any] = field(default_factory=dict)

    # Expiration
    default_ttl: Optional[int] = None
    ttl_interval: Optional[int] = None  # milliseconds
    janitor: Optional[str] = None

    # Fallback computation
    fallback: Optional[Callable[[Any], Any]] = None
    fallback_args: Tuple[Any, ...] = ()

    # Limits and hooks
    limit: Optional[Limit] = None
    pre_hooks: Tuple[Hook, ...] = ()
    post_hooks: Tuple[Hook, ...] = ()

    # Transactions
    transactions: bool = False

    def __post_init__(self):
        """Freeze container fields and check cross-field invariants."""
        if self.manager is None:
            raise ValueError("manager must be set")

        if (self.janitor is None) != (self.ttl_interval is None):
            raise ValueError("janitor and ttl_interval must be set together")

        object.__setattr__(self, "table_options", MappingProxyType(dict(self.table_options)))
        object.__setattr__(self, "fallback_args", tuple(self.fallback_args))
        object.__setattr__(self, "pre_hooks", tuple(self.pre_hooks))
        object.__setattr__(self, "post_hooks", tuple(self.post_hooks))

    @property
    def sweeping_enabled(self) -> bool:
        """Whether a janitor should be started for this cache."""
        return self.janitor is not None

    @property
    def hooks(self) -> Tuple[Hook, ...]:
        """All hooks, pre hooks first."""
        return self.pre_hooks + self.post_hooks

    def to_dict(self) -> Dict[str, Any]:
        """Convert state to a plain dictionary for logging and inspection."""
        fallback = self.fallback
        return {
            "cache": self.cache,
            "disable_ode": self.disable_ode,
            "table_options": dict(self.table_options),
            "default_ttl": self.default_ttl,
            "ttl_interval": self.ttl_interval,
            "janitor": self.janitor,
            "fallback": getattr(fallback, "__qualname__", repr(fallback)) if fallback else None,
            "fallback_args": list(self.fallback_args),
            "limit": self.limit.to_dict() if self.limit else None,
            "pre_hooks": [hook.to_dict() for hook in self.pre_hooks],
            "post_hooks": [hook.to_dict() for hook in self.post_hooks],
            "transactions": self.transactions,
            "manager": self.manager,
        }

    def __str__(self) -> str:
        return f"CacheState(cache={self.cache!r}, hooks={len(self.hooks)})"
