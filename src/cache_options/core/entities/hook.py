"""Hook descriptor entity.

ONLY hook description - which hook implementation to start, with which
arguments, and whether it runs before or after cache actions.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Type


class HookPhase(str, Enum):
    """When a hook is notified relative to the cache action."""
    PRE = "pre"
    POST = "post"


@dataclass(frozen=True)
class Hook:
    """Description of a hook to start alongside a cache instance.

    ``implementation`` must be a ``CacheHook`` subclass; the descriptor is
    only checked when the cache options are parsed, see ``HookValidator``.
    Hooks compare by value but are unhashable, since ``args`` may hold
    arbitrary caller data.
    """

    implementation: Type[Any]
    args: Any = None
    server_args: Mapping[str, Any] = field(default_factory=dict)
    phase: HookPhase = HookPhase.POST

    # Delivery behaviour
    asynchronous: bool = True
    max_timeout: Optional[int] = None
    results: bool = False  # hook receives action results
    provide: Tuple[str, ...] = ()

    __hash__ = None

    def __post_init__(self):
        if isinstance(self.server_args, Mapping):
            object.__setattr__(self, "server_args", MappingProxyType(dict(self.server_args)))

    @property
    def name(self) -> Optional[Any]:
        """Registered name of the hook, if one was given."""
        if isinstance(self.server_args, Mapping):
            return self.server_args.get("name")
        return None

    def is_pre(self) -> bool:
        return self.phase == HookPhase.PRE

    def is_post(self) -> bool:
        return self.phase == HookPhase.POST

    def to_dict(self) -> Dict[str, Any]:
        implementation = self.implementation
        return {
            "implementation": getattr(implementation, "__qualname__", repr(implementation)),
            "args": self.args,
            "server_args": dict(self.server_args) if isinstance(self.server_args, Mapping) else self.server_args,
            "phase": self.phase.value if isinstance(self.phase, Enum) else self.phase,
            "asynchronous": self.asynchronous,
            "max_timeout": self.max_timeout,
            "results": self.results,
            "provide": list(self.provide),
        }
