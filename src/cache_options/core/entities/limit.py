"""Cache size limit entity."""

import inspect
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Type

from ...hooks.base import CacheHook
from ...hooks.policies import LeastRecentlyWritten


@dataclass(frozen=True)
class Limit:
    """Size bound for a cache instance.

    Attributes:
        size: Maximum number of entries
        policy: Concrete hook implementation enforcing the bound
        reclaim: Fraction of ``size`` to free once the bound is crossed
        options: Extra options handed to the policy
    """

    size: int
    policy: Type[CacheHook] = LeastRecentlyWritten
    reclaim: float = 0.1
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size <= 0:
            raise ValueError("size must be a positive integer")

        if isinstance(self.reclaim, bool) or not isinstance(self.reclaim, (int, float)):
            raise ValueError("reclaim must be a number")

        if not 0 < self.reclaim <= 1:
            raise ValueError("reclaim must be within (0, 1]")

        policy = self.policy
        if not inspect.isclass(policy) or not issubclass(policy, CacheHook) or inspect.isabstract(policy):
            raise ValueError("policy must be a concrete CacheHook subclass")

        if not isinstance(self.options, Mapping):
            raise ValueError("options must be a mapping")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "policy": self.policy.__qualname__,
            "reclaim": self.reclaim,
            "options": dict(self.options),
        }
