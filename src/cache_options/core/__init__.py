"""Core domain of cache-options: entities, value objects, protocols, exceptions."""

from .entities import CacheState, Hook, HookPhase, Limit
from .exceptions import CacheOptionsError, HookValidationError
from .protocols import LimitCollaborator, NameDeriver
from .value_objects import OptionList, OptionName

__all__ = [
    "CacheState",
    "Hook",
    "HookPhase",
    "Limit",
    "CacheOptionsError",
    "HookValidationError",
    "LimitCollaborator",
    "NameDeriver",
    "OptionList",
    "OptionName",
]
