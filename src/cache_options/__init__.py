"""cache-options - option parsing for cache instances.

Turns the option list given when a cache instance is created into one
validated, read-only CacheState consumed by the table, janitor, hook
runtime, transaction manager and fallback machinery.

Logging is not configured on import; applications call ``setup_logging()``
once at startup.
"""

from .__version__ import __version__

from .config import OptionsSettings, get_settings, setup_logging

from .core.entities import CacheState, Hook, HookPhase, Limit
from .core.exceptions import CacheOptionsError, HookValidationError
from .core.protocols import LimitCollaborator, NameDeriver
from .core.value_objects import OptionList, OptionName

from .hooks import CacheHook, LeastRecentlyWritten, StatsHook

from .application import (
    HookValidator,
    OptionsParser,
    create_options_parser,
    parse_options,
)

from .infrastructure import DefaultLimitCollaborator, DefaultNameDeriver

__all__ = [
    "__version__",

    # Configuration
    "OptionsSettings",
    "get_settings",
    "setup_logging",

    # Core
    "CacheState",
    "Hook",
    "HookPhase",
    "Limit",
    "OptionList",
    "OptionName",

    # Exceptions
    "CacheOptionsError",
    "HookValidationError",

    # Protocols
    "LimitCollaborator",
    "NameDeriver",

    # Hooks
    "CacheHook",
    "LeastRecentlyWritten",
    "StatsHook",

    # Parsing
    "HookValidator",
    "OptionsParser",
    "create_options_parser",
    "parse_options",

    # Default collaborators
    "DefaultLimitCollaborator",
    "DefaultNameDeriver",
]
