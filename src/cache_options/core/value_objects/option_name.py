"""Option name value object.

ONLY option naming - the fixed set of option names recognised when a
cache instance is configured, plus name normalisation.

Following maximum separation architecture - one file = one purpose.
"""

from enum import Enum
from typing import Any, Optional


class OptionName(str, Enum):
    """Recognised cache option names."""
    DISABLE_ODE = "disable_ode"
    TABLE_OPTS = "table_opts"
    LIMIT = "limit"
    RECORD_STATS = "record_stats"
    HOOKS = "hooks"
    TRANSACTIONS = "transactions"
    FALLBACK = "fallback"
    FALLBACK_ARGS = "fallback_args"
    DEFAULT_TTL = "default_ttl"
    TTL_INTERVAL = "ttl_interval"

    @classmethod
    def resolve(cls, name: Any) -> Optional["OptionName"]:
        """Resolve a caller supplied key to a recognised option name.

        Strings are matched case-insensitively with ``-`` treated as ``_``,
        so ``"ttl-interval"`` and ``"TTL_INTERVAL"`` both resolve.

        Args:
            name: Key as supplied in the option list

        Returns:
            Matching option name, None when the key is not recognised
        """
        if isinstance(name, cls):
            return name

        if not isinstance(name, str):
            return None

        normalized = normalize_key(name)
        normalized = _ALIASES.get(normalized, normalized)

        try:
            return cls(normalized)
        except ValueError:
            return None


def normalize_key(key: str) -> str:
    """Normalise a textual key (``Write-Concurrency`` -> ``write_concurrency``)."""
    return key.strip().lower().replace("-", "_")


# Alternative spellings accepted for an option
_ALIASES = {
    "ets_opts": OptionName.TABLE_OPTS.value,
    "table_options": OptionName.TABLE_OPTS.value,
}
