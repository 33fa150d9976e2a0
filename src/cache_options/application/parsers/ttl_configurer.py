"""TTL configurer.

ONLY expiration settings - default time-to-live, janitor sweep interval
and whether a janitor runs at all.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Any, Optional, Tuple

from ...core.protocols.name_deriver import NameDeriver
from ...core.value_objects.option_list import OptionList
from ...core.value_objects.option_name import OptionName

logger = logging.getLogger(__name__)

# ttl_interval value switching the janitor off
DISABLED_INTERVAL = -1


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_positive_integer(value: Any) -> bool:
    return _is_integer(value) and value > 0


def is_interval(value: Any) -> bool:
    return _is_integer(value) and value >= DISABLED_INTERVAL


class TTLConfigurer:
    """Resolves default TTL, sweep interval and janitor name.

    Resolution order:
    - no interval but a default TTL: sweep every ``default_interval`` ms
    - an interval of 0 or more: sweep at that interval
    - otherwise (interval of -1, or neither option set): no janitor
    """

    def __init__(self, names: NameDeriver, default_interval: int = 3000):
        """Initialize TTL configurer.

        Args:
            names: Name deriver for the janitor name
            default_interval: Sweep interval in milliseconds used when only
                a default TTL is given
        """
        self._names = names
        self._default_interval = default_interval

    def configure(
        self,
        cache: Any,
        options: OptionList
    ) -> Tuple[Optional[int], Optional[int], Optional[str]]:
        """Resolve expiration settings.

        Args:
            cache: Cache identifier
            options: Parsed option list

        Returns:
            Tuple of (default_ttl, ttl_interval, janitor); interval and
            janitor are either both set or both None
        """
        janitor = self._names.janitor(cache)

        default_ttl = options.get(OptionName.DEFAULT_TTL, is_positive_integer)
        ttl_interval = options.get(OptionName.TTL_INTERVAL, is_interval)

        if ttl_interval is None and default_ttl is not None:
            return default_ttl, self._default_interval, janitor

        if ttl_interval is not None and ttl_interval > DISABLED_INTERVAL:
            return default_ttl, ttl_interval, janitor

        logger.debug("Janitor disabled for cache %r", cache)
        return default_ttl, None, None
