"""Table options builder.

ONLY table options - extracts the key-value table tuning options and
injects the concurrency defaults the caller did not set.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Any, Dict, Mapping

from ...core.value_objects.option_list import OptionList
from ...core.value_objects.option_name import OptionName, normalize_key

logger = logging.getLogger(__name__)


class TableOptionsBuilder:
    """Builds table options with concurrency enabled by default."""

    DEFAULTS = {
        "write_concurrency": True,
        "read_concurrency": True,
    }

    def build(self, options: OptionList) -> Dict[str, Any]:
        """Build the table options.

        Args:
            options: Parsed option list

        Returns:
            Table options; caller values always win over the defaults
        """
        table_options = self._to_dict(options.lookup(OptionName.TABLE_OPTS))

        for key, value in self.DEFAULTS.items():
            table_options.setdefault(key, value)

        return table_options

    def _to_dict(self, raw: Any) -> Dict[str, Any]:
        if raw is None:
            return {}

        if isinstance(raw, Mapping):
            items = list(raw.items())
        elif isinstance(raw, (list, tuple)):
            items = []
            for entry in raw:
                if isinstance(entry, str):
                    items.append((entry, True))  # bare flag
                elif isinstance(entry, (list, tuple)) and len(entry) == 2:
                    items.append(tuple(entry))
                else:
                    logger.debug("Ignoring malformed table option: %r", entry)
        else:
            logger.debug("Discarding invalid table options: %r", raw)
            return {}

        table_options: Dict[str, Any] = {}
        for key, value in items:
            if isinstance(key, str):
                key = normalize_key(key)
            table_options.setdefault(key, value)

        return table_options
