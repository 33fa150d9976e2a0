"""Option list value object.

ONLY option lookup - immutable view over the caller supplied
``(name, value)`` pairs with first-match lookup and soft defaulting.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Tuple

from .option_name import OptionName

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class OptionList:
    """Ordered, read-only option list.

    The caller may repeat a name; lookups always return the first entry
    carrying that name. Unknown names and malformed entries are kept out of
    the list entirely.
    """

    entries: Tuple[Tuple[OptionName, Any], ...] = ()

    @classmethod
    def coerce(cls, options: Any) -> "OptionList":
        """Build an option list from arbitrary caller input.

        Lists and tuples of pairs are read in order, mappings in iteration
        order. Any other input yields an empty option list.

        Args:
            options: Raw caller input

        Returns:
            Option list holding only recognised entries
        """
        if isinstance(options, cls):
            return options

        if isinstance(options, Mapping):
            pairs = list(options.items())
        elif isinstance(options, (list, tuple)):
            pairs = list(options)
        else:
            if options is not None:
                logger.debug(
                    "Ignoring option input of type %s, using empty options",
                    type(options).__name__
                )
            return cls()

        entries = []
        for pair in pairs:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                logger.debug("Ignoring malformed option entry: %r", pair)
                continue

            name = OptionName.resolve(pair[0])
            if name is None:
                logger.debug("Ignoring unknown option: %r", pair[0])
                continue

            entries.append((name, pair[1]))

        return cls(tuple(entries))

    def lookup(self, name: OptionName, default: Any = None) -> Any:
        """Return the raw value of the first entry named ``name``."""
        for entry_name, value in self.entries:
            if entry_name is name:
                return value
        return default

    def get(
        self,
        name: OptionName,
        accept: Optional[Callable[[Any], bool]] = None,
        default: Any = None
    ) -> Any:
        """Return the first value for ``name`` if ``accept`` allows it.

        Only the first entry is considered; when it is rejected the default
        is returned and later duplicates are not consulted.

        Args:
            name: Option to read
            accept: Predicate the value must satisfy
            default: Value used when the option is absent or rejected

        Returns:
            Accepted value or the default
        """
        value = self.lookup(name, _MISSING)
        if value is _MISSING:
            return default

        if accept is not None and not accept(value):
            logger.debug(
                "Discarding invalid value for option '%s': %r",
                name.value, value
            )
            return default

        return value

    def __contains__(self, name: object) -> bool:
        return any(entry_name is name for entry_name, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)
