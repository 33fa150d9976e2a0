"""Transaction configurer."""

from typing import Any, Tuple

from ...core.protocols.name_deriver import NameDeriver
from ...core.value_objects.option_list import OptionList
from ...core.value_objects.option_name import OptionName


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


class TransactionConfigurer:
    """Resolves the transaction flag and the transaction manager name.

    The manager name is resolved even when transactions are disabled, so
    transactions can be switched on later without parsing again.
    """

    def __init__(self, names: NameDeriver):
        self._names = names

    def configure(self, cache: Any, options: OptionList) -> Tuple[bool, str]:
        transactions = options.get(OptionName.TRANSACTIONS, _is_boolean, False)
        return transactions, self._names.manager(cache)
