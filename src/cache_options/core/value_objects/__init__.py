"""Cache option value objects."""

from .option_name import OptionName, normalize_key
from .option_list import OptionList

__all__ = [
    "OptionName",
    "OptionList",
    "normalize_key",
]
