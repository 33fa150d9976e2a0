"""Fallback configurer.

ONLY fallback settings - the function computing missing values and the
extra arguments passed to it.

Following maximum separation architecture - one file = one purpose.
"""

import inspect
from typing import Any, Callable, Optional, Tuple

from ...core.value_objects.option_list import OptionList
from ...core.value_objects.option_name import OptionName


def is_single_argument_callable(value: Any) -> bool:
    """Check whether ``value`` can be called with a single positional argument.

    Callables taking optional extra parameters or ``*args`` qualify too.
    """
    if not callable(value):
        return False

    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError):
        return False

    try:
        signature.bind(None)
    except TypeError:
        return False

    return True


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class FallbackConfigurer:
    """Resolves the fallback function and its arguments.

    Unusable values are dropped silently: a fallback that cannot take a
    single argument becomes None, non-sequence arguments become ``()``.
    """

    def configure(self, options: OptionList) -> Tuple[Optional[Callable[[Any], Any]], Tuple[Any, ...]]:
        fallback = options.get(OptionName.FALLBACK, is_single_argument_callable)
        fallback_args = options.get(OptionName.FALLBACK_ARGS, is_sequence, ())
        return fallback, tuple(fallback_args)
