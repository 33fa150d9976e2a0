"""Application layer: sub-parsers, validators and the options parser."""

from .parsers import (
    FallbackConfigurer,
    HookAssembler,
    LimitParser,
    TableOptionsBuilder,
    TransactionConfigurer,
    TTLConfigurer,
)
from .services import OptionsParser, create_options_parser, parse_options
from .validators import HookValidationResult, HookValidator, create_hook_validator

__all__ = [
    "FallbackConfigurer",
    "HookAssembler",
    "LimitParser",
    "TableOptionsBuilder",
    "TransactionConfigurer",
    "TTLConfigurer",
    "OptionsParser",
    "create_options_parser",
    "parse_options",
    "HookValidationResult",
    "HookValidator",
    "create_hook_validator",
]
