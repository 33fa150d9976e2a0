"""Cache option sub-parsers, one per group of settings."""

from .table_options import TableOptionsBuilder
from .limit_parser import LimitParser
from .hook_assembler import HookAssembler
from .transaction_configurer import TransactionConfigurer
from .fallback_configurer import FallbackConfigurer, is_single_argument_callable
from .ttl_configurer import TTLConfigurer

__all__ = [
    "TableOptionsBuilder",
    "LimitParser",
    "HookAssembler",
    "TransactionConfigurer",
    "FallbackConfigurer",
    "is_single_argument_callable",
    "TTLConfigurer",
]
