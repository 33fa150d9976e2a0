"""Cache options parser.

ONLY option parsing orchestration - runs every sub-parser over the same
option list, in a fixed order, and assembles the resulting CacheState.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Any, Optional

from ..parsers.fallback_configurer import FallbackConfigurer
from ..parsers.hook_assembler import HookAssembler
from ..parsers.limit_parser import LimitParser
from ..parsers.table_options import TableOptionsBuilder
from ..parsers.transaction_configurer import TransactionConfigurer
from ..parsers.ttl_configurer import TTLConfigurer
from ..validators.hook_validator import HookValidator, create_hook_validator
from ...config.settings import OptionsSettings, get_settings
from ...core.entities.cache_state import CacheState
from ...core.protocols.limit_collaborator import LimitCollaborator
from ...core.protocols.name_deriver import NameDeriver
from ...core.value_objects.option_list import OptionList
from ...core.value_objects.option_name import OptionName
from ...infrastructure.limits.limit_collaborator import create_limit_collaborator
from ...infrastructure.naming.name_deriver import create_name_deriver

logger = logging.getLogger(__name__)


class OptionsParser:
    """Turns raw cache options into a validated CacheState.

    Sub-parsers run in this order: table options, limit, hooks,
    transactions, fallback, TTL. The resolved limit feeds the hook
    assembler. Hook validation is the only step that can fail; the error
    propagates unchanged and no state is built.
    """

    def __init__(
        self,
        names: NameDeriver,
        limits: LimitCollaborator,
        validator: HookValidator,
        settings: OptionsSettings
    ):
        """Initialize options parser.

        Args:
            names: Name deriver for stats hook, janitor and manager names
            limits: Limit normalisation and eviction hooks
            validator: Hook descriptor validator
            settings: Parsing defaults
        """
        self.table_options = TableOptionsBuilder()
        self.limit_parser = LimitParser(limits)
        self.hook_assembler = HookAssembler(names, limits, validator)
        self.transactions = TransactionConfigurer(names)
        self.fallbacks = FallbackConfigurer()
        self.ttl = TTLConfigurer(names, default_interval=settings.default_ttl_interval)

    def parse(self, cache: Any, options: Any = None) -> CacheState:
        """Parse cache options.

        Args:
            cache: Cache identifier, echoed into the state
            options: ``(name, value)`` pairs or a mapping; anything else is
                treated as an empty option list

        Returns:
            Fully populated cache state

        Raises:
            HookValidationError: If an assembled hook is invalid
        """
        option_list = OptionList.coerce(options)
        logger.debug("Parsing %d options for cache %r", len(option_list), cache)

        table_options = self.table_options.build(option_list)
        limit = self.limit_parser.parse(option_list)
        pre_hooks, post_hooks = self.hook_assembler.assemble(cache, option_list, limit)
        transactions, manager = self.transactions.configure(cache, option_list)
        fallback, fallback_args = self.fallbacks.configure(option_list)
        default_ttl, ttl_interval, janitor = self.ttl.configure(cache, option_list)

        state = CacheState(
            cache=cache,
            disable_ode=bool(option_list.get(OptionName.DISABLE_ODE)),
            table_options=table_options,
            default_ttl=default_ttl,
            ttl_interval=ttl_interval,
            janitor=janitor,
            fallback=fallback,
            fallback_args=fallback_args,
            limit=limit,
            pre_hooks=pre_hooks,
            post_hooks=post_hooks,
            transactions=transactions,
            manager=manager
        )

        logger.debug("Parsed options for cache %r: %s", cache, state)
        return state


# Factory function for dependency injection
def create_options_parser(
    names: Optional[NameDeriver] = None,
    limits: Optional[LimitCollaborator] = None,
    validator: Optional[HookValidator] = None,
    settings: Optional[OptionsSettings] = None
) -> OptionsParser:
    """Create options parser, filling in default collaborators.

    Args:
        names: Name deriver, suffix based by default
        limits: Limit collaborator
        validator: Hook validator
        settings: Parsing defaults, environment based by default

    Returns:
        Configured options parser
    """
    settings = settings or get_settings()

    return OptionsParser(
        names=names or create_name_deriver(settings),
        limits=limits or create_limit_collaborator(),
        validator=validator or create_hook_validator(),
        settings=settings
    )


def parse_options(cache: Any, options: Any = None) -> CacheState:
    """Parse cache options with the default collaborators."""
    return create_options_parser().parse(cache, options)
