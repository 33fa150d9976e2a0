"""Pytest configuration and fixtures for cache-options tests."""

import pytest

from cache_options.application.services.options_parser import create_options_parser
from cache_options.application.validators.hook_validator import HookValidator
from cache_options.config.settings import OptionsSettings
from cache_options.core.entities.hook import Hook, HookPhase
from cache_options.core.value_objects.option_list import OptionList
from cache_options.infrastructure.limits.limit_collaborator import DefaultLimitCollaborator
from cache_options.infrastructure.naming.name_deriver import DefaultNameDeriver

from tests.helpers import AuditHook, GuardHook


@pytest.fixture
def settings():
    """Settings with explicit defaults, independent of the environment."""
    return OptionsSettings(
        default_ttl_interval=3000,
        name_separator="_",
        stats_suffix="stats",
        janitor_suffix="janitor",
        manager_suffix="manager"
    )


@pytest.fixture
def names(settings):
    return DefaultNameDeriver(settings)


@pytest.fixture
def limits():
    return DefaultLimitCollaborator()


@pytest.fixture
def validator():
    return HookValidator()


@pytest.fixture
def parser(names, limits, validator, settings):
    """Options parser wired with default collaborators."""
    return create_options_parser(
        names=names,
        limits=limits,
        validator=validator,
        settings=settings
    )


@pytest.fixture
def options():
    """Build an OptionList from keyword arguments."""
    def _build(**kwargs):
        return OptionList.coerce(list(kwargs.items()))
    return _build


@pytest.fixture
def post_hook():
    return Hook(implementation=AuditHook, server_args={"name": "audit"})


@pytest.fixture
def pre_hook():
    return Hook(implementation=GuardHook, phase=HookPhase.PRE)
