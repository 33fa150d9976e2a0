"""Tests for transaction, fallback and TTL configuration."""

import functools

import pytest

from cache_options.application.parsers import (
    FallbackConfigurer,
    TransactionConfigurer,
    TTLConfigurer,
    is_single_argument_callable,
)


class TestTransactionConfigurer:
    """Test cases for TransactionConfigurer."""

    @pytest.mark.parametrize("flag", [True, False])
    def test_boolean_flag(self, names, options, flag):
        assert TransactionConfigurer(names).configure("cache", options(transactions=flag)) == (
            flag, "cache_manager"
        )

    @pytest.mark.parametrize("flag", [1, "true", None, [True], 0.0])
    def test_non_boolean_is_false(self, names, options, flag):
        """Test anything but a literal boolean disables transactions."""
        transactions, _ = TransactionConfigurer(names).configure("cache", options(transactions=flag))

        assert transactions is False

    def test_manager_always_resolved(self, names, options):
        """Test the manager name exists with transactions disabled."""
        transactions, manager = TransactionConfigurer(names).configure("cache", options())

        assert transactions is False
        assert manager == "cache_manager"


def one_arg(key):
    return key


def two_args(key, extra):
    return key, extra


def optional_extra(key, extra=None):
    return key


def variadic(*args):
    return args


class Loader:
    def load(self, key):
        return key

    def __call__(self, key):
        return key


class TestSingleArgumentCallable:
    """Test cases for the fallback signature check."""

    @pytest.mark.parametrize("value", [
        one_arg,
        optional_extra,
        variadic,
        lambda key: key,
        Loader().load,
        Loader(),
        functools.partial(two_args, extra=1),
    ])
    def test_accepted(self, value):
        assert is_single_argument_callable(value)

    @pytest.mark.parametrize("value", [
        two_args,
        lambda: None,
        functools.partial(one_arg, 1),
        "one_arg",
        None,
        42,
    ])
    def test_rejected(self, value):
        assert not is_single_argument_callable(value)


class TestFallbackConfigurer:
    """Test cases for FallbackConfigurer."""

    def test_defaults(self, options):
        assert FallbackConfigurer().configure(options()) == (None, ())

    def test_fallback_and_args(self, options):
        fallback, args = FallbackConfigurer().configure(
            options(fallback=one_arg, fallback_args=["db", 5])
        )

        assert fallback is one_arg
        assert args == ("db", 5)

    def test_wrong_arity_dropped(self, options):
        """Test a fallback with the wrong arity is silently dropped."""
        fallback, _ = FallbackConfigurer().configure(options(fallback=two_args))

        assert fallback is None

    @pytest.mark.parametrize("raw", ["db", 5, {"db": 1}, None])
    def test_non_sequence_args_dropped(self, options, raw):
        _, args = FallbackConfigurer().configure(options(fallback_args=raw))

        assert args == ()


class TestTTLConfigurer:
    """Test cases for TTLConfigurer."""

    @pytest.fixture
    def configurer(self, names):
        return TTLConfigurer(names, default_interval=3000)

    def test_nothing_set(self, configurer, options):
        """Test no janitor without TTL options."""
        assert configurer.configure("cache", options()) == (None, None, None)

    def test_default_ttl_only(self, configurer, options):
        """Test a default TTL starts the janitor at the default interval."""
        assert configurer.configure("cache", options(default_ttl=500)) == (
            500, 3000, "cache_janitor"
        )

    def test_zero_interval(self, configurer, options):
        """Test an interval of zero is kept, not treated as absent."""
        assert configurer.configure("cache", options(ttl_interval=0)) == (
            None, 0, "cache_janitor"
        )

    def test_explicit_interval(self, configurer, options):
        assert configurer.configure("cache", options(default_ttl=500, ttl_interval=250)) == (
            500, 250, "cache_janitor"
        )

    @pytest.mark.parametrize("default_ttl", [None, 500])
    def test_disabled_interval(self, configurer, options, default_ttl):
        """Test an interval of -1 disables the janitor."""
        default, interval, janitor = configurer.configure(
            "cache", options(default_ttl=default_ttl, ttl_interval=-1)
        )

        assert default == default_ttl
        assert interval is None
        assert janitor is None

    @pytest.mark.parametrize("raw", [0, -5, True, 1.5, "500"])
    def test_invalid_default_ttl(self, configurer, options, raw):
        """Test non positive integer TTLs are discarded."""
        assert configurer.configure("cache", options(default_ttl=raw)) == (None, None, None)

    @pytest.mark.parametrize("raw", [-2, True, False, 1.0, "100"])
    def test_invalid_interval_treated_as_absent(self, configurer, options, raw):
        """Test malformed intervals fall back to the default-TTL rule."""
        assert configurer.configure("cache", options(default_ttl=10, ttl_interval=raw)) == (
            10, 3000, "cache_janitor"
        )

    def test_custom_default_interval(self, names, options):
        configurer = TTLConfigurer(names, default_interval=1000)

        assert configurer.configure("cache", options(default_ttl=1))[1] == 1000

    def test_janitor_name_always_derived(self, mocker, names, options):
        """Test the janitor name is derived even when no janitor runs."""
        spy = mocker.spy(names, "janitor")

        TTLConfigurer(names).configure("cache", options())

        spy.assert_called_once_with("cache")
