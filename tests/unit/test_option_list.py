"""Tests for option names and option lists."""

import pytest

from cache_options.core.value_objects import OptionList, OptionName


class TestOptionName:
    """Test cases for OptionName resolution."""

    @pytest.mark.parametrize("raw,expected", [
        ("ttl_interval", OptionName.TTL_INTERVAL),
        ("ttl-interval", OptionName.TTL_INTERVAL),
        ("TTL_INTERVAL", OptionName.TTL_INTERVAL),
        ("ets_opts", OptionName.TABLE_OPTS),
        ("ets-opts", OptionName.TABLE_OPTS),
        ("table_opts", OptionName.TABLE_OPTS),
        (OptionName.HOOKS, OptionName.HOOKS),
    ])
    def test_resolve_known_names(self, raw, expected):
        """Test spelling variants resolve to the same option."""
        assert OptionName.resolve(raw) is expected

    @pytest.mark.parametrize("raw", ["unknown", "", 42, None, ("limit",)])
    def test_resolve_unknown_names(self, raw):
        """Test unknown keys are not recognised."""
        assert OptionName.resolve(raw) is None


class TestOptionList:
    """Test cases for OptionList coercion and lookup."""

    @pytest.mark.parametrize("raw", [None, "limit", 42, object(), {"limit"}])
    def test_invalid_input_becomes_empty(self, raw):
        """Test non option-list input is coerced to an empty list."""
        assert len(OptionList.coerce(raw)) == 0

    def test_unknown_and_malformed_entries_are_dropped(self):
        """Test only recognised pairs are kept."""
        option_list = OptionList.coerce([
            ("limit", 10),
            ("bogus", 1),
            "record_stats",
            ("hooks", 1, 2),
            ["transactions", True],
        ])

        assert option_list.entries == (
            (OptionName.LIMIT, 10),
            (OptionName.TRANSACTIONS, True),
        )

    def test_mapping_input(self):
        """Test mappings are read like pair lists."""
        option_list = OptionList.coerce({"default-ttl": 500, "transactions": True})

        assert option_list.get(OptionName.DEFAULT_TTL) == 500
        assert option_list.get(OptionName.TRANSACTIONS) is True

    def test_first_match_wins(self):
        """Test repeated names resolve to the first entry."""
        option_list = OptionList.coerce([("limit", 1), ("limit", 2)])

        assert option_list.get(OptionName.LIMIT) == 1

    def test_alias_counts_as_same_name(self):
        """Test aliases share first-match semantics with the canonical name."""
        option_list = OptionList.coerce([
            ("ets_opts", {"compressed": True}),
            ("table_opts", {"compressed": False}),
        ])

        assert option_list.lookup(OptionName.TABLE_OPTS) == {"compressed": True}

    def test_rejected_first_match_uses_default(self):
        """Test a rejected first entry does not fall through to later ones."""
        option_list = OptionList.coerce([("transactions", "yes"), ("transactions", True)])

        value = option_list.get(
            OptionName.TRANSACTIONS,
            lambda v: isinstance(v, bool),
            False
        )

        assert value is False

    def test_missing_option_returns_default(self):
        """Test absent options return the default without calling accept."""
        option_list = OptionList.coerce([])

        def accept(value):
            raise AssertionError("accept must not be called")

        assert option_list.get(OptionName.LIMIT, accept, "default") == "default"

    def test_contains(self):
        """Test membership by option name."""
        option_list = OptionList.coerce([("hooks", [])])

        assert OptionName.HOOKS in option_list
        assert OptionName.LIMIT not in option_list

    def test_coerce_is_idempotent(self):
        """Test coercing an OptionList returns it unchanged."""
        option_list = OptionList.coerce([("limit", 5)])

        assert OptionList.coerce(option_list) is option_list
