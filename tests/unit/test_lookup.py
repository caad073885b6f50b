"""Tests for lookup strategies and their priority rule."""

import pytest

from pomkit.drivers import use_driver
from pomkit.exceptions import ConfigurationError, NoActiveDriverError
from pomkit.lookup import (
    LookupOptions,
    Resolver,
    Selector,
    Text,
    coerce_options,
    resolve_lookup,
    select_strategy,
)


def _callback():
    return "handle"


class TestCoerceOptions:
    def test_string_is_selector(self) -> None:
        options = coerce_options("#email")
        assert options.selector == "#email"
        assert options.text is None
        assert options.callback is None

    def test_callable_is_callback(self) -> None:
        options = coerce_options(_callback)
        assert options.callback is _callback
        assert options.selector is None

    def test_dict_options(self) -> None:
        options = coerce_options({"selector": ".row", "text": "Save"})
        assert options.selector == ".row"
        assert options.text == "Save"

    def test_variants(self) -> None:
        assert coerce_options(Selector(".a")).selector == ".a"
        assert coerce_options(Text("Save")).text == "Save"
        assert coerce_options(Resolver(_callback)).callback is _callback

    def test_keywords_override_positional(self) -> None:
        options = coerce_options("#old", selector="#new", text="Save")
        assert options.selector == "#new"
        assert options.text == "Save"

    def test_options_instance_passes_through(self) -> None:
        original = LookupOptions(text="Save")
        assert coerce_options(original) is original

    def test_none_is_empty(self) -> None:
        assert coerce_options(None) == LookupOptions()

    def test_unsupported_lookup_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Unsupported lookup"):
            coerce_options(42)

    def test_invalid_option_types_raise_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid lookup options"):
            coerce_options({"selector": 5})


class TestSelectStrategy:
    def test_callback_beats_selector_and_text(self) -> None:
        options = LookupOptions(selector="#a", text="A", callback=_callback)
        assert select_strategy(options) == Resolver(_callback)

    def test_selector_beats_text(self) -> None:
        options = LookupOptions(selector="#a", text="A")
        assert select_strategy(options) == Selector("#a")

    def test_text_fallback(self) -> None:
        assert select_strategy(LookupOptions(text="A")) == Text("A")

    def test_empty_strings_are_unset(self) -> None:
        assert select_strategy(LookupOptions(selector="", text="")) is None

    def test_nothing_configured(self) -> None:
        assert select_strategy(LookupOptions()) is None


class TestResolveLookup:
    def test_selector_queries_exactly_that_selector(self, driver) -> None:
        with use_driver(driver):
            handle = resolve_lookup(Selector("#email"))
        assert handle.description == "#email"
        assert driver.calls == [("query_selector", "#email")]

    def test_text_queries_by_text(self, driver) -> None:
        with use_driver(driver):
            resolve_lookup(Text("Save"))
        assert driver.calls == [("query_text", "Save")]

    def test_resolver_only_invokes_callback(self, driver) -> None:
        invoked = []

        def callback():
            invoked.append(True)
            return "live"

        with use_driver(driver):
            assert resolve_lookup(Resolver(callback)) == "live"
        assert invoked == [True]
        assert driver.calls == []

    def test_resolver_needs_no_driver(self) -> None:
        assert resolve_lookup(Resolver(_callback)) == "handle"

    def test_selector_without_driver_raises(self) -> None:
        with pytest.raises(NoActiveDriverError):
            resolve_lookup(Selector("#email"))

    def test_not_a_strategy(self) -> None:
        with pytest.raises(TypeError):
            resolve_lookup("#email")
