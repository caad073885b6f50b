"""Lookup strategies for locating a component's elements."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from pomkit.drivers import get_driver
from pomkit.exceptions import ConfigurationError

if TYPE_CHECKING:
    from pomkit.drivers import Handle


@dataclass(frozen=True)
class Selector:
    """Locate elements with a selector string."""

    value: str


@dataclass(frozen=True)
class Text:
    """Locate elements containing the given text."""

    value: str


@dataclass(frozen=True)
class Resolver:
    """Locate elements with a zero-argument callback returning a live handle."""

    callback: Callable[[], Handle]


LookupStrategy = Selector | Text | Resolver

LookupInput = str | Callable[[], Any] | Selector | Text | Resolver | dict | None


class LookupOptions(BaseModel):
    """Raw lookup inputs for a component; any combination may be set."""

    selector: str | None = None
    text: str | None = None
    callback: Callable[[], Any] | None = None


def coerce_options(
    lookup: LookupInput | LookupOptions = None,
    *,
    selector: str | None = None,
    text: str | None = None,
    callback: Callable[[], Any] | None = None,
) -> LookupOptions:
    """Normalise the accepted constructor forms into ``LookupOptions``.

    Keyword arguments override whatever the positional ``lookup`` supplied.
    """
    if lookup is None:
        options = LookupOptions()
    elif isinstance(lookup, LookupOptions):
        options = lookup
    elif isinstance(lookup, dict):
        try:
            options = LookupOptions.model_validate(lookup)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid lookup options: {lookup!r}") from exc
    elif isinstance(lookup, str):
        options = LookupOptions(selector=lookup)
    elif isinstance(lookup, Selector):
        options = LookupOptions(selector=lookup.value)
    elif isinstance(lookup, Text):
        options = LookupOptions(text=lookup.value)
    elif isinstance(lookup, Resolver):
        options = LookupOptions(callback=lookup.callback)
    elif callable(lookup):
        options = LookupOptions(callback=lookup)
    else:
        raise ConfigurationError(f"Unsupported lookup: {lookup!r}")

    overrides = {
        key: value
        for key, value in (
            ("selector", selector),
            ("text", text),
            ("callback", callback),
        )
        if value is not None
    }
    if overrides:
        options = options.model_copy(update=overrides)
    return options


def select_strategy(options: LookupOptions) -> LookupStrategy | None:
    """Pick the active strategy: callback, then selector, then text.

    Empty strings count as unset.
    """
    if options.callback is not None:
        return Resolver(options.callback)
    if options.selector:
        return Selector(options.selector)
    if options.text:
        return Text(options.text)
    return None


def resolve_lookup(strategy: LookupStrategy) -> Handle:
    """Produce a live handle for the strategy.

    Never cached: every call goes back to the driver (or the callback).
    """
    if isinstance(strategy, Resolver):
        return strategy.callback()
    if isinstance(strategy, Selector):
        return get_driver().query_by_selector(strategy.value)
    if isinstance(strategy, Text):
        return get_driver().query_by_text(strategy.value)
    raise TypeError(f"Not a lookup strategy: {strategy!r}")
