"""Component core: identity, lookup, nesting, and queueing commands."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from typing import Any, Self

from pomkit.conditions import Condition, parse_condition
from pomkit.drivers import Command, Handle, get_driver
from pomkit.exceptions import (
    LookupNotDefinedError,
    MissingCallbackError,
    MissingConditionError,
)
from pomkit.lookup import (
    LookupInput,
    LookupOptions,
    LookupStrategy,
    coerce_options,
    resolve_lookup,
    select_strategy,
)


class Component:
    """A named handle on zero or more page elements.

    The lookup is chosen once at construction (callback, then selector,
    then text) and is re-evaluated against the live page every time a
    queued command runs.

    Args:
        identifier: Key under which a parent registers this component.
        lookup: Selector string, zero-argument callback, a ``Selector`` /
            ``Text`` / ``Resolver`` variant, or an options dict.
        selector: Selector override.
        text: Match text override.
        callback: Resolver callback override.
    """

    def __init__(
        self,
        identifier: str,
        lookup: LookupInput | LookupOptions = None,
        *,
        selector: str | None = None,
        text: str | None = None,
        callback: Callable[[], Handle] | None = None,
    ) -> None:
        self.identifier = identifier
        self.options = coerce_options(
            lookup, selector=selector, text=text, callback=callback
        )
        self.lookup: LookupStrategy | None = select_strategy(self.options)
        self.children: dict[str, Component] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.identifier!r}, {self.lookup!r})"

    # --- Lookup ---

    def resolve(self) -> Handle:
        """Live handle for this component's elements."""
        if self.lookup is None:
            raise LookupNotDefinedError(self.identifier)
        return resolve_lookup(self.lookup)

    def get_by_selector(self) -> Handle:
        if not self.options.selector:
            raise LookupNotDefinedError(
                self.identifier, "No selector defined for this component."
            )
        return get_driver().query_by_selector(self.options.selector)

    def get_by_text(self) -> Handle:
        if not self.options.text:
            raise LookupNotDefinedError(
                self.identifier, "No text defined for this component."
            )
        return get_driver().query_by_text(self.options.text)

    def get_by_callback(self) -> Handle:
        if self.options.callback is None:
            raise MissingCallbackError(self.identifier)
        return self.options.callback()

    def find(self, selector: str) -> Handle:
        """Descendant elements of this component matching ``selector``."""
        return self.resolve().find(selector)

    # --- Nesting ---

    def add_nested_component(self, component: Component) -> Self:
        """Register ``component`` as a child, replacing any with the same identifier."""
        self.children[component.identifier] = component
        return self

    def get_nested_components(self) -> list[Component]:
        return list(self.children.values())

    # --- Command queue ---

    def _require_lookup(self) -> None:
        if self.lookup is None:
            raise LookupNotDefinedError(self.identifier)

    def _enqueue(self, name: str, run: Callable[[], Awaitable[Any]]) -> Self:
        self._require_lookup()
        get_driver().enqueue(Command(name, self.identifier, run))
        return self

    def _perform(self, name: str, action: Callable[[Handle], Awaitable[Any]]) -> Self:
        """Queue ``action`` against a freshly resolved handle."""

        async def run() -> None:
            await action(self.resolve())

        return self._enqueue(name, run)

    async def _flush(self) -> Self:
        await get_driver().run()
        return self

    def __await__(self) -> Generator[Any, None, Self]:
        return self._flush().__await__()

    # --- Assertions ---

    def should(self, condition: Condition | str | None = None, *args: Any) -> Self:
        """Queue an assertion of ``condition`` (with optional expected values).

        Raises:
            MissingConditionError: If no condition is given.
            UnknownConditionError: If the condition name is not recognised.
        """
        if not condition:
            raise MissingConditionError(self.identifier)
        parsed = parse_condition(condition)
        return self._perform(
            f"should {parsed.value}", lambda handle: handle.should(parsed, *args)
        )

    def and_(self, condition: Condition | str | None = None, *args: Any) -> Self:
        """Alias of ``should`` for readable chains."""
        return self.should(condition, *args)
