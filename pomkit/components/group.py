"""Group: lazy collection filtering for any component class."""

from __future__ import annotations

import functools
from collections.abc import Generator
from typing import Any, Generic, TypeVar

from pomkit.components.base import Component
from pomkit.drivers import OPERATIONS, Handle, get_driver
from pomkit.exceptions import UnknownOperationError
from pomkit.lookup import Resolver

C = TypeVar("C", bound=Component)


class Group(Generic[C]):
    """A set of elements of one component class, narrowed by chained operations.

    Each operation returns a new ``Group`` whose lookup re-applies the
    operation to this group's resolution. Nothing touches the page until an
    action or assertion runs, and every run evaluates the whole chain again.
    Attributes not defined here are forwarded to the wrapped component, and
    forwarded methods that return the component return the group instead::

        rows = Group(BasicComponent, "rows", "table tr")
        await rows.filter(".active").eq(0).should_be_visible()
    """

    def __init__(
        self,
        component_cls: type[C],
        identifier: str,
        lookup: Any = None,
        **options: Any,
    ) -> None:
        self.component_cls = component_cls
        self.component: C = component_cls(identifier, lookup, **options)

    def __repr__(self) -> str:
        return f"Group[{self.component_cls.__name__}]({self.identifier!r})"

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes missing on the group itself
        if name == "component":
            raise AttributeError(name)
        attr = getattr(self.component, name)
        if not callable(attr):
            return attr

        @functools.wraps(attr)
        def forward(*args: Any, **kwargs: Any) -> Any:
            result = attr(*args, **kwargs)
            # Fluent calls return the group, not the wrapped component
            return self if result is self.component else result

        return forward

    @property
    def identifier(self) -> str:
        return self.component.identifier

    def resolve(self) -> Handle:
        return self.component.resolve()

    def chain(self, operation: str, *args: Any) -> Group[C]:
        """Derive a group applying ``operation`` to this group's elements.

        Raises:
            UnknownOperationError: If ``operation`` is not a collection operation.
        """
        if operation not in OPERATIONS:
            raise UnknownOperationError(operation)
        identifier = f"{self.identifier}-{operation}-{'-'.join(map(str, args))}"
        return Group(
            self.component_cls,
            identifier,
            Resolver(lambda: self.resolve().apply(operation, *args)),
        )

    def filter(self, selector: str) -> Group[C]:
        """Keep the elements that also match ``selector``."""
        return self.chain("filter", selector)

    def not_(self, selector: str) -> Group[C]:
        """Drop the elements that match ``selector``."""
        return self.chain("not", selector)

    def eq(self, index: int) -> Group[C]:
        return self.chain("eq", index)

    def first(self) -> Group[C]:
        return self.chain("first")

    def last(self) -> Group[C]:
        return self.chain("last")

    def contains(self, text: str) -> Group[C]:
        return self.chain("contains", text)

    def find(self, selector: str) -> Group[C]:
        """Descendants of the group's elements matching ``selector``."""
        return self.chain("find", selector)

    async def _flush(self) -> Group[C]:
        await get_driver().run()
        return self

    def __await__(self) -> Generator[Any, None, Group[C]]:
        return self._flush().__await__()
