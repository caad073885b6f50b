"""Driver and handle interfaces, the command queue, and the active driver."""

from __future__ import annotations

import asyncio
import time
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from pomkit.config import PomConfig
from pomkit.conditions import Condition
from pomkit.exceptions import NoActiveDriverError, UnknownOperationError
from pomkit.logger import get_logger

log = get_logger(__name__)

# Collection operation name -> Handle method
OPERATIONS = {
    "filter": "filter",
    "not": "not_",
    "eq": "eq",
    "first": "first",
    "last": "last",
    "contains": "contains",
    "find": "find",
}


class Handle(ABC):
    """A lazily evaluated set of zero or more live elements.

    Collection operations return new handles without touching the page;
    everything else is awaited and acts on the current page.
    """

    @abstractmethod
    async def click(self) -> None:
        """Click the element."""

    @abstractmethod
    async def dblclick(self) -> None:
        """Double-click the element."""

    @abstractmethod
    async def rightclick(self) -> None:
        """Open the context menu on the element."""

    @abstractmethod
    async def focus(self) -> None: ...

    @abstractmethod
    async def blur(self) -> None: ...

    @abstractmethod
    async def trigger(self, event: str) -> None:
        """Dispatch a DOM event on the element."""

    @abstractmethod
    async def type(self, text: str, **options: Any) -> None:
        """Type text key by key."""

    @abstractmethod
    async def press(self, key: str) -> None:
        """Press a single named key, e.g. ``Enter``."""

    @abstractmethod
    async def clear(self) -> None: ...

    @abstractmethod
    async def check(self) -> None: ...

    @abstractmethod
    async def uncheck(self) -> None: ...

    @abstractmethod
    async def select(self, value: str) -> None:
        """Select an option by value in a ``<select>``."""

    @abstractmethod
    async def scroll_into_view(self, smooth: bool = False) -> None: ...

    @abstractmethod
    async def remove_attr(self, name: str) -> None: ...

    @abstractmethod
    async def attr(self, name: str, value: str) -> None:
        """Set an attribute on every matched element."""

    @abstractmethod
    async def should(self, condition: Condition, *args: Any) -> None:
        """Assert the condition, raising ``AssertionError`` on mismatch."""

    @abstractmethod
    async def count(self) -> int:
        """Number of elements currently matched."""

    @abstractmethod
    async def is_visible(self) -> bool:
        """Whether the first matched element is visible right now."""

    @abstractmethod
    def filter(self, selector: str) -> Handle: ...

    @abstractmethod
    def not_(self, selector: str) -> Handle: ...

    @abstractmethod
    def eq(self, index: int) -> Handle: ...

    @abstractmethod
    def first(self) -> Handle: ...

    @abstractmethod
    def last(self) -> Handle: ...

    @abstractmethod
    def contains(self, text: str) -> Handle: ...

    @abstractmethod
    def find(self, selector: str) -> Handle: ...

    def apply(self, operation: str, *args: Any) -> Handle:
        """Apply a collection operation by name."""
        method_name = OPERATIONS.get(operation)
        if method_name is None:
            raise UnknownOperationError(operation)
        return getattr(self, method_name)(*args)


@dataclass
class Command:
    """One queued unit of work."""

    name: str
    component: str
    run: Callable[[], Awaitable[Any]]


class Driver(ABC):
    """Element queries plus a FIFO command queue."""

    def __init__(self, config: PomConfig | None = None) -> None:
        self.config = config or PomConfig.from_env()
        self._queue: deque[Command] = deque()

    @abstractmethod
    def query_by_selector(self, selector: str) -> Handle:
        """Handle for every element matching the selector."""

    @abstractmethod
    def query_by_text(self, text: str) -> Handle:
        """Handle for the element containing the text."""

    @property
    def pending(self) -> list[Command]:
        """Snapshot of commands not yet executed."""
        return list(self._queue)

    def enqueue(self, command: Command) -> None:
        self._queue.append(command)

    async def run(self) -> None:
        """Execute queued commands in FIFO order.

        A failing command discards everything queued behind it and the
        original exception is re-raised.
        """
        while self._queue:
            command = self._queue.popleft()
            log.debug(
                "command_started",
                command=command.name,
                component=command.component,
            )
            try:
                await command.run()
            except Exception as exc:
                dropped = len(self._queue)
                self._queue.clear()
                log.debug(
                    "command_failed",
                    command=command.name,
                    component=command.component,
                    error=str(exc),
                    dropped=dropped,
                )
                raise

    async def poll_until(
        self,
        predicate: Callable[[], Awaitable[bool]],
        timeout_ms: int,
        interval_ms: int | None = None,
    ) -> bool:
        """Poll ``predicate`` until it holds or the next attempt would pass the timeout.

        Returns:
            True if the predicate held, False on timeout.
        """
        if interval_ms is None:
            interval_ms = self.config.poll_interval_ms
        start = time.monotonic()
        while True:
            if await predicate():
                return True
            elapsed_ms = (time.monotonic() - start) * 1000
            if elapsed_ms + interval_ms >= timeout_ms:
                return False
            await asyncio.sleep(interval_ms / 1000)


_active_driver: ContextVar[Driver | None] = ContextVar("pomkit_driver", default=None)


@contextmanager
def use_driver(driver: Driver) -> Iterator[Driver]:
    """Make ``driver`` the one components queue their commands on."""
    token = _active_driver.set(driver)
    try:
        yield driver
    finally:
        _active_driver.reset(token)


def get_driver() -> Driver:
    """Return the active driver, raising if none is bound."""
    driver = _active_driver.get()
    if driver is None:
        raise NoActiveDriverError()
    return driver
