"""Shared test fixtures for pomkit."""

from __future__ import annotations

from typing import Any

import pytest

from pomkit.conditions import Condition
from pomkit.config import PomConfig
from pomkit.drivers import Driver, Handle


class RecordingHandle(Handle):
    """Handle that logs every query and primitive on its driver."""

    def __init__(self, driver: RecordingDriver, description: str) -> None:
        self.driver = driver
        self.description = description

    def __repr__(self) -> str:
        return f"RecordingHandle({self.description!r})"

    def _record(self, *entry: Any) -> None:
        self.driver.calls.append((self.description, *entry))

    def _derive(self, operation: str, *args: Any) -> RecordingHandle:
        self._record(operation, *args)
        suffix = ",".join(map(str, args))
        return RecordingHandle(self.driver, f"{self.description}.{operation}({suffix})")

    async def click(self) -> None:
        self._record("click")

    async def dblclick(self) -> None:
        self._record("dblclick")

    async def rightclick(self) -> None:
        self._record("rightclick")

    async def focus(self) -> None:
        self._record("focus")

    async def blur(self) -> None:
        self._record("blur")

    async def trigger(self, event: str) -> None:
        self._record("trigger", event)

    async def type(self, text: str, **options: Any) -> None:
        if options:
            self._record("type", text, options)
        else:
            self._record("type", text)

    async def press(self, key: str) -> None:
        self._record("press", key)

    async def clear(self) -> None:
        self._record("clear")

    async def check(self) -> None:
        self._record("check")

    async def uncheck(self) -> None:
        self._record("uncheck")

    async def select(self, value: str) -> None:
        self._record("select", value)

    async def scroll_into_view(self, smooth: bool = False) -> None:
        self._record("scroll_into_view", smooth)

    async def remove_attr(self, name: str) -> None:
        self._record("remove_attr", name)

    async def attr(self, name: str, value: str) -> None:
        self._record("attr", name, value)

    async def should(self, condition: Condition, *args: Any) -> None:
        self._record("should", condition.value, *args)
        if condition in self.driver.failing:
            raise AssertionError(f"{self.description} failed {condition.value}")

    async def count(self) -> int:
        self._record("count")
        value = self.driver.counts.get(self.description, 1)
        found = value() if callable(value) else value
        self.driver.observed[self.description] = found
        return found

    async def is_visible(self) -> bool:
        self._record("is_visible")
        # An empty match set is never visible
        if self.driver.observed.get(self.description, 1) == 0:
            return False
        return self.driver.visible.get(self.description, True)

    def filter(self, selector: str) -> RecordingHandle:
        return self._derive("filter", selector)

    def not_(self, selector: str) -> RecordingHandle:
        return self._derive("not", selector)

    def eq(self, index: int) -> RecordingHandle:
        return self._derive("eq", index)

    def first(self) -> RecordingHandle:
        return self._derive("first")

    def last(self) -> RecordingHandle:
        return self._derive("last")

    def contains(self, text: str) -> RecordingHandle:
        return self._derive("contains", text)

    def find(self, selector: str) -> RecordingHandle:
        return self._derive("find", selector)


class RecordingDriver(Driver):
    """In-memory driver; ``calls`` holds every query and primitive in order."""

    def __init__(self, config: PomConfig | None = None) -> None:
        super().__init__(config or PomConfig(command_timeout_ms=500))
        self.calls: list[tuple] = []
        self.counts: dict[str, Any] = {}
        self.visible: dict[str, bool] = {}
        self.observed: dict[str, int] = {}
        self.failing: set[Condition] = set()

    def query_by_selector(self, selector: str) -> RecordingHandle:
        self.calls.append(("query_selector", selector))
        return RecordingHandle(self, selector)

    def query_by_text(self, text: str) -> RecordingHandle:
        self.calls.append(("query_text", text))
        return RecordingHandle(self, f"text={text}")


@pytest.fixture
def driver() -> RecordingDriver:
    """Fresh recording driver; bind it with ``use_driver`` inside the test."""
    return RecordingDriver()
