"""Playwright-backed driver."""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable
from typing import Any
from urllib.parse import urljoin

from playwright.async_api import Locator, Page, expect

from pomkit.conditions import Condition
from pomkit.config import PomConfig
from pomkit.drivers import Driver, Handle
from pomkit.exceptions import UnknownConditionError
from pomkit.logger import get_logger

log = get_logger(__name__)

# Matches any value, so presence-only attribute checks fail only when absent
_ANY_VALUE = re.compile(r".*")


def _class_pattern(class_name: str) -> re.Pattern[str]:
    return re.compile(rf"(^|\s){re.escape(class_name)}(\s|$)")


def _substring(text: Any) -> re.Pattern[str]:
    # Case-sensitive substring; a plain string would match case-insensitively
    return re.compile(re.escape(str(text)))


class PlaywrightHandle(Handle):
    """Handle over a Playwright ``Locator``.

    Locators are lazy, so deriving handles never queries the page.
    """

    def __init__(self, locator: Locator, page: Page, timeout_ms: int) -> None:
        self.locator = locator
        self.page = page
        self.timeout_ms = timeout_ms

    def _derive(self, locator: Locator) -> PlaywrightHandle:
        return PlaywrightHandle(locator, self.page, self.timeout_ms)

    # --- Actions ---

    async def click(self) -> None:
        await self.locator.click()

    async def dblclick(self) -> None:
        await self.locator.dblclick()

    async def rightclick(self) -> None:
        await self.locator.click(button="right")

    async def focus(self) -> None:
        await self.locator.focus()

    async def blur(self) -> None:
        await self.locator.blur()

    async def trigger(self, event: str) -> None:
        await self.locator.dispatch_event(event)

    async def type(self, text: str, **options: Any) -> None:
        await self.locator.press_sequentially(text, **options)

    async def press(self, key: str) -> None:
        await self.locator.press(key)

    async def clear(self) -> None:
        await self.locator.clear()

    async def check(self) -> None:
        await self.locator.check()

    async def uncheck(self) -> None:
        await self.locator.uncheck()

    async def select(self, value: str) -> None:
        await self.locator.select_option(value)

    async def scroll_into_view(self, smooth: bool = False) -> None:
        await self.locator.evaluate(
            "(el, behavior) => el.scrollIntoView({ behavior })",
            "smooth" if smooth else "auto",
        )

    async def remove_attr(self, name: str) -> None:
        await self.locator.evaluate_all(
            "(els, name) => els.forEach(el => el.removeAttribute(name))", name
        )

    async def attr(self, name: str, value: str) -> None:
        await self.locator.evaluate_all(
            "(els, [name, value]) => els.forEach(el => el.setAttribute(name, value))",
            [name, value],
        )

    # --- Queries ---

    async def count(self) -> int:
        return await self.locator.count()

    async def is_visible(self) -> bool:
        return await self.locator.first.is_visible()

    async def should(self, condition: Condition, *args: Any) -> None:
        assertion = _ASSERTIONS.get(condition)
        if assertion is None:
            raise UnknownConditionError(getattr(condition, "value", str(condition)))
        await assertion(self, *args)

    async def matches(self, selector: str) -> bool:
        """Whether every matched element matches ``selector``; False when none match."""
        return await self.locator.evaluate_all(
            "(els, s) => els.length > 0 && els.every(el => el.matches(s))",
            selector,
        )

    # --- Collection operations ---

    def filter(self, selector: str) -> PlaywrightHandle:
        return self._derive(self.locator.and_(self.page.locator(selector)))

    def not_(self, selector: str) -> PlaywrightHandle:
        return self._derive(self.locator.and_(self.page.locator(f":not({selector})")))

    def eq(self, index: int) -> PlaywrightHandle:
        return self._derive(self.locator.nth(index))

    def first(self) -> PlaywrightHandle:
        return self._derive(self.locator.first)

    def last(self) -> PlaywrightHandle:
        return self._derive(self.locator.last)

    def contains(self, text: str) -> PlaywrightHandle:
        return self._derive(self.locator.get_by_text(_substring(text)).first)

    def find(self, selector: str) -> PlaywrightHandle:
        return self._derive(self.locator.locator(selector))


async def _assert_matches(handle: PlaywrightHandle, selector: str) -> None:
    if not await handle.matches(selector):
        raise AssertionError(f"Expected elements to match selector {selector!r}")


async def _assert_not_matches(handle: PlaywrightHandle, selector: str) -> None:
    if await handle.matches(selector):
        raise AssertionError(f"Expected elements not to match selector {selector!r}")


def _attr_value(value: Any) -> str | re.Pattern[str]:
    return _ANY_VALUE if value is None else str(value)


_ASSERTIONS: dict[Condition, Callable[..., Awaitable[None]]] = {
    Condition.BE_VISIBLE: lambda h: expect(h.locator).to_be_visible(
        timeout=h.timeout_ms
    ),
    Condition.NOT_BE_VISIBLE: lambda h: expect(h.locator).not_to_be_visible(
        timeout=h.timeout_ms
    ),
    Condition.EXIST: lambda h: expect(h.locator.first).to_be_attached(
        timeout=h.timeout_ms
    ),
    Condition.NOT_EXIST: lambda h: expect(h.locator).to_have_count(
        0, timeout=h.timeout_ms
    ),
    Condition.BE_EMPTY: lambda h: expect(h.locator).to_be_empty(timeout=h.timeout_ms),
    Condition.NOT_BE_EMPTY: lambda h: expect(h.locator).not_to_be_empty(
        timeout=h.timeout_ms
    ),
    Condition.HAVE_TEXT: lambda h, text: expect(h.locator).to_have_text(
        str(text), timeout=h.timeout_ms
    ),
    Condition.NOT_HAVE_TEXT: lambda h, text: expect(h.locator).not_to_have_text(
        str(text), timeout=h.timeout_ms
    ),
    # Passes when any matched element contains the text
    Condition.CONTAIN: lambda h, text: expect(
        h.locator.filter(has_text=_substring(text))
    ).not_to_have_count(0, timeout=h.timeout_ms),
    Condition.NOT_CONTAIN: lambda h, text: expect(
        h.locator.filter(has_text=_substring(text))
    ).to_have_count(0, timeout=h.timeout_ms),
    Condition.HAVE_ATTR: lambda h, name, value=None: expect(
        h.locator
    ).to_have_attribute(name, _attr_value(value), timeout=h.timeout_ms),
    Condition.NOT_HAVE_ATTR: lambda h, name, value=None: expect(
        h.locator
    ).not_to_have_attribute(name, _attr_value(value), timeout=h.timeout_ms),
    Condition.HAVE_CLASS: lambda h, name: expect(h.locator).to_have_class(
        _class_pattern(name), timeout=h.timeout_ms
    ),
    Condition.NOT_HAVE_CLASS: lambda h, name: expect(h.locator).not_to_have_class(
        _class_pattern(name), timeout=h.timeout_ms
    ),
    Condition.MATCH: _assert_matches,
    Condition.NOT_MATCH: _assert_not_matches,
    Condition.BE_ENABLED: lambda h: expect(h.locator).to_be_enabled(
        timeout=h.timeout_ms
    ),
    Condition.BE_DISABLED: lambda h: expect(h.locator).to_be_disabled(
        timeout=h.timeout_ms
    ),
    Condition.NOT_BE_DISABLED: lambda h: expect(h.locator).not_to_be_disabled(
        timeout=h.timeout_ms
    ),
    Condition.HAVE_VALUE: lambda h, value: expect(h.locator).to_have_value(
        str(value), timeout=h.timeout_ms
    ),
    Condition.NOT_HAVE_VALUE: lambda h, value: expect(h.locator).not_to_have_value(
        str(value), timeout=h.timeout_ms
    ),
    Condition.BE_CHECKED: lambda h: expect(h.locator).to_be_checked(
        timeout=h.timeout_ms
    ),
    Condition.NOT_BE_CHECKED: lambda h: expect(h.locator).not_to_be_checked(
        timeout=h.timeout_ms
    ),
}


class PlaywrightDriver(Driver):
    """Driver bound to one Playwright page."""

    def __init__(self, page: Page, config: PomConfig | None = None) -> None:
        super().__init__(config)
        self.page = page
        self.page.set_default_timeout(self.config.command_timeout_ms)

    def _handle(self, locator: Locator) -> PlaywrightHandle:
        return PlaywrightHandle(locator, self.page, self.config.command_timeout_ms)

    def query_by_selector(self, selector: str) -> PlaywrightHandle:
        return self._handle(self.page.locator(selector))

    def query_by_text(self, text: str) -> PlaywrightHandle:
        return self._handle(self.page.get_by_text(_substring(text)).first)

    async def visit(self, path: str = "") -> None:
        """Navigate to ``path``, relative to ``config.base_url`` when set."""
        url = urljoin(self.config.base_url, path) if self.config.base_url else path
        log.info("page_visit", url=url)
        await self.page.goto(url, wait_until="domcontentloaded")
