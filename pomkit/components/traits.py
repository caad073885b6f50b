"""Capability traits composed into the concrete component variants."""

from __future__ import annotations

from typing import Any, Self

from pomkit.components.base import Component
from pomkit.conditions import Condition
from pomkit.drivers import get_driver
from pomkit.logger import get_logger

log = get_logger(__name__)


class Clickable(Component):
    """Pointer interactions."""

    def click(self) -> Self:
        return self._perform("click", lambda handle: handle.click())

    def double_click(self) -> Self:
        return self._perform("double_click", lambda handle: handle.dblclick())

    def right_click(self) -> Self:
        return self._perform("right_click", lambda handle: handle.rightclick())

    def hover(self) -> Self:
        return self._perform("hover", lambda handle: handle.trigger("mouseover"))

    def click_if_visible(self, timeout_ms: int | None = None) -> Self:
        """Click the component if it shows up within ``timeout_ms``.

        Polls until the lookup matches at least one element, then checks
        visibility once. If the element never appears or is hidden, nothing
        happens and no error is raised.

        Args:
            timeout_ms: Maximum time to wait. Defaults to the configured
                command timeout.
        """
        self._require_lookup()
        driver = get_driver()
        timeout = driver.config.command_timeout_ms if timeout_ms is None else timeout_ms

        async def present() -> bool:
            return await self.resolve().count() > 0

        async def run() -> None:
            await driver.poll_until(present, timeout)
            handle = self.resolve()
            if await handle.is_visible():
                await handle.first().click()
            else:
                log.debug(
                    "click_if_visible_skipped",
                    component=self.identifier,
                    timeout_ms=timeout,
                )

        return self._enqueue("click_if_visible", run)


class Focusable(Component):
    def focus(self) -> Self:
        return self._perform("focus", lambda handle: handle.focus())

    def blur(self) -> Self:
        return self._perform("blur", lambda handle: handle.blur())


class KeyboardNavigable(Component):
    """Single key presses sent to the component."""

    def press_enter(self) -> Self:
        return self._perform("press_enter", lambda handle: handle.press("Enter"))

    def press_space(self) -> Self:
        return self._perform("press_space", lambda handle: handle.press("Space"))

    def press_up_arrow(self) -> Self:
        return self._perform("press_up_arrow", lambda handle: handle.press("ArrowUp"))

    def press_down_arrow(self) -> Self:
        return self._perform(
            "press_down_arrow", lambda handle: handle.press("ArrowDown")
        )


class Scrollable(Component):
    def scroll_into_view(self, smooth: bool = False) -> Self:
        return self._perform(
            "scroll_into_view", lambda handle: handle.scroll_into_view(smooth)
        )


class VisibilityAssertions(Component):
    def should_be_visible(self) -> Self:
        return self.should(Condition.BE_VISIBLE)

    def should_not_be_visible(self) -> Self:
        return self.should(Condition.NOT_BE_VISIBLE)

    def should_exist(self) -> Self:
        return self.should(Condition.EXIST)

    def should_not_exist(self) -> Self:
        return self.should(Condition.NOT_EXIST)

    def should_be_empty(self) -> Self:
        return self.should(Condition.BE_EMPTY)

    def should_not_be_empty(self) -> Self:
        return self.should(Condition.NOT_BE_EMPTY)


class TextAssertions(Component):
    def should_have_text(self, text: str) -> Self:
        return self.should(Condition.HAVE_TEXT, text)

    def should_not_have_text(self, text: str) -> Self:
        return self.should(Condition.NOT_HAVE_TEXT, text)

    def should_contain_text(self, text: str) -> Self:
        """Assert ``text`` is a substring of the component's text."""
        return self.should(Condition.CONTAIN, text)

    def should_not_contain_text(self, text: str) -> Self:
        return self.should(Condition.NOT_CONTAIN, text)


class AttributeAssertions(Component):
    """Attribute, class and selector assertions."""

    def should_have_attribute(self, name: str, value: Any = None) -> Self:
        """Assert the attribute is present, and equals ``value`` when given."""
        if value is None:
            return self.should(Condition.HAVE_ATTR, name)
        return self.should(Condition.HAVE_ATTR, name, value)

    def should_not_have_attribute(self, name: str, value: Any = None) -> Self:
        if value is None:
            return self.should(Condition.NOT_HAVE_ATTR, name)
        return self.should(Condition.NOT_HAVE_ATTR, name, value)

    def should_have_class(self, class_name: str) -> Self:
        return self.should(Condition.HAVE_CLASS, class_name)

    def should_not_have_class(self, class_name: str) -> Self:
        return self.should(Condition.NOT_HAVE_CLASS, class_name)

    def should_match_selector(self, selector: str) -> Self:
        return self.should(Condition.MATCH, selector)

    def should_not_match_selector(self, selector: str) -> Self:
        return self.should(Condition.NOT_MATCH, selector)


class Enableable(Component):
    """Toggle and assert the ``disabled`` state."""

    def enable(self) -> Self:
        return self._perform("enable", lambda handle: handle.remove_attr("disabled"))

    def disable(self) -> Self:
        return self._perform(
            "disable", lambda handle: handle.attr("disabled", "true")
        )

    def should_be_enabled(self) -> Self:
        return self.should(Condition.NOT_BE_DISABLED)

    def should_be_disabled(self) -> Self:
        return self.should(Condition.BE_DISABLED)


class HasValue(Component):
    def should_have_value(self, value: Any) -> Self:
        return self.should(Condition.HAVE_VALUE, value)

    def should_not_have_value(self, value: Any) -> Self:
        return self.should(Condition.NOT_HAVE_VALUE, value)


class Typeable(AttributeAssertions):
    """Text entry and the constraints that go with it."""

    def type(self, text: str, **options: Any) -> Self:
        """Type ``text`` key by key; ``options`` go straight to the driver."""
        return self._perform("type", lambda handle: handle.type(text, **options))

    def clear(self) -> Self:
        return self._perform("clear", lambda handle: handle.clear())

    def should_have_max_length(self, length: int) -> Self:
        return self.should_have_attribute("maxlength", str(length))

    def should_have_min_length(self, length: int) -> Self:
        return self.should_have_attribute("minlength", str(length))

    def should_be_readonly(self) -> Self:
        return self.should_have_attribute("readonly")

    def should_be_required(self) -> Self:
        return self.should_have_attribute("required")


class Checkable(Clickable):
    """Checkbox and radio state."""

    def check(self) -> Self:
        return self._perform("check", lambda handle: handle.check())

    def uncheck(self) -> Self:
        return self._perform("uncheck", lambda handle: handle.uncheck())

    def toggle(self) -> Self:
        return self.click()

    def should_be_checked(self) -> Self:
        return self.should(Condition.BE_CHECKED)

    def should_not_be_checked(self) -> Self:
        return self.should(Condition.NOT_BE_CHECKED)


class Selectable(Component):
    def select_option(self, value: str) -> Self:
        """Select the ``<option>`` whose value is ``value``."""
        return self._perform("select_option", lambda handle: handle.select(value))

    def should_have_option(self, text: str) -> Self:
        return self._perform(
            "should_have_option",
            lambda handle: handle.find("option").should(Condition.CONTAIN, text),
        )


class Submittable(Component):
    def submit(self) -> Self:
        return self._perform("submit", lambda handle: handle.trigger("submit"))
