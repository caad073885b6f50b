"""Basic component: any element that can be clicked, focused and inspected."""

from pomkit.components.traits import (
    AttributeAssertions,
    Clickable,
    Focusable,
    KeyboardNavigable,
    Scrollable,
    TextAssertions,
    VisibilityAssertions,
)


class BasicComponent(
    Clickable,
    Focusable,
    KeyboardNavigable,
    Scrollable,
    VisibilityAssertions,
    TextAssertions,
    AttributeAssertions,
):
    """Represents a basic component on a webpage."""
