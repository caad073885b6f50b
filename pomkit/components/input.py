"""Input component."""

from __future__ import annotations

from typing import Self

from pomkit.components.traits import Checkable
from pomkit.components.typeable import TypeableComponent


class Input(Checkable, TypeableComponent):
    """An ``<input>`` of any type, including checkboxes and radios."""

    def should_accept_type(self, expected_type: str) -> Self:
        """Assert the input's ``type`` attribute, e.g. ``email``."""
        return self.should_have_attribute("type", expected_type)
