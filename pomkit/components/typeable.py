"""Typeable component: text entry."""

from pomkit.components.interactive import InteractiveComponent
from pomkit.components.traits import Typeable


class TypeableComponent(Typeable, InteractiveComponent):
    """A component that accepts typed text, e.g. a ``<textarea>``."""
