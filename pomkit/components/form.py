"""Form component."""

from pomkit.components.interactive import InteractiveComponent
from pomkit.components.traits import Submittable


class Form(Submittable, InteractiveComponent):
    """A ``<form>``; ``submit()`` fires the submit event without clicking a button."""
