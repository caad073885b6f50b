"""Interactive component: adds enabled/disabled state and value assertions."""

from pomkit.components.basic import BasicComponent
from pomkit.components.traits import Enableable, HasValue


class InteractiveComponent(Enableable, HasValue, BasicComponent):
    """A control the user can operate, such as a button or a field."""
