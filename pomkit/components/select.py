"""Select (dropdown) component."""

from pomkit.components.input import Input
from pomkit.components.traits import Selectable


class Select(Selectable, Input):
    """A ``<select>`` whose options are picked with ``select_option()``."""
