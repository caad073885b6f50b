"""Page-object component classes."""

from pomkit.components.base import Component
from pomkit.components.basic import BasicComponent
from pomkit.components.form import Form
from pomkit.components.group import Group
from pomkit.components.input import Input
from pomkit.components.interactive import InteractiveComponent
from pomkit.components.select import Select
from pomkit.components.typeable import TypeableComponent

__all__ = [
    "BasicComponent",
    "Component",
    "Form",
    "Group",
    "Input",
    "InteractiveComponent",
    "Select",
    "TypeableComponent",
]
