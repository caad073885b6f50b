"""pomkit: page-object components for Playwright end-to-end tests."""

from pomkit.browser import BrowserManager
from pomkit.components import (
    BasicComponent,
    Component,
    Form,
    Group,
    Input,
    InteractiveComponent,
    Select,
    TypeableComponent,
)
from pomkit.conditions import Condition
from pomkit.config import PomConfig
from pomkit.drivers import Driver, Handle, get_driver, use_driver
from pomkit.drivers.playwright import PlaywrightDriver, PlaywrightHandle
from pomkit.exceptions import (
    BrowserError,
    ConfigurationError,
    LookupNotDefinedError,
    MissingCallbackError,
    MissingConditionError,
    NoActiveDriverError,
    PomError,
    UnknownConditionError,
    UnknownOperationError,
)
from pomkit.logger import configure_logging
from pomkit.lookup import LookupOptions, Resolver, Selector, Text
from pomkit.session import browser_session

__version__ = "0.1.0"

__all__ = [
    "BasicComponent",
    "BrowserError",
    "BrowserManager",
    "Component",
    "Condition",
    "ConfigurationError",
    "Driver",
    "Form",
    "Group",
    "Handle",
    "Input",
    "InteractiveComponent",
    "LookupNotDefinedError",
    "LookupOptions",
    "MissingCallbackError",
    "MissingConditionError",
    "NoActiveDriverError",
    "PlaywrightDriver",
    "PlaywrightHandle",
    "PomConfig",
    "PomError",
    "Resolver",
    "Select",
    "Selector",
    "Text",
    "TypeableComponent",
    "UnknownConditionError",
    "UnknownOperationError",
    "__version__",
    "browser_session",
    "configure_logging",
    "get_driver",
    "use_driver",
]
