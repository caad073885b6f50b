"""pomkit exception hierarchy."""


class PomError(Exception):
    """Base exception for all pomkit errors."""


class ConfigurationError(PomError):
    """Raised when a component or driver is used in a way it was not set up for."""


class LookupNotDefinedError(ConfigurationError):
    """Raised when a component has no way to locate its elements."""

    def __init__(self, identifier: str, detail: str | None = None) -> None:
        self.identifier = identifier
        self.detail = detail or (
            "Neither selector, text, nor callback is defined for this component."
        )
        super().__init__(f"Component '{identifier}': {self.detail}")


class MissingCallbackError(ConfigurationError):
    """Raised when callback resolution is requested without a callback."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"No callback defined for component '{identifier}'.")


class MissingConditionError(ConfigurationError):
    """Raised when should() is called without a condition."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(
            f"Assertion must be provided to should() on component '{identifier}'."
        )


class UnknownConditionError(ConfigurationError):
    """Raised for an assertion name no driver understands."""

    def __init__(self, condition: str) -> None:
        self.condition = condition
        super().__init__(f"Unknown assertion condition: {condition!r}")


class UnknownOperationError(ConfigurationError):
    """Raised for a collection operation a handle cannot apply."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Unknown collection operation: {operation!r}")


class NoActiveDriverError(ConfigurationError):
    """Raised when a component is used outside ``use_driver()``."""

    def __init__(self) -> None:
        super().__init__(
            "No active driver. Wrap the test in use_driver(driver) "
            "or browser_session()."
        )


class BrowserError(PomError):
    """Raised on browser lifecycle errors."""
