"""
Exception types for nodepath.

Every error raised by the element layer, the selector translator, the
bundled drivers and the configuration loader derives from NodepathError.
"""

from typing import Optional


class NodepathError(Exception):
    """Base class for all nodepath errors."""

    pass


class InvalidArgumentError(NodepathError, ValueError):
    """Raised when a caller breaks an API contract.

    Examples are a non-callable wait predicate, an unknown selector type
    or a malformed named selector. Raised before any driver call is made.
    """

    pass


class ElementNotFoundError(NodepathError):
    """Raised when a required element cannot be located.

    Args:
        type: Human readable element type (e.g. "select option").
        selector: How the element was looked up (e.g. "value or text").
        locator: The value that was searched for.
    """

    def __init__(
        self,
        type: Optional[str] = None,
        selector: Optional[str] = None,
        locator: Optional[str] = None,
    ) -> None:
        self.type = type
        self.selector = selector
        self.locator = locator

        message = (type or "").strip() or "Element"
        message = message[0].upper() + message[1:]
        if locator is not None:
            if selector is None:
                message += f' matching "{locator}"'
            else:
                message += f' with {selector} "{locator}"'
        super().__init__(f"{message} not found.")


class DriverError(NodepathError):
    """Raised by driver backends when an operation fails."""

    pass


class UnsupportedDriverActionError(DriverError):
    """Raised when a driver backend does not implement an action."""

    def __init__(self, action: str, driver: object) -> None:
        self.action = action
        self.driver_name = type(driver).__name__
        super().__init__(f"{action} is not supported by {self.driver_name}")


class ConfigurationError(NodepathError):
    """Configuration loading or parsing error."""

    pass


__all__ = [
    "NodepathError",
    "InvalidArgumentError",
    "ElementNotFoundError",
    "DriverError",
    "UnsupportedDriverActionError",
    "ConfigurationError",
]
