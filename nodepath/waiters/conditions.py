"""
Wait conditions for nodepath.

Conditions are callable predicates taking the element being waited on,
so they can be passed straight to ``wait_for``:

    element.wait_for(3000, ElementTextContains("Done"))

Driver errors raised while checking a condition propagate to the caller.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional, Pattern, Union

if TYPE_CHECKING:
    from nodepath.elements.base import TraversableElement
    from nodepath.selectors import SelectorType


class WaitCondition(ABC):
    """Abstract base class for wait conditions.

    A wait condition returns False/None while unsatisfied and a truthy
    value once satisfied.
    """

    @abstractmethod
    def __call__(self, element: "TraversableElement") -> Any:
        ...

    @property
    def description(self) -> str:
        """Human-readable description of the condition."""
        return self.__class__.__name__

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.description}>"


# Element State Conditions

class ElementVisible(WaitCondition):
    """Wait for element to become visible."""

    def __call__(self, element: "TraversableElement") -> bool:
        return element.is_visible()

    @property
    def description(self) -> str:
        return "element to be visible"


class ElementHidden(WaitCondition):
    """Wait for element to become hidden."""

    def __call__(self, element: "TraversableElement") -> bool:
        return not element.is_visible()

    @property
    def description(self) -> str:
        return "element to be hidden"


class ElementChecked(WaitCondition):
    """Wait for checkbox/radio to be checked."""

    def __call__(self, element: "TraversableElement") -> bool:
        return element.is_checked()

    @property
    def description(self) -> str:
        return "element to be checked"


class ElementUnchecked(WaitCondition):
    """Wait for checkbox/radio to be unchecked."""

    def __call__(self, element: "TraversableElement") -> bool:
        return not element.is_checked()

    @property
    def description(self) -> str:
        return "element to be unchecked"


# Text Conditions

class ElementTextContains(WaitCondition):
    """Wait for element text to contain a substring."""

    def __init__(self, text: str) -> None:
        self._text = text

    def __call__(self, element: "TraversableElement") -> bool:
        return self._text in (element.get_text() or "")

    @property
    def description(self) -> str:
        return f"element text to contain '{self._text}'"


class ElementTextEquals(WaitCondition):
    """Wait for element text to equal a value."""

    def __init__(self, text: str) -> None:
        self._text = text

    def __call__(self, element: "TraversableElement") -> bool:
        return (element.get_text() or "").strip() == self._text

    @property
    def description(self) -> str:
        return f"element text to equal '{self._text}'"


class ElementTextMatches(WaitCondition):
    """Wait for element text to match a regex pattern.

    Returns the match object once satisfied.
    """

    def __init__(self, pattern: Union[str, Pattern[str]]) -> None:
        self._pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def __call__(self, element: "TraversableElement") -> Optional[re.Match[str]]:
        return self._pattern.search(element.get_text() or "")

    @property
    def description(self) -> str:
        return f"element text to match '{self._pattern.pattern}'"


# Attribute Conditions

class ElementHasAttribute(WaitCondition):
    """Wait for element to have an attribute."""

    def __init__(self, name: str) -> None:
        self._name = name

    def __call__(self, element: "TraversableElement") -> bool:
        return element.has_attribute(self._name)

    @property
    def description(self) -> str:
        return f"element to have attribute '{self._name}'"


class ElementAttributeEquals(WaitCondition):
    """Wait for an attribute to equal a value."""

    def __init__(self, name: str, value: str) -> None:
        self._name = name
        self._value = value

    def __call__(self, element: "TraversableElement") -> bool:
        return element.get_attribute(self._name) == self._value

    @property
    def description(self) -> str:
        return f"attribute '{self._name}' to equal '{self._value}'"


class ElementHasClass(WaitCondition):
    """Wait for element to have a CSS class."""

    def __init__(self, class_name: str) -> None:
        self._class_name = class_name

    def __call__(self, element: "TraversableElement") -> bool:
        return element.has_class(self._class_name)

    @property
    def description(self) -> str:
        return f"element to have class '{self._class_name}'"


class ElementNotHasClass(WaitCondition):
    """Wait for element to lose a CSS class."""

    def __init__(self, class_name: str) -> None:
        self._class_name = class_name

    def __call__(self, element: "TraversableElement") -> bool:
        return not element.has_class(self._class_name)

    @property
    def description(self) -> str:
        return f"element to not have class '{self._class_name}'"


# Traversal Conditions

class ChildPresent(WaitCondition):
    """Wait for a descendant matching a selector.

    Returns the found element once satisfied.
    """

    def __init__(self, selector_type: Union["SelectorType", str], locator: Any) -> None:
        self._selector_type = selector_type
        self._locator = locator

    def __call__(self, element: "TraversableElement") -> Any:
        return element.find(self._selector_type, self._locator)

    @property
    def description(self) -> str:
        return f"{self._selector_type} child {self._locator!r} to be present"


# Composite Conditions

class AllConditions(WaitCondition):
    """Wait for all conditions to be satisfied."""

    def __init__(self, *conditions: Callable[[Any], Any]) -> None:
        self._conditions = conditions

    def __call__(self, element: "TraversableElement") -> bool:
        return all(condition(element) for condition in self._conditions)

    @property
    def description(self) -> str:
        return " AND ".join(_describe(c) for c in self._conditions)


class AnyCondition(WaitCondition):
    """Wait for any condition to be satisfied.

    Returns the first truthy condition result.
    """

    def __init__(self, *conditions: Callable[[Any], Any]) -> None:
        self._conditions = conditions

    def __call__(self, element: "TraversableElement") -> Any:
        for condition in self._conditions:
            result = condition(element)
            if result:
                return result
        return False

    @property
    def description(self) -> str:
        return " OR ".join(_describe(c) for c in self._conditions)


class NotCondition(WaitCondition):
    """Negate a condition."""

    def __init__(self, condition: Callable[[Any], Any]) -> None:
        self._condition = condition

    def __call__(self, element: "TraversableElement") -> bool:
        return not self._condition(element)

    @property
    def description(self) -> str:
        return f"NOT ({_describe(self._condition)})"


class CustomCondition(WaitCondition):
    """Wrap a plain function with a description."""

    def __init__(
        self,
        predicate: Callable[[Any], Any],
        description: str = "custom condition",
    ) -> None:
        self._predicate = predicate
        self._description = description

    def __call__(self, element: "TraversableElement") -> Any:
        return self._predicate(element)

    @property
    def description(self) -> str:
        return self._description


def _describe(condition: Callable[[Any], Any]) -> str:
    if isinstance(condition, WaitCondition):
        return condition.description
    return getattr(condition, "__name__", repr(condition))


__all__ = [
    "WaitCondition",
    "ElementVisible",
    "ElementHidden",
    "ElementChecked",
    "ElementUnchecked",
    "ElementTextContains",
    "ElementTextEquals",
    "ElementTextMatches",
    "ElementHasAttribute",
    "ElementAttributeEquals",
    "ElementHasClass",
    "ElementNotHasClass",
    "ChildPresent",
    "AllConditions",
    "AnyCondition",
    "NotCondition",
    "CustomCondition",
]
