"""
Base element for nodepath.

TraversableElement holds what every element shares: an immutable XPath
locator, the driver and selector translator it talks to, and the search
operations that derive new elements from its locator. It never caches
document state; every call goes back to the driver.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar, Union

from nodepath.config.options import WaitOptions
from nodepath.elements.factory import ElementFactory
from nodepath.elements.locator import Locator
from nodepath.exceptions import ElementNotFoundError
from nodepath.waiters import DEFAULT_OPTIONS, WaitLoop

if TYPE_CHECKING:
    from nodepath.drivers.base import BaseDriver
    from nodepath.elements.node import NodeElement
    from nodepath.selectors import SelectorTranslator, SelectorType

logger = logging.getLogger(__name__)

T = TypeVar("T")

SelectorKind = Union["SelectorType", str]

# Searches with this selector type try exact matching, then partial.
NAMED = "named"
NAMED_EXACT = "named_exact"
NAMED_PARTIAL = "named_partial"


class TraversableElement(ABC):
    """Abstract base class for locator-addressed elements.

    Args:
        locator: XPath locator of the element.
        driver: Driver performing the document operations.
        selector_translator: Translator turning selectors into XPath.
        factory: Factory creating the elements found by searches.
        wait_options: Defaults for ``wait_for``.
    """

    def __init__(
        self,
        locator: str,
        driver: "BaseDriver",
        selector_translator: "SelectorTranslator",
        factory: Optional[ElementFactory] = None,
        wait_options: Optional[WaitOptions] = None,
    ) -> None:
        self._locator = locator
        self._driver = driver
        self._selector_translator = selector_translator
        self._wait_options = wait_options or (
            factory.wait_options if factory is not None else DEFAULT_OPTIONS
        )
        self._factory = factory or ElementFactory(self._wait_options)

    # Locatable

    @property
    def locator(self) -> str:
        """The XPath locator of this element."""
        return self._locator

    def get_locator(self) -> str:
        return self._locator

    @property
    def driver(self) -> "BaseDriver":
        return self._driver

    @property
    def selector_translator(self) -> "SelectorTranslator":
        return self._selector_translator

    @property
    def factory(self) -> ElementFactory:
        return self._factory

    # Searching

    def resolve_selector(self, selector_type: SelectorKind, locator: Any) -> str:
        """Translate a selector into a raw XPath locator.

        Args:
            selector_type: Selector type (``xpath``, ``css``, ``named_exact``...).
            locator: Selector value.

        Returns:
            XPath expression relative to this element.
        """
        return self._selector_translator.selector_to_xpath(selector_type, locator)

    def _find_locators(self, selector_type: SelectorKind, locator: Any) -> list[str]:
        if selector_type == NAMED:
            found = self._find_locators(NAMED_EXACT, locator)
            if not found:
                found = self._find_locators(NAMED_PARTIAL, locator)
            return found

        xpath = Locator.compose(self._locator, self.resolve_selector(selector_type, locator))
        found = self._driver.find(xpath)
        logger.debug(f"Found {len(found)} match(es) for {xpath}")
        return found

    def _create(self, locator: str) -> "NodeElement":
        return self._factory.create_element(
            locator, self._driver, self._selector_translator
        )

    def find(self, selector_type: SelectorKind, locator: Any) -> Optional["NodeElement"]:
        """Find the first element matching a selector inside this one.

        Args:
            selector_type: Selector type.
            locator: Selector value.

        Returns:
            The first match, or None.
        """
        found = self._find_locators(selector_type, locator)
        if not found:
            return None
        return self._create(found[0])

    def find_all(self, selector_type: SelectorKind, locator: Any) -> list["NodeElement"]:
        """Find all elements matching a selector inside this one.

        Returns:
            Matches in the order the driver returned them.
        """
        return [self._create(match) for match in self._find_locators(selector_type, locator)]

    def has(self, selector_type: SelectorKind, locator: Any) -> bool:
        """Check whether an element matching the selector exists."""
        return self.find(selector_type, locator) is not None

    def wait_for(
        self,
        timeout_ms: Optional[float],
        predicate: Callable[[Any], T],
    ) -> Optional[T]:
        """Poll a predicate with this element until it is satisfied.

        Args:
            timeout_ms: Time budget in milliseconds, None for the configured
                default.
            predicate: Callable receiving this element.

        Returns:
            The first truthy, non-empty result, or the last result once
            the budget is spent.

        Raises:
            InvalidArgumentError: If the predicate is not callable.
        """
        if timeout_ms is None:
            timeout_ms = self._wait_options.timeout_ms
        loop = WaitLoop(timeout_ms, predicate, options=self._wait_options)
        return loop.run(self)

    # Named lookups

    def find_by_id(self, id: str) -> Optional["NodeElement"]:
        return self.find(NAMED, ("id", id))

    def has_link(self, locator: str) -> bool:
        return self.find_link(locator) is not None

    def find_link(self, locator: str) -> Optional["NodeElement"]:
        """Find a link by id, text, title or image alt."""
        return self.find(NAMED, ("link", locator))

    def click_link(self, locator: str) -> None:
        self._require(self.find_link(locator), "link", locator).click()

    def has_button(self, locator: str) -> bool:
        return self.find_button(locator) is not None

    def find_button(self, locator: str) -> Optional["NodeElement"]:
        """Find a button by id, name, value, text or title."""
        return self.find(NAMED, ("button", locator))

    def press_button(self, locator: str) -> None:
        self._require(self.find_button(locator), "button", locator).press()

    def has_field(self, locator: str) -> bool:
        return self.find_field(locator) is not None

    def find_field(self, locator: str) -> Optional["NodeElement"]:
        """Find a form field by id, name, label or placeholder."""
        return self.find(NAMED, ("field", locator))

    def fill_field(self, locator: str, value: Any) -> None:
        self._require(self.find_field(locator), "form field", locator).set_value(value)

    def has_checked_field(self, locator: str) -> bool:
        field = self.find_field(locator)
        return field is not None and field.is_checked()

    def has_unchecked_field(self, locator: str) -> bool:
        field = self.find_field(locator)
        return field is not None and not field.is_checked()

    def check_field(self, locator: str) -> None:
        self._require(self.find_field(locator), "form field", locator).check()

    def uncheck_field(self, locator: str) -> None:
        self._require(self.find_field(locator), "form field", locator).uncheck()

    def has_select(self, locator: str) -> bool:
        return self.has(NAMED, ("select", locator))

    def select_field_option(self, locator: str, value: str, multiple: bool = False) -> None:
        field = self._require(self.find_field(locator), "form field", locator)
        field.select_option(value, multiple)

    def has_table(self, locator: str) -> bool:
        return self.has(NAMED, ("table", locator))

    def attach_file_to_field(self, locator: str, path: str) -> None:
        self._require(self.find_field(locator), "form field", locator).attach_file(path)

    @staticmethod
    def _require(
        element: Optional["NodeElement"],
        type: str,
        locator: str,
    ) -> "NodeElement":
        if element is None:
            raise ElementNotFoundError(type, "id|name|label|value", locator)
        return element

    # Identity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TraversableElement):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._locator == other._locator
            and self._driver is other._driver
        )

    def __hash__(self) -> int:
        return hash((type(self), self._locator, id(self._driver)))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self._locator!r}>"


__all__ = [
    "TraversableElement",
    "NAMED",
    "NAMED_EXACT",
    "NAMED_PARTIAL",
]
