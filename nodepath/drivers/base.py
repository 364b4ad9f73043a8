"""
Driver interface for nodepath.

A driver performs every real document operation on behalf of elements.
All methods address nodes through XPath locators; ``find`` returns one
locator per matching node, each identifying exactly that node.

Backends subclass BaseDriver and override the operations they support.
Anything left alone raises UnsupportedDriverActionError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Union

from nodepath.exceptions import UnsupportedDriverActionError

OptionValue = Union[str, bool, list[str], None]


class BaseDriver(ABC):
    """Abstract base class for driver backends."""

    def _unsupported(self, action: str) -> UnsupportedDriverActionError:
        return UnsupportedDriverActionError(action, self)

    # Document

    def get_content(self) -> str:
        """Get the HTML of the whole document."""
        raise self._unsupported("Getting the page content")

    # Lookup

    @abstractmethod
    def find(self, xpath: str) -> list[str]:
        """Find all nodes matching an XPath locator.

        Args:
            xpath: Locator to evaluate against the document root.

        Returns:
            One locator per matching node, in document order.
        """
        ...

    # Queries

    def get_tag_name(self, xpath: str) -> str:
        """Get the lowercase tag name of a node."""
        raise self._unsupported("Getting the tag name")

    def get_text(self, xpath: str) -> str:
        """Get the whitespace-normalized text of a node."""
        raise self._unsupported("Getting the element text")

    def get_html(self, xpath: str) -> str:
        """Get the inner HTML of a node."""
        raise self._unsupported("Getting the element inner HTML")

    def get_outer_html(self, xpath: str) -> str:
        """Get the outer HTML of a node."""
        raise self._unsupported("Getting the element outer HTML")

    def get_attribute(self, xpath: str, name: str) -> Optional[str]:
        """Get an attribute value, or None when it is absent."""
        raise self._unsupported("Getting the element attribute")

    def get_value(self, xpath: str) -> OptionValue:
        """Get the value of a form field.

        Checkboxes give their value when checked and None otherwise,
        multiple selects give a list.
        """
        raise self._unsupported("Getting the field value")

    def is_visible(self, xpath: str) -> bool:
        raise self._unsupported("Checking the element visibility")

    def is_checked(self, xpath: str) -> bool:
        raise self._unsupported("Checking the checked state")

    def is_selected(self, xpath: str) -> bool:
        raise self._unsupported("Checking the selected state")

    # Mutations

    def set_value(self, xpath: str, value: OptionValue) -> None:
        raise self._unsupported("Setting the field value")

    def check(self, xpath: str) -> None:
        raise self._unsupported("Checking a checkbox")

    def uncheck(self, xpath: str) -> None:
        raise self._unsupported("Unchecking a checkbox")

    def select_option(self, xpath: str, value: str, multiple: bool = False) -> None:
        """Select an option of a select field.

        Args:
            xpath: Locator of the select (or select-like widget).
            value: Option value to select.
            multiple: Add to the current selection instead of replacing it.
        """
        raise self._unsupported("Selecting an option")

    def attach_file(self, xpath: str, path: str) -> None:
        raise self._unsupported("Attaching a file")

    def submit_form(self, xpath: str) -> None:
        raise self._unsupported("Submitting a form")

    # Interactions

    def click(self, xpath: str) -> None:
        raise self._unsupported("Clicking on an element")

    def double_click(self, xpath: str) -> None:
        raise self._unsupported("Double-clicking")

    def right_click(self, xpath: str) -> None:
        raise self._unsupported("Right-clicking")

    def mouse_over(self, xpath: str) -> None:
        raise self._unsupported("Mouse manipulations")

    def focus(self, xpath: str) -> None:
        raise self._unsupported("Focusing an element")

    def blur(self, xpath: str) -> None:
        raise self._unsupported("Removing focus from an element")

    def key_press(self, xpath: str, char: Union[str, int], modifier: Optional[str] = None) -> None:
        raise self._unsupported("Keyboard manipulations")

    def key_down(self, xpath: str, char: Union[str, int], modifier: Optional[str] = None) -> None:
        raise self._unsupported("Keyboard manipulations")

    def key_up(self, xpath: str, char: Union[str, int], modifier: Optional[str] = None) -> None:
        raise self._unsupported("Keyboard manipulations")

    def drag_to(self, source_xpath: str, destination_xpath: str) -> None:
        raise self._unsupported("Mouse manipulations")


__all__ = [
    "BaseDriver",
    "OptionValue",
]
