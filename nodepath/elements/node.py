"""
Node element for nodepath.

A NodeElement addresses one node of the document through its locator.
Queries, mutations and interactions are single driver calls made with
that locator: synchronous, never retried, and any driver error is
propagated unchanged.
"""

from __future__ import annotations

from typing import Optional, Union

from nodepath.drivers.base import OptionValue
from nodepath.elements.base import TraversableElement
from nodepath.elements.options import OptionResolver


class NodeElement(TraversableElement):
    """Element addressing a single document node.

    Example:
        field = page.find("css", "input[name=email]")
        field.set_value("user@example.com")
        form = field.get_parent()
        form.submit()
    """

    def is_valid(self) -> bool:
        """Check that the locator matches exactly one node.

        No match means the node is gone; several mean the locator is
        ambiguous. Both make the element invalid.
        """
        return len(self._driver.find(self._locator)) == 1

    def get_parent(self) -> Optional["NodeElement"]:
        return self.find("xpath", "..")

    # Queryable

    def get_tag_name(self) -> str:
        return self._driver.get_tag_name(self._locator)

    def get_text(self) -> str:
        return self._driver.get_text(self._locator)

    def get_html(self) -> str:
        """Get the inner HTML of the element."""
        return self._driver.get_html(self._locator)

    def get_outer_html(self) -> str:
        return self._driver.get_outer_html(self._locator)

    def get_attribute(self, name: str) -> Optional[str]:
        """Get an attribute value, None when it is absent."""
        return self._driver.get_attribute(self._locator, name)

    def has_attribute(self, name: str) -> bool:
        return self._driver.get_attribute(self._locator, name) is not None

    def has_class(self, class_name: str) -> bool:
        """Check if element has a specific class.

        Args:
            class_name: Class name to check.

        Returns:
            True if the whitespace-separated ``class`` attribute holds it.
        """
        classes = self.get_attribute("class")
        if classes is None:
            return False
        return class_name in classes.split()

    def get_value(self) -> OptionValue:
        return self._driver.get_value(self._locator)

    def is_visible(self) -> bool:
        return self._driver.is_visible(self._locator)

    def is_checked(self) -> bool:
        return self._driver.is_checked(self._locator)

    def is_selected(self) -> bool:
        return self._driver.is_selected(self._locator)

    # Mutable

    def set_value(self, value: OptionValue) -> None:
        self._driver.set_value(self._locator, value)

    def check(self) -> None:
        self._driver.check(self._locator)

    def uncheck(self) -> None:
        self._driver.uncheck(self._locator)

    def select_option(self, text: str, multiple: bool = False) -> None:
        """Select an option by value or displayed text.

        Args:
            text: Option value or text; exact matches win over partial ones.
            multiple: Add to the current selection of a multiple select.

        Raises:
            ElementNotFoundError: If this is a select and no option matches.
        """
        OptionResolver(self).select(text, multiple)

    def attach_file(self, path: str) -> None:
        self._driver.attach_file(self._locator, path)

    def submit(self) -> None:
        """Submit the form this element is, or belongs to."""
        self._driver.submit_form(self._locator)

    # Interactive

    def click(self) -> None:
        self._driver.click(self._locator)

    def press(self) -> None:
        """Press a button; same as click."""
        self.click()

    def double_click(self) -> None:
        self._driver.double_click(self._locator)

    def right_click(self) -> None:
        self._driver.right_click(self._locator)

    def mouse_over(self) -> None:
        self._driver.mouse_over(self._locator)

    def focus(self) -> None:
        self._driver.focus(self._locator)

    def blur(self) -> None:
        self._driver.blur(self._locator)

    def drag_to(self, destination: TraversableElement) -> None:
        """Drag this element onto another one."""
        self._driver.drag_to(self._locator, destination.get_locator())

    def key_press(self, char: Union[str, int], modifier: Optional[str] = None) -> None:
        """Press a key on the element.

        Args:
            char: Character or key code.
            modifier: One of ``ctrl``, ``alt``, ``shift``, ``meta``.
        """
        self._driver.key_press(self._locator, char, modifier)

    def key_down(self, char: Union[str, int], modifier: Optional[str] = None) -> None:
        self._driver.key_down(self._locator, char, modifier)

    def key_up(self, char: Union[str, int], modifier: Optional[str] = None) -> None:
        self._driver.key_up(self._locator, char, modifier)


__all__ = ["NodeElement"]
