"""
Option resolution for select fields.

A select is filled by the option's value, but callers usually know the
option by what is displayed. OptionResolver finds the option by value or
text, first with exact matching and then with partial matching, and
hands the resolved value to the driver.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nodepath.elements.base import NAMED_EXACT, NAMED_PARTIAL
from nodepath.exceptions import ElementNotFoundError

if TYPE_CHECKING:
    from nodepath.elements.node import NodeElement

logger = logging.getLogger(__name__)

SELECT_TAG = "select"


class OptionResolver:
    """Select options of a field by value or text.

    Args:
        element: The select field (or select-like widget).
    """

    def __init__(self, element: "NodeElement") -> None:
        self._element = element

    def resolve(self, text: str) -> str:
        """Resolve the value of the option matching ``text``.

        The first exact match wins; partial matches are only considered
        when there is no exact one.

        Raises:
            ElementNotFoundError: If no option matches.
        """
        for strategy in (NAMED_EXACT, NAMED_PARTIAL):
            option = self._element.find(strategy, ("option", text))
            if option is not None:
                value = option.get_value()
                logger.debug(
                    f"Resolved option {text!r} of {self._element.locator} "
                    f"to value {value!r} ({strategy})"
                )
                return value

        raise ElementNotFoundError("select option", "value or text", text)

    def select(self, text: str, multiple: bool = False) -> None:
        """Select the option matching ``text``.

        Non-select elements skip resolution and pass the text through to
        the driver, which may implement its own matching for custom
        widgets.

        Args:
            text: Option value or text.
            multiple: Add to the current selection.
        """
        element = self._element
        tag_name = element.driver.get_tag_name(element.locator)

        if (tag_name or "").lower() != SELECT_TAG:
            element.driver.select_option(element.locator, text, multiple)
            return

        element.driver.select_option(element.locator, self.resolve(text), multiple)


__all__ = ["OptionResolver"]
