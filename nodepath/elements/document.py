"""
Document element for nodepath.

The root of every search on a page. It shares the traversal surface of
node elements (find, find_all, wait_for, the named helpers) and adds
access to the whole page content.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from nodepath.config.options import WaitOptions
from nodepath.elements.base import TraversableElement
from nodepath.elements.factory import ElementFactory

if TYPE_CHECKING:
    from nodepath.drivers.base import BaseDriver
    from nodepath.selectors import SelectorTranslator

DOCUMENT_LOCATOR = "//html"


class DocumentElement(TraversableElement):
    """Element for the document root.

    Example:
        page = DocumentElement(HtmlDriver(html), SelectorTranslator())
        page.fill_field("Email", "user@example.com")
        page.press_button("Sign in")
    """

    def __init__(
        self,
        driver: "BaseDriver",
        selector_translator: "SelectorTranslator",
        factory: Optional[ElementFactory] = None,
        wait_options: Optional[WaitOptions] = None,
    ) -> None:
        super().__init__(
            DOCUMENT_LOCATOR,
            driver,
            selector_translator,
            factory=factory,
            wait_options=wait_options,
        )

    def get_content(self) -> str:
        """Get the HTML of the whole page."""
        return self._driver.get_content()

    def get_text(self) -> str:
        return self._driver.get_text(self._locator)

    def has_content(self, content: str) -> bool:
        """Check whether the page contains the given text."""
        return self.has("named_partial", ("content", content))


__all__ = [
    "DocumentElement",
    "DOCUMENT_LOCATOR",
]
