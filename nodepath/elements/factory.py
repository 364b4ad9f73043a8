"""
Element factory for nodepath.

Searches never construct elements themselves; they ask the factory of the
element they start from. Swapping the factory changes the class of every
element found from there on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from nodepath.config.options import WaitOptions

if TYPE_CHECKING:
    from nodepath.drivers.base import BaseDriver
    from nodepath.elements.node import NodeElement
    from nodepath.selectors import SelectorTranslator


class ElementFactory:
    """Create NodeElements from locators returned by a driver.

    Args:
        wait_options: Wait defaults handed to every created element.
        element_class: Class to instantiate, NodeElement by default.
    """

    def __init__(
        self,
        wait_options: Optional[WaitOptions] = None,
        element_class: Optional[type["NodeElement"]] = None,
    ) -> None:
        self.wait_options = wait_options or WaitOptions()
        self._element_class = element_class

    @property
    def element_class(self) -> type["NodeElement"]:
        if self._element_class is None:
            # node.py imports this module
            from nodepath.elements.node import NodeElement

            self._element_class = NodeElement
        return self._element_class

    def create_element(
        self,
        locator: str,
        driver: "BaseDriver",
        selector_translator: "SelectorTranslator",
    ) -> "NodeElement":
        """Create an element for a locator.

        Args:
            locator: XPath locator of the new element.
            driver: Driver the element talks to.
            selector_translator: Translator used by the element's searches.

        Returns:
            New element sharing this factory.
        """
        return self.element_class(
            locator,
            driver,
            selector_translator,
            factory=self,
            wait_options=self.wait_options,
        )


__all__ = ["ElementFactory"]
