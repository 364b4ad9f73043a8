"""
CSS selector translation for nodepath.

Uses cssselect, the translator lxml relies on for its own ``cssselect()``
support, to turn CSS selectors into XPath that is relative to the element
a search starts from.
"""

from __future__ import annotations

from cssselect import GenericTranslator, SelectorError

from nodepath.exceptions import InvalidArgumentError


class CssSelector:
    """Translate CSS selectors into relative XPath expressions.

    Example:
        xpath = CssSelector().translate_to_xpath("ul > li.active")
    """

    prefix = "descendant-or-self::"

    def __init__(self) -> None:
        self._translator = GenericTranslator()

    def translate_to_xpath(self, locator: str) -> str:
        """Translate a CSS selector.

        Args:
            locator: CSS selector. Selector groups (``a, b``) become XPath
                unions.

        Returns:
            XPath expression.

        Raises:
            InvalidArgumentError: If the locator is not a string or not
                valid CSS.
        """
        if not isinstance(locator, str):
            raise InvalidArgumentError(
                f"The CSS selector must be a string, got {type(locator).__name__}"
            )
        try:
            return self._translator.css_to_xpath(locator, prefix=self.prefix)
        except SelectorError as e:
            raise InvalidArgumentError(f"Invalid CSS selector {locator!r}: {e}") from e

    __call__ = translate_to_xpath


__all__ = ["CssSelector"]
