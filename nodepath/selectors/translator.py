"""
Selector translation for nodepath.

Every search performed by an element goes through a SelectorTranslator,
which turns a ``(selector_type, locator)`` pair into a raw XPath locator.
Selector types form a closed enum; the translator behind each type is
looked up in a registration table and can be replaced per instance.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Optional, Union

from nodepath.exceptions import InvalidArgumentError
from nodepath.selectors.css import CssSelector
from nodepath.selectors.named import NamedSelector

logger = logging.getLogger(__name__)

Translator = Callable[[Any], str]


class SelectorType(str, Enum):
    """Supported selector kinds."""

    XPATH = "xpath"
    CSS = "css"
    NAMED_EXACT = "named_exact"
    NAMED_PARTIAL = "named_partial"
    # Searches try named_exact first and fall back to named_partial.
    NAMED = "named"

    @classmethod
    def coerce(cls, value: Union["SelectorType", str]) -> "SelectorType":
        """Convert a string to a SelectorType.

        Raises:
            InvalidArgumentError: If the value names no selector type.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(
                f'Unknown selector type "{value}". '
                f"Supported types: {', '.join(t.value for t in cls)}"
            ) from None


def _xpath_identity(locator: Any) -> str:
    if not isinstance(locator, str):
        raise InvalidArgumentError(
            f"An XPath locator must be a string, got {type(locator).__name__}"
        )
    return locator


class SelectorTranslator:
    """Registration table of selector translators.

    Example:
        translator = SelectorTranslator()
        translator.selector_to_xpath("css", "form input[name=q]")
        translator.selector_to_xpath("named_exact", ("button", "Search"))
    """

    def __init__(
        self,
        translators: Optional[dict[Union[SelectorType, str], Translator]] = None,
    ) -> None:
        """Initialize the translator with the built-in selector types.

        Args:
            translators: Optional overrides for individual selector types.
        """
        self._translators: dict[SelectorType, Translator] = {}

        partial = NamedSelector(exact=False)
        self.register(SelectorType.XPATH, _xpath_identity)
        self.register(SelectorType.CSS, CssSelector())
        self.register(SelectorType.NAMED_EXACT, NamedSelector(exact=True))
        self.register(SelectorType.NAMED_PARTIAL, partial)
        self.register(SelectorType.NAMED, partial)

        for selector_type, translator in (translators or {}).items():
            self.register(selector_type, translator)

    def register(
        self,
        selector_type: Union[SelectorType, str],
        translator: Translator,
    ) -> None:
        """Register the translator used for a selector type.

        Args:
            selector_type: Selector type to (re)bind.
            translator: Callable mapping a locator to an XPath string.

        Raises:
            InvalidArgumentError: If the type is unknown or the translator
                is not callable.
        """
        key = SelectorType.coerce(selector_type)
        if not callable(translator):
            raise InvalidArgumentError(
                f"Translator for {key.value} selectors must be callable"
            )
        self._translators[key] = translator

    def is_registered(self, selector_type: Union[SelectorType, str]) -> bool:
        try:
            return SelectorType.coerce(selector_type) in self._translators
        except InvalidArgumentError:
            return False

    def get(self, selector_type: Union[SelectorType, str]) -> Translator:
        """Get the translator registered for a selector type.

        Raises:
            InvalidArgumentError: If nothing is registered for the type.
        """
        key = SelectorType.coerce(selector_type)
        if key not in self._translators:
            raise InvalidArgumentError(f'No translator registered for "{key.value}"')
        return self._translators[key]

    def selector_to_xpath(
        self,
        selector_type: Union[SelectorType, str],
        locator: Any,
    ) -> str:
        """Translate a selector into an XPath locator.

        Args:
            selector_type: Kind of selector.
            locator: Selector value; a string for xpath and css, a
                ``(name, text)`` pair for named selectors.

        Returns:
            XPath expression.
        """
        xpath = self.get(selector_type)(locator)
        logger.debug(f"Translated {selector_type} selector {locator!r} to {xpath}")
        return xpath


__all__ = [
    "SelectorTranslator",
    "SelectorType",
    "Translator",
]
