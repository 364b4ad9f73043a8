"""
Named selectors for nodepath.

A named selector finds an element by what a user sees on the page: a link
by its text, a field by its label, an option by its value or text. The
locator is a ``(name, text)`` pair such as ``("option", "Blue")``.

Two matching strategies are provided:

- **exact**: text, value, title and label must equal the locator
  (after whitespace normalisation for text content)
- **partial**: they only need to contain it

Ids and names always match exactly.
"""

from __future__ import annotations

from typing import Any, Sequence

from nodepath.elements.locator import Locator
from nodepath.exceptions import InvalidArgumentError

_FIELD_FILTER = (
    "self::input[not(./@type = 'submit' or ./@type = 'image' or ./@type = 'button'"
    " or ./@type = 'reset' or ./@type = 'hidden')]"
    " or self::textarea or self::select"
)
_BUTTON_FILTER = (
    "./@type = 'submit' or ./@type = 'image' or ./@type = 'button' or ./@type = 'reset'"
)

DEFAULT_SELECTORS: dict[str, str] = {
    "id": ".//*[%idMatch%]",
    "link": (
        ".//a[./@href][%idMatch% or %tagTextMatch% or %titleMatch%"
        " or .//img[%altMatch%]]"
    ),
    "button": (
        f".//input[{_BUTTON_FILTER}][%idOrNameMatch% or %valueMatch% or %titleMatch%]"
        " | .//input[./@type = 'image'][%altMatch%]"
        " | .//button[%idOrNameMatch% or %valueMatch% or %tagTextMatch% or %titleMatch%]"
    ),
    "link_or_button": "%link% | %button%",
    "content": "./descendant-or-self::*[%tagTextMatch%]",
    "field": (
        f".//*[{_FIELD_FILTER}][%idOrNameMatch% or %labelTextMatch% or %placeholderMatch%]"
        f" | .//label[%tagTextMatch%]//*[{_FIELD_FILTER}]"
    ),
    "select": (
        ".//select[%idOrNameMatch% or %labelTextMatch%]"
        " | .//label[%tagTextMatch%]//select"
    ),
    "checkbox": (
        ".//input[./@type = 'checkbox'][%idOrNameMatch% or %labelTextMatch%]"
        " | .//label[%tagTextMatch%]//input[./@type = 'checkbox']"
    ),
    "radio": (
        ".//input[./@type = 'radio'][%idOrNameMatch% or %labelTextMatch%]"
        " | .//label[%tagTextMatch%]//input[./@type = 'radio']"
    ),
    "file": (
        ".//input[./@type = 'file'][%idOrNameMatch% or %labelTextMatch%]"
        " | .//label[%tagTextMatch%]//input[./@type = 'file']"
    ),
    "optgroup": ".//optgroup[%labelMatch%]",
    "option": ".//option[%valueMatch% or %tagTextMatch%]",
    "fieldset": ".//fieldset[%idMatch% or ./legend[%tagTextMatch%]]",
    "table": ".//table[%idMatch% or ./caption[%tagTextMatch%]]",
}

_EXACT_REPLACEMENTS: dict[str, str] = {
    "%tagTextMatch%": "normalize-space(string(.)) = %locator%",
    "%valueMatch%": "./@value = %locator%",
    "%titleMatch%": "./@title = %locator%",
    "%altMatch%": "./@alt = %locator%",
    "%labelMatch%": "./@label = %locator%",
    "%placeholderMatch%": "./@placeholder = %locator%",
}

_PARTIAL_REPLACEMENTS: dict[str, str] = {
    "%tagTextMatch%": "contains(normalize-space(string(.)), %locator%)",
    "%valueMatch%": "contains(./@value, %locator%)",
    "%titleMatch%": "contains(./@title, %locator%)",
    "%altMatch%": "contains(./@alt, %locator%)",
    "%labelMatch%": "contains(./@label, %locator%)",
    "%placeholderMatch%": "contains(./@placeholder, %locator%)",
}

# Applied before the text replacements: %labelTextMatch% embeds %tagTextMatch%.
_SHARED_REPLACEMENTS: dict[str, str] = {
    "%idMatch%": "./@id = %locator%",
    "%idOrNameMatch%": "(./@id = %locator% or ./@name = %locator%)",
    "%labelTextMatch%": "./@id = //label[%tagTextMatch%]/@for",
}


class NamedSelector:
    """Translate ``(name, text)`` locators into XPath.

    Args:
        exact: Use exact matching when True, substring matching otherwise.

    Example:
        selector = NamedSelector(exact=True)
        xpath = selector.translate_to_xpath(("link", "Sign in"))
    """

    def __init__(self, exact: bool = True) -> None:
        self.exact = exact
        self._selectors: dict[str, str] = {}
        for name, template in DEFAULT_SELECTORS.items():
            self.register_name(name, template)

    def register_name(self, name: str, template: str) -> None:
        """Register (or replace) a named selector template.

        Templates may reference other named selectors as ``%name%``, the
        match placeholders (``%tagTextMatch%``, ``%idOrNameMatch%``, ...)
        and ``%locator%`` for the searched text.
        """
        self._selectors[name] = template

    def has_name(self, name: str) -> bool:
        return name in self._selectors

    @property
    def names(self) -> list[str]:
        return list(self._selectors)

    def translate_to_xpath(self, locator: Any) -> str:
        """Translate a named locator.

        Args:
            locator: ``(name, text)`` pair.

        Returns:
            XPath expression.

        Raises:
            InvalidArgumentError: If the locator is not a pair or the name
                is not registered.
        """
        name, text = self._unpack(locator)
        if name not in self._selectors:
            raise InvalidArgumentError(
                f'Unknown named selector "{name}". '
                f"Registered names: {', '.join(sorted(self._selectors))}"
            )

        xpath = self._expand(self._selectors[name])
        return xpath.replace("%locator%", Locator.literal(text))

    __call__ = translate_to_xpath

    def _expand(self, template: str) -> str:
        # Nested selector references, e.g. link_or_button
        for name, nested in self._selectors.items():
            token = f"%{name}%"
            if token in template:
                template = template.replace(token, self._expand(nested))

        replacements = _EXACT_REPLACEMENTS if self.exact else _PARTIAL_REPLACEMENTS
        for token, value in _SHARED_REPLACEMENTS.items():
            template = template.replace(token, value)
        for token, value in replacements.items():
            template = template.replace(token, value)
        return template

    @staticmethod
    def _unpack(locator: Any) -> tuple[str, str]:
        if (
            isinstance(locator, str)
            or not isinstance(locator, Sequence)
            or len(locator) != 2
        ):
            raise InvalidArgumentError(
                "A named selector locator must be a (name, text) pair, "
                f"got {locator!r}"
            )
        name, text = locator
        if not isinstance(name, str) or not isinstance(text, str):
            raise InvalidArgumentError(
                f"Named selector name and text must be strings, got {locator!r}"
            )
        return name, text


__all__ = [
    "DEFAULT_SELECTORS",
    "NamedSelector",
]
