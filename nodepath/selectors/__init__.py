"""
Selector translation for nodepath.

- **SelectorTranslator**: maps ``(selector_type, locator)`` to XPath
- **SelectorType**: the supported selector kinds
- **CssSelector**: CSS to XPath through cssselect
- **NamedSelector**: user-facing lookups (links, buttons, fields, options)
"""

from nodepath.selectors.css import CssSelector
from nodepath.selectors.named import DEFAULT_SELECTORS, NamedSelector
from nodepath.selectors.translator import SelectorTranslator, SelectorType, Translator

__all__ = [
    "SelectorTranslator",
    "SelectorType",
    "Translator",
    "CssSelector",
    "NamedSelector",
    "DEFAULT_SELECTORS",
]
