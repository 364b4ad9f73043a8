"""
Driver backends for nodepath.

- **BaseDriver**: the capability interface every backend implements
- **HtmlDriver**: lxml-backed driver over a static HTML document
"""

from nodepath.drivers.base import BaseDriver, OptionValue
from nodepath.drivers.html import EMPTY_DOCUMENT, HtmlDriver

__all__ = [
    "BaseDriver",
    "OptionValue",
    "HtmlDriver",
    "EMPTY_DOCUMENT",
]
