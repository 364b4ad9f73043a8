"""
Element System for nodepath.

Elements address document nodes through XPath locators and re-query the
driver on every call; nothing about the document is cached.

- **Locator**: union-aware locator algebra (``compose``, ``is_union``)
- **TraversableElement**: shared search and wait surface
- **NodeElement**: a single node (text, attributes, form state, actions)
- **DocumentElement**: the page root
- **ElementFactory**: creates the elements returned by searches
- **OptionResolver**: exact-then-partial option matching for selects

Example usage:

    from nodepath import DocumentElement, HtmlDriver, SelectorTranslator

    page = DocumentElement(HtmlDriver(html), SelectorTranslator())

    # Searches compose the locator of the element they start from
    form = page.find("css", "form#login")
    inputs = form.find_all("xpath", "input | textarea")

    # Ancestry
    container = form.get_parent()

    # Selects resolve options by value or text
    form.find_field("Country").select_option("Japan")

    # Polling
    banner = page.wait_for(2000, lambda p: p.find("css", ".flash"))
"""

from nodepath.elements.locator import Locator, compose, is_union, literal, split_union
from nodepath.elements.factory import ElementFactory
from nodepath.elements.base import NAMED, NAMED_EXACT, NAMED_PARTIAL, TraversableElement
from nodepath.elements.options import OptionResolver
from nodepath.elements.node import NodeElement
from nodepath.elements.document import DOCUMENT_LOCATOR, DocumentElement

__all__ = [
    # Locator algebra
    "Locator",
    "compose",
    "is_union",
    "literal",
    "split_union",
    # Elements
    "TraversableElement",
    "NodeElement",
    "DocumentElement",
    "DOCUMENT_LOCATOR",
    # Collaborators
    "ElementFactory",
    "OptionResolver",
    # Named search strategies
    "NAMED",
    "NAMED_EXACT",
    "NAMED_PARTIAL",
]
