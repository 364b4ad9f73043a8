"""
In-memory HTML driver for nodepath.

HtmlDriver evaluates locators against a static HTML document parsed with
lxml. It supports reading the document and mutating form state (values,
checkboxes, radios, selects, file inputs, form submission) without a
browser. Anything that needs JavaScript or real input devices raises
UnsupportedDriverActionError.

Example:
    driver = HtmlDriver('<form><input name="q"></form>')
    page = DocumentElement(driver, SelectorTranslator())
    page.fill_field("q", "lxml")
    driver.get_value(page.find("css", "input").locator)  # "lxml"
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from lxml import etree, html
from lxml.etree import _Element

from nodepath.config.options import DriverOptions
from nodepath.drivers.base import BaseDriver, OptionValue
from nodepath.exceptions import DriverError

logger = logging.getLogger(__name__)

EMPTY_DOCUMENT = "<html><head></head><body></body></html>"

_SUBMIT_TYPES = ("submit", "image")
_NON_VALUE_TYPES = ("submit", "image", "button", "reset", "file")
_INVISIBLE_TAGS = ("head", "script", "style", "template", "title", "meta", "link")


def _normalize_space(text: Optional[str]) -> str:
    return " ".join((text or "").split())


class HtmlDriver(BaseDriver):
    """Driver backed by an lxml HTML tree.

    Args:
        content: HTML document (str or bytes).
        options: Driver options (encoding, styles that hide elements).

    Attributes:
        history: Interactions performed, as dicts with an ``action`` key.
        submitted_forms: Payloads of submitted forms.
    """

    def __init__(
        self,
        content: Union[str, bytes] = EMPTY_DOCUMENT,
        options: Optional[DriverOptions] = None,
    ) -> None:
        self.options = options or DriverOptions()
        self.history: list[dict[str, Any]] = []
        self.submitted_forms: list[dict[str, Any]] = []
        self._root: _Element
        self.load(content)

    def load(self, content: Union[str, bytes]) -> None:
        """Replace the current document.

        Args:
            content: HTML document (str or bytes).

        Raises:
            DriverError: If the content cannot be parsed.
        """
        if isinstance(content, str):
            content = content.encode(self.options.encoding)
        parser = html.HTMLParser(encoding=self.options.encoding)
        try:
            self._root = html.document_fromstring(content, parser=parser)
        except etree.ParserError as e:
            raise DriverError(f"Cannot parse document: {e}") from e
        self.history.clear()
        self.submitted_forms.clear()
        logger.debug(f"Loaded document ({len(content)} bytes)")

    # Document

    def get_content(self) -> str:
        return html.tostring(self._root, encoding="unicode", method="html")

    # Lookup

    def _evaluate(self, xpath: str) -> list[Any]:
        try:
            result = self._root.getroottree().xpath(xpath)
        except etree.XPathError as e:
            raise DriverError(f'Invalid XPath "{xpath}": {e}') from e
        if not isinstance(result, list):
            raise DriverError(f'XPath "{xpath}" does not select nodes')
        return result

    @staticmethod
    def _is_element(node: Any) -> bool:
        return isinstance(node, _Element) and isinstance(node.tag, str)

    def find(self, xpath: str) -> list[str]:
        nodes = self._evaluate(xpath)
        return [
            f"({xpath})[{position}]"
            for position, node in enumerate(nodes, start=1)
            if self._is_element(node)
        ]

    def _node(self, xpath: str) -> _Element:
        for node in self._evaluate(xpath):
            if self._is_element(node):
                return node
        raise DriverError(f'No element matches "{xpath}"')

    # Queries

    def get_tag_name(self, xpath: str) -> str:
        return self._node(xpath).tag.lower()

    def get_text(self, xpath: str) -> str:
        return _normalize_space(self._node(xpath).text_content())

    def get_html(self, xpath: str) -> str:
        node = self._node(xpath)
        parts = [node.text or ""]
        for child in node:
            parts.append(html.tostring(child, encoding="unicode", method="html"))
        return "".join(parts)

    def get_outer_html(self, xpath: str) -> str:
        return html.tostring(
            self._node(xpath), encoding="unicode", method="html", with_tail=False
        )

    def get_attribute(self, xpath: str, name: str) -> Optional[str]:
        return self._node(xpath).get(name)

    def get_value(self, xpath: str) -> OptionValue:
        node = self._node(xpath)
        tag = node.tag.lower()

        if tag == "select":
            selected = [self._option_value(o) for o in self._selected_options(node)]
            if node.get("multiple") is not None:
                return selected
            return selected[0] if selected else None

        if tag == "textarea":
            return node.text or ""

        if tag == "input":
            input_type = self._input_type(node)
            if input_type == "checkbox":
                return (node.get("value") or "on") if self._is_checked(node) else None
            if input_type == "radio":
                for radio in self._radio_group(node):
                    if self._is_checked(radio):
                        return radio.get("value") or "on"
                return None
            return node.get("value", "")

        if tag == "option":
            return self._option_value(node)

        return node.get("value")

    def is_visible(self, xpath: str) -> bool:
        node: Optional[_Element] = self._node(xpath)
        hidden_styles = self.options.hidden_styles
        while node is not None:
            if not self._is_element(node):
                node = node.getparent()
                continue
            tag = node.tag.lower()
            if tag in _INVISIBLE_TAGS or node.get("hidden") is not None:
                return False
            if tag == "input" and self._input_type(node) == "hidden":
                return False
            style = "".join((node.get("style") or "").split()).lower()
            if any(hidden in style for hidden in hidden_styles):
                return False
            node = node.getparent()
        return True

    def is_checked(self, xpath: str) -> bool:
        return self._is_checked(self._node(xpath))

    def is_selected(self, xpath: str) -> bool:
        node = self._node(xpath)
        if node.tag.lower() != "option":
            raise DriverError(f'Element "{xpath}" is not an option')
        select = self._owning_select(node)
        if select is None:
            return node.get("selected") is not None
        return any(option is node for option in self._selected_options(select))

    # Mutations

    def set_value(self, xpath: str, value: OptionValue) -> None:
        node = self._node(xpath)
        tag = node.tag.lower()

        if tag == "select":
            values = value if isinstance(value, list) else [value]
            for option in node.iter("option"):
                option.attrib.pop("selected", None)
            for item in values:
                self._select(node, str(item), multiple=True)
            return

        if tag == "textarea":
            for child in list(node):
                node.remove(child)
            node.text = "" if value is None else str(value)
            return

        if tag != "input":
            raise DriverError(f'Element "{xpath}" is not a form field')

        input_type = self._input_type(node)
        if input_type == "checkbox":
            self._set_checked(node, bool(value))
        elif input_type == "radio":
            self._check_radio(node, str(value))
        elif input_type == "file":
            self.attach_file(xpath, str(value))
        elif input_type in _NON_VALUE_TYPES:
            raise DriverError(f'Cannot set the value of a "{input_type}" input')
        else:
            node.set("value", "" if value is None else str(value))

    def check(self, xpath: str) -> None:
        node = self._checkable(xpath, ("checkbox", "radio"))
        if self._input_type(node) == "radio":
            self._check_radio(node, node.get("value") or "on")
        else:
            self._set_checked(node, True)

    def uncheck(self, xpath: str) -> None:
        self._set_checked(self._checkable(xpath, ("checkbox",)), False)

    def select_option(self, xpath: str, value: str, multiple: bool = False) -> None:
        node = self._node(xpath)
        tag = node.tag.lower()
        if tag == "select":
            self._select(node, value, multiple)
        elif tag == "input" and self._input_type(node) == "radio":
            self._check_radio(node, value)
        else:
            raise DriverError(f'Element "{xpath}" is not a select or radio field')

    def attach_file(self, xpath: str, path: str) -> None:
        node = self._node(xpath)
        if node.tag.lower() != "input" or self._input_type(node) != "file":
            raise DriverError(f'Element "{xpath}" is not a file input')
        node.set("value", path)

    def submit_form(self, xpath: str) -> None:
        node = self._node(xpath)
        form = self._owning_form(node)
        if form is None:
            raise DriverError(f'Element "{xpath}" is not inside a form')
        self._submit(form, submitter=None)

    # Interactions

    def click(self, xpath: str) -> None:
        node = self._node(xpath)
        tag = node.tag.lower()
        self.history.append({"action": "click", "xpath": xpath, "tag": tag})

        if tag == "input":
            input_type = self._input_type(node)
            if input_type == "checkbox":
                self._set_checked(node, not self._is_checked(node))
                return
            if input_type == "radio":
                self._check_radio(node, node.get("value") or "on")
                return

        if self._is_submit_button(node):
            form = self._owning_form(node)
            if form is not None:
                self._submit(form, submitter=node)
            return

        if tag == "a" and node.get("href") is not None:
            self.history.append({"action": "follow", "href": node.get("href")})

    # Helpers

    @staticmethod
    def _input_type(node: _Element) -> str:
        return (node.get("type") or "text").lower()

    def _is_checked(self, node: _Element) -> bool:
        return node.tag.lower() == "input" and node.get("checked") is not None

    @staticmethod
    def _set_checked(node: _Element, checked: bool) -> None:
        if checked:
            node.set("checked", "checked")
        else:
            node.attrib.pop("checked", None)

    def _checkable(self, xpath: str, types: tuple[str, ...]) -> _Element:
        node = self._node(xpath)
        if node.tag.lower() != "input" or self._input_type(node) not in types:
            raise DriverError(f'Element "{xpath}" is not a {" or ".join(types)}')
        return node

    def _owning_form(self, node: _Element) -> Optional[_Element]:
        form_id = node.get("form")
        if form_id:
            for form in self._root.iter("form"):
                if form.get("id") == form_id:
                    return form
        current: Optional[_Element] = node
        while current is not None:
            if self._is_element(current) and current.tag.lower() == "form":
                return current
            current = current.getparent()
        return None

    @staticmethod
    def _owning_select(option: _Element) -> Optional[_Element]:
        parent = option.getparent()
        while parent is not None:
            if parent.tag == "select":
                return parent
            parent = parent.getparent()
        return None

    def _radio_group(self, node: _Element) -> list[_Element]:
        name = node.get("name")
        if not name:
            return [node]
        scope = self._owning_form(node)
        if scope is None:
            scope = self._root
        return [
            radio
            for radio in scope.iter("input")
            if self._input_type(radio) == "radio" and radio.get("name") == name
        ]

    def _check_radio(self, node: _Element, value: str) -> None:
        group = self._radio_group(node)
        target = next((r for r in group if (r.get("value") or "on") == value), None)
        if target is None:
            raise DriverError(f'Radio group "{node.get("name")}" has no option "{value}"')
        for radio in group:
            self._set_checked(radio, radio is target)

    @staticmethod
    def _option_value(option: _Element) -> str:
        value = option.get("value")
        if value is None:
            return _normalize_space(option.text_content())
        return value

    def _selected_options(self, select: _Element) -> list[_Element]:
        options = list(select.iter("option"))
        selected = [o for o in options if o.get("selected") is not None]
        if not selected and options and select.get("multiple") is None:
            return options[:1]
        return selected

    def _select(self, select: _Element, value: str, multiple: bool) -> None:
        options = list(select.iter("option"))
        target = next((o for o in options if self._option_value(o) == value), None)
        if target is None:
            target = next(
                (o for o in options if _normalize_space(o.text_content()) == value), None
            )
        if target is None:
            raise DriverError(f'Select "{select.get("name")}" has no option "{value}"')

        if not (multiple and select.get("multiple") is not None):
            for option in options:
                option.attrib.pop("selected", None)
        target.set("selected", "selected")

    def _is_submit_button(self, node: _Element) -> bool:
        tag = node.tag.lower()
        if tag == "button":
            return (node.get("type") or "submit").lower() == "submit"
        return tag == "input" and self._input_type(node) in _SUBMIT_TYPES

    def _submit(self, form: _Element, submitter: Optional[_Element]) -> None:
        fields: list[tuple[str, str]] = []

        for node in form.iter("input", "select", "textarea", "button"):
            name = node.get("name")
            if not name or node.get("disabled") is not None:
                continue
            tag = node.tag.lower()

            if tag == "select":
                for option in self._selected_options(node):
                    fields.append((name, self._option_value(option)))
            elif tag == "textarea":
                fields.append((name, node.text or ""))
            elif self._is_submit_button(node) or tag == "button":
                if node is submitter:
                    fields.append((name, node.get("value") or ""))
            else:
                input_type = self._input_type(node)
                if input_type in ("checkbox", "radio"):
                    if self._is_checked(node):
                        fields.append((name, node.get("value") or "on"))
                elif input_type not in ("reset", "button"):
                    fields.append((name, node.get("value") or ""))

        payload = {
            "action": form.get("action") or "",
            "method": (form.get("method") or "get").lower(),
            "fields": fields,
        }
        self.submitted_forms.append(payload)
        logger.debug(f"Submitted form {payload['action']!r} with {len(fields)} field(s)")


__all__ = [
    "HtmlDriver",
    "EMPTY_DOCUMENT",
]
