"""Integration tests for elements backed by the lxml HTML driver."""

import pytest

from nodepath import DocumentElement, HtmlDriver, NodeElement, SelectorTranslator
from nodepath.config import DriverOptions
from nodepath.drivers import EMPTY_DOCUMENT
from nodepath.exceptions import (
    DriverError,
    ElementNotFoundError,
    UnsupportedDriverActionError,
)

SHOP_PAGE = """
<html>
<head><title>Shop</title></head>
<body>
  <div id="nav" class="menu top">
    <a href="/home" title="Home page">Home</a>
    <a href="/cart">Cart (2)</a>
  </div>
  <p class="note" style="display: none">Hidden note</p>
  <form id="order" action="/order" method="POST">
    <label for="email">Email address</label>
    <input id="email" name="email" type="text" value="">
    <label>Quantity <input name="qty" value="1"></label>
    <textarea name="comment">Hello</textarea>
    <input type="checkbox" name="gift" id="gift" value="yes">
    <label for="gift">Gift wrap</label>
    <input type="radio" name="ship" value="ground" checked>
    <input type="radio" name="ship" value="air">
    <select name="size" id="size">
      <option value="s">Small</option>
      <option value="m">Medium</option>
      <option value="l">Large item</option>
      <option value="xl">Large</option>
    </select>
    <select name="colors" multiple>
      <option value="r">Red</option>
      <option value="g">Green</option>
    </select>
    <input type="file" name="photo" id="photo">
    <input type="hidden" name="token" value="abc">
    <button type="submit" name="go" value="now">Place order</button>
  </form>
</body>
</html>
"""


@pytest.fixture
def driver():
    """Create a driver holding the shop page."""
    return HtmlDriver(SHOP_PAGE)


@pytest.fixture
def page(driver):
    """Create the document element."""
    return DocumentElement(driver, SelectorTranslator())


class TestLookup:
    """Tests for finding elements."""

    def test_driver_find_returns_positional_locators(self, driver):
        """Test that each match gets its own locator."""
        assert driver.find("//a") == ["(//a)[1]", "(//a)[2]"]

    def test_find_css(self, page):
        """Test CSS lookups from the document."""
        link = page.find("css", "#nav a")

        assert isinstance(link, NodeElement)
        assert link.get_text() == "Home"
        assert link.is_valid()

    def test_find_all_css(self, page):
        """Test that all matches are returned in document order."""
        links = page.find_all("css", "#nav a")
        assert [link.get_text() for link in links] == ["Home", "Cart (2)"]

    def test_find_missing(self, page):
        """Test that a missing element is None."""
        assert page.find("css", ".missing") is None
        assert page.find_all("css", ".missing") == []

    def test_union_relative_locator(self, page):
        """Test a union searched inside an element."""
        nav = page.find_by_id("nav")
        links = nav.find_all("xpath", "a[@href='/home'] | a[@href='/cart']")
        assert len(links) == 2

    def test_union_base_locator(self, driver):
        """Test a search starting from a union locator."""
        base = NodeElement("//div[@id='nav'] | //form", driver, SelectorTranslator())
        found = base.find_all("xpath", "a | input[@name='email']")
        assert [element.get_tag_name() for element in found] == ["a", "a", "input"]

    def test_get_parent(self, page):
        """Test navigating to the parent element."""
        email = page.find_field("Email address")
        assert email.get_parent().get_attribute("id") == "order"

    def test_named_partial_fallback(self, page, driver):
        """Test that named lookups fall back to partial matches."""
        page.click_link("Cart")
        assert driver.history[-1] == {"action": "follow", "href": "/cart"}

    def test_has_helpers(self, page):
        """Test the has_* helpers."""
        assert page.has_link("Home page")
        assert page.has_button("Place order")
        assert page.has_field("Quantity")
        assert page.has_select("size")
        assert not page.has_table("Prices")
        assert page.has_content("Place order")
        assert not page.has_content("Checkout")

    def test_missing_field_raises(self, page):
        """Test that acting on a missing field raises."""
        with pytest.raises(ElementNotFoundError):
            page.fill_field("Phone", "123")

    def test_invalid_xpath(self, page):
        """Test that invalid XPath surfaces as a driver error."""
        with pytest.raises(DriverError):
            page.find("xpath", "a[")

    def test_non_node_xpath(self, driver):
        """Test that XPath not selecting nodes is rejected."""
        with pytest.raises(DriverError):
            driver.find("count(//a)")


class TestQueries:
    """Tests for reading element state."""

    def test_attributes_and_classes(self, page):
        """Test attribute access."""
        nav = page.find_by_id("nav")

        assert nav.has_class("menu")
        assert not nav.has_class("men")
        assert nav.get_attribute("role") is None
        assert nav.get_tag_name() == "div"

    def test_outer_html(self, page):
        """Test serialising an element."""
        html = page.find_link("Home").get_outer_html()
        assert html.startswith('<a href="/home"')
        assert html.endswith("</a>")

    def test_get_content(self, page):
        """Test reading the whole page."""
        assert "<title>Shop</title>" in page.get_content()

    def test_visibility(self, page):
        """Test visibility rules."""
        assert page.find_by_id("nav").is_visible()
        assert not page.find("css", "p.note").is_visible()
        assert not page.find("css", "input[type=hidden]").is_visible()
        assert not page.find("xpath", ".//title").is_visible()

    def test_custom_hidden_styles(self):
        """Test configuring the styles that hide elements."""
        driver = HtmlDriver(SHOP_PAGE, DriverOptions(hidden_styles="opacity: 0"))
        page = DocumentElement(driver, SelectorTranslator())

        assert page.find("css", "p.note").is_visible()


class TestFormFields:
    """Tests for form field mutations."""

    def test_fill_field(self, page):
        """Test filling a field found by name."""
        page.fill_field("qty", "3")
        assert page.find_field("Quantity").get_value() == "3"

    def test_textarea(self, page):
        """Test reading and writing a textarea."""
        comment = page.find_field("comment")

        assert comment.get_value() == "Hello"
        comment.set_value("Bye")
        assert comment.get_value() == "Bye"

    def test_checkbox(self, page):
        """Test checking a checkbox found by its label."""
        gift = page.find_field("Gift wrap")
        assert gift.get_value() is None
        assert page.has_unchecked_field("Gift wrap")

        page.check_field("Gift wrap")
        assert gift.is_checked()
        assert gift.get_value() == "yes"

        page.uncheck_field("Gift wrap")
        assert not gift.is_checked()

    def test_radio_click(self, page):
        """Test selecting a radio button by clicking."""
        ground = page.find("css", "input[value=ground]")
        page.find("css", "input[value=air]").click()

        assert ground.get_value() == "air"
        assert not ground.is_checked()

    def test_radio_select_option(self, page):
        """Test that non-select fields get the raw option text."""
        page.select_field_option("ship", "air")
        assert page.find_field("ship").get_value() == "air"

    def test_select_prefers_exact_match(self, page):
        """Test that an exact text match wins over a partial one."""
        size = page.find_field("size")

        size.select_option("Large")

        assert size.get_value() == "xl"

    def test_select_partial_match(self, page):
        """Test selecting by partial option text."""
        size = page.find_field("size")

        size.select_option("Med")

        assert size.get_value() == "m"
        assert size.find("named_exact", ("option", "Medium")).is_selected()

    def test_select_by_value(self, page):
        """Test selecting by option value."""
        size = page.find_field("size")
        size.select_option("l")
        assert size.get_value() == "l"

    def test_select_missing_option(self, page):
        """Test that an unknown option raises ElementNotFoundError."""
        size = page.find_field("size")

        with pytest.raises(ElementNotFoundError):
            size.select_option("Huge")
        assert size.get_value() == "s"

    def test_multiple_select(self, page):
        """Test adding options to a multiple select."""
        colors = page.find_field("colors")

        colors.select_option("Red", multiple=True)
        colors.select_option("Green", multiple=True)

        assert colors.get_value() == ["r", "g"]

    def test_options_without_value(self):
        """Test options that are only identified by their text."""
        driver = HtmlDriver(
            '<form><select name="country">'
            "<option>France</option><option> Japan </option>"
            "</select></form>"
        )
        country = DocumentElement(driver, SelectorTranslator()).find_field("country")

        assert country.find("named_exact", ("option", "Japan")).get_value() == "Japan"
        country.select_option("Japan")
        assert country.get_value() == "Japan"
        assert driver.get_value("(//option)[1]") == "France"

    def test_attach_file(self, page):
        """Test attaching a file to a file input."""
        page.attach_file_to_field("photo", "/tmp/cat.png")
        assert page.find_field("photo").get_value() == "/tmp/cat.png"

    def test_set_value_on_button(self, page):
        """Test that buttons have no settable value."""
        with pytest.raises(DriverError):
            page.find_button("Place order").set_value("x")


class TestSubmission:
    """Tests for clicks and form submission."""

    def test_press_button_submits_form(self, page, driver):
        """Test that pressing a submit button submits its form."""
        page.press_button("Place order")

        assert driver.submitted_forms == [
            {
                "action": "/order",
                "method": "post",
                "fields": [
                    ("email", ""),
                    ("qty", "1"),
                    ("comment", "Hello"),
                    ("ship", "ground"),
                    ("size", "s"),
                    ("photo", ""),
                    ("token", "abc"),
                    ("go", "now"),
                ],
            }
        ]
        assert driver.history[-1]["action"] == "click"

    def test_submit_from_field(self, page, driver):
        """Test submitting the form owning a field."""
        page.find_field("email").submit()

        fields = driver.submitted_forms[-1]["fields"]
        assert ("go", "now") not in fields

    def test_submit_outside_form(self, page):
        """Test that submitting outside a form fails."""
        with pytest.raises(DriverError):
            page.find_by_id("nav").submit()

    def test_unsupported_actions(self, page):
        """Test actions the HTML driver cannot perform."""
        link = page.find_link("Home")

        with pytest.raises(UnsupportedDriverActionError, match="not supported by HtmlDriver"):
            link.double_click()
        with pytest.raises(UnsupportedDriverActionError):
            link.key_press("a")


class TestDocumentChanges:
    """Tests for elements across document reloads."""

    def test_stale_element(self, page, driver):
        """Test that elements re-resolve their locator on every call."""
        link = page.find_link("Home")

        driver.load(EMPTY_DOCUMENT)

        assert not link.is_valid()
        with pytest.raises(DriverError):
            link.get_text()

    def test_wait_for_missing_element(self, page):
        """Test waiting for an element that never appears."""
        assert page.wait_for(100, lambda element: element.find_all("css", ".missing")) == []

    def test_wait_for_existing_element(self, page):
        """Test waiting for an element that is present."""
        found = page.wait_for(1000, lambda element: element.find("css", "#nav"))
        assert found.get_attribute("class") == "menu top"
