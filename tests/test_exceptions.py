"""Tests for nodepath exception types."""

import pytest

from nodepath.drivers import HtmlDriver
from nodepath.exceptions import (
    ConfigurationError,
    DriverError,
    ElementNotFoundError,
    InvalidArgumentError,
    NodepathError,
    UnsupportedDriverActionError,
)


class TestElementNotFoundError:
    """Tests for ElementNotFoundError messages."""

    def test_full_message(self):
        """Test a message with type, selector and locator."""
        error = ElementNotFoundError("select option", "value or text", "item1")

        assert str(error) == 'Select option with value or text "item1" not found.'
        assert error.type == "select option"
        assert error.locator == "item1"

    def test_without_selector(self):
        """Test a message without a selector description."""
        assert str(ElementNotFoundError("link", locator="Home")) == 'Link matching "Home" not found.'

    def test_default_message(self):
        """Test the message without any details."""
        assert str(ElementNotFoundError()) == "Element not found."

    def test_blank_type(self):
        """Test that a blank type falls back to the default."""
        error = ElementNotFoundError("  ", "id", "main")
        assert str(error) == 'Element with id "main" not found.'


class TestHierarchy:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "error_class",
        [InvalidArgumentError, ElementNotFoundError, DriverError, ConfigurationError],
    )
    def test_base_class(self, error_class):
        """Test that every error derives from NodepathError."""
        assert issubclass(error_class, NodepathError)

    def test_invalid_argument_is_value_error(self):
        """Test that contract violations are ValueErrors."""
        assert issubclass(InvalidArgumentError, ValueError)

    def test_unsupported_action(self):
        """Test the unsupported action message."""
        error = UnsupportedDriverActionError("Double-clicking", HtmlDriver())

        assert isinstance(error, DriverError)
        assert error.driver_name == "HtmlDriver"
        assert str(error) == "Double-clicking is not supported by HtmlDriver"
