"""Tests for the wait loop and wait conditions."""

import time
from unittest.mock import MagicMock

import pytest

from nodepath.config import WaitOptions
from nodepath.exceptions import InvalidArgumentError
from nodepath.waiters import (
    AllConditions,
    AnyCondition,
    ChildPresent,
    CustomCondition,
    ElementAttributeEquals,
    ElementChecked,
    ElementHasAttribute,
    ElementHasClass,
    ElementHidden,
    ElementNotHasClass,
    ElementTextContains,
    ElementTextEquals,
    ElementTextMatches,
    ElementUnchecked,
    ElementVisible,
    NotCondition,
    WaitLoop,
    WaitState,
    is_satisfied,
    wait_for,
)


class TestIsSatisfied:
    """Tests for is_satisfied()."""

    @pytest.mark.parametrize("result", [None, False, 0, "", [], {}, ()])
    def test_unsatisfying_results(self, result):
        """Test falsy and empty results."""
        assert is_satisfied(result) is False

    @pytest.mark.parametrize("result", [True, 1, "x", ["a"], {"a": 1}, object()])
    def test_satisfying_results(self, result):
        """Test truthy, non-empty results."""
        assert is_satisfied(result) is True


class TestWaitLoop:
    """Tests for WaitLoop."""

    def test_initial_state(self):
        """Test a fresh loop."""
        loop = WaitLoop(1000, lambda subject: True)
        assert loop.state == WaitState.POLLING
        assert loop.attempts == 0
        assert loop.poll_interval_ms == 100

    def test_succeeds_immediately(self):
        """Test a predicate satisfied on the first tick."""
        loop = WaitLoop(1000, lambda subject: subject)

        assert loop.run("ready") == "ready"
        assert loop.state == WaitState.SUCCEEDED
        assert loop.attempts == 1

    def test_succeeds_after_polling(self):
        """Test a predicate satisfied after a few ticks."""
        results = iter([None, [], "done"])
        loop = WaitLoop(2000, lambda subject: next(results), poll_interval_ms=10)

        assert loop.run(None) == "done"
        assert loop.state == WaitState.SUCCEEDED
        assert loop.attempts == 3

    def test_times_out_with_last_result(self):
        """Test that a timeout returns the last predicate result."""
        loop = WaitLoop(50, lambda subject: [], poll_interval_ms=10)

        start = time.monotonic()
        assert loop.run(None) == []
        elapsed = time.monotonic() - start

        assert loop.state == WaitState.TIMED_OUT
        assert loop.attempts >= 2
        assert 0.05 <= elapsed < 0.5

    def test_zero_timeout_evaluates_once(self):
        """Test that the predicate runs at least once."""
        predicate = MagicMock(return_value=None)
        loop = WaitLoop(0, predicate)

        assert loop.run("subject") is None
        assert loop.attempts == 1
        predicate.assert_called_once_with("subject")

    def test_timeout_shorter_than_interval(self):
        """Test a budget smaller than the poll interval."""
        predicate = MagicMock(return_value=False)
        loop = WaitLoop(10, predicate, poll_interval_ms=100)

        loop.run(None)

        assert loop.state == WaitState.TIMED_OUT
        assert predicate.call_count >= 1

    def test_options_poll_interval(self):
        """Test the poll interval default from options."""
        loop = WaitLoop(1000, lambda subject: True, options=WaitOptions(poll_interval_ms=25))
        assert loop.poll_interval_ms == 25

    def test_non_callable_predicate(self):
        """Test that a non-callable predicate is rejected."""
        with pytest.raises(InvalidArgumentError, match="must be callable"):
            WaitLoop(1000, None)

    def test_predicate_errors_propagate(self):
        """Test that predicate exceptions end the wait."""

        def predicate(subject):
            raise RuntimeError("broken")

        with pytest.raises(RuntimeError, match="broken"):
            WaitLoop(1000, predicate).run(None)

    def test_run_resets_state(self):
        """Test that a loop can be run again."""
        loop = WaitLoop(0, lambda subject: subject)

        loop.run(None)
        assert loop.state == WaitState.TIMED_OUT
        loop.run("ok")
        assert loop.state == WaitState.SUCCEEDED
        assert loop.attempts == 1

    def test_wait_for_function(self):
        """Test the wait_for shortcut."""
        assert wait_for(5, 1000, lambda subject: subject * 2) == 10


class TestElementConditions:
    """Tests for element state conditions."""

    @pytest.fixture
    def element(self):
        """Create a mock element."""
        return MagicMock()

    def test_visibility(self, element):
        """Test visible and hidden conditions."""
        element.is_visible.return_value = True
        assert ElementVisible()(element) is True
        assert ElementHidden()(element) is False

    def test_checked(self, element):
        """Test checked and unchecked conditions."""
        element.is_checked.return_value = False
        assert ElementChecked()(element) is False
        assert ElementUnchecked()(element) is True

    def test_text_contains(self, element):
        """Test substring text condition."""
        element.get_text.return_value = "All changes saved"
        assert ElementTextContains("saved")(element) is True
        assert ElementTextContains("failed")(element) is False

    def test_text_equals(self, element):
        """Test equal text condition."""
        element.get_text.return_value = " Done "
        assert ElementTextEquals("Done")(element) is True

    def test_text_matches(self, element):
        """Test that the regex condition returns the match."""
        element.get_text.return_value = "3 items"
        match = ElementTextMatches(r"(\d+) items")(element)
        assert match.group(1) == "3"

    def test_attributes(self, element):
        """Test attribute conditions."""
        element.has_attribute.return_value = True
        element.get_attribute.return_value = "open"
        assert ElementHasAttribute("data-state")(element) is True
        assert ElementAttributeEquals("data-state", "open")(element) is True
        assert ElementAttributeEquals("data-state", "closed")(element) is False

    def test_classes(self, element):
        """Test class conditions."""
        element.has_class.return_value = True
        assert ElementHasClass("active")(element) is True
        assert ElementNotHasClass("active")(element) is False
        element.has_class.assert_called_with("active")

    def test_child_present(self, element):
        """Test that the found child is returned."""
        child = MagicMock()
        element.find.return_value = child

        assert ChildPresent("css", ".item")(element) is child
        element.find.assert_called_once_with("css", ".item")


class TestCompositeConditions:
    """Tests for composite conditions."""

    def test_all_conditions(self):
        """Test that all conditions must hold."""
        condition = AllConditions(lambda e: True, lambda e: 1)
        assert condition(None) is True
        assert AllConditions(lambda e: True, lambda e: None)(None) is False

    def test_any_condition_returns_first_result(self):
        """Test that the first truthy result is returned."""
        condition = AnyCondition(lambda e: None, lambda e: "second", lambda e: "third")
        assert condition(None) == "second"
        assert AnyCondition(lambda e: None)(None) is False

    def test_not_condition(self):
        """Test negation."""
        assert NotCondition(lambda e: [])(None) is True

    def test_custom_condition(self):
        """Test wrapping a function."""
        condition = CustomCondition(lambda e: e + 1, "one more")
        assert condition(1) == 2
        assert condition.description == "one more"

    def test_descriptions(self):
        """Test composite descriptions."""
        condition = AllConditions(ElementVisible(), NotCondition(ElementHasClass("busy")))
        assert condition.description == (
            "element to be visible AND NOT (element to have class 'busy')"
        )
        assert repr(ElementVisible()) == "<ElementVisible element to be visible>"

    def test_with_wait_loop(self):
        """Test a condition driving a wait loop."""
        element = MagicMock()
        element.get_text.side_effect = ["Saving", "Saving", "Saved"]

        loop = WaitLoop(2000, ElementTextEquals("Saved"), poll_interval_ms=10)

        assert loop.run(element) is True
        assert loop.attempts == 3
