"""
Wait System for nodepath.

Provides the bounded polling loop behind ``wait_for`` and a set of
reusable predicates.

Example:
    from nodepath.waiters import WaitLoop
    from nodepath.waiters.conditions import ElementVisible, ElementTextContains

    # Poll until the element becomes visible (5s budget)
    element.wait_for(5000, ElementVisible())

    # Any callable works; the element is passed in
    items = element.wait_for(2000, lambda el: el.find_all("css", "li"))

    # Run the loop directly
    loop = WaitLoop(3000, ElementTextContains("Saved"))
    result = loop.run(element)
    loop.state  # WaitState.SUCCEEDED or WaitState.TIMED_OUT
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sized
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from nodepath.config.options import WaitOptions
from nodepath.exceptions import InvalidArgumentError
from nodepath.waiters.conditions import (
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
    WaitCondition,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_OPTIONS = WaitOptions()


class WaitState(str, Enum):
    """States of a WaitLoop."""

    POLLING = "polling"
    SUCCEEDED = "succeeded"
    TIMED_OUT = "timed_out"


def is_satisfied(result: Any) -> bool:
    """Check whether a predicate result ends the wait.

    A result is satisfying when it is truthy and, for sized results such as
    lists, non-empty.
    """
    if isinstance(result, Sized):
        return len(result) > 0
    return bool(result)


class WaitLoop(Generic[T]):
    """Bounded-time polling of a predicate.

    The predicate is called with the subject (usually an element) until it
    returns a satisfying result or the time budget is spent. The deadline
    is only checked between ticks, so a wait may overrun the budget by up
    to one poll interval plus one predicate call. Timing out is not an
    error: the last predicate result is returned either way.

    Args:
        timeout_ms: Total time budget in milliseconds.
        predicate: Callable receiving the subject.
        poll_interval_ms: Delay between ticks, defaults to the options value.
        options: Wait options providing the default poll interval.

    Raises:
        InvalidArgumentError: If the predicate is not callable.
    """

    def __init__(
        self,
        timeout_ms: float,
        predicate: Callable[[Any], T],
        poll_interval_ms: Optional[float] = None,
        options: Optional[WaitOptions] = None,
    ) -> None:
        if not callable(predicate):
            raise InvalidArgumentError(
                f"Given predicate must be callable, got {type(predicate).__name__}"
            )
        options = options or DEFAULT_OPTIONS

        self.timeout_ms = timeout_ms
        self.predicate = predicate
        self.poll_interval_ms = (
            poll_interval_ms if poll_interval_ms is not None else options.poll_interval_ms
        )
        self.state = WaitState.POLLING
        self.attempts = 0

    def run(self, subject: Any) -> Optional[T]:
        """Poll the predicate against ``subject``.

        Returns:
            The first satisfying result, or the last result on timeout.
        """
        self.state = WaitState.POLLING
        self.attempts = 0
        interval = self.poll_interval_ms / 1000.0
        start_time = time.monotonic()

        while True:
            self.attempts += 1
            result = self.predicate(subject)
            elapsed_ms = (time.monotonic() - start_time) * 1000

            if is_satisfied(result):
                self.state = WaitState.SUCCEEDED
                logger.debug(
                    f"Wait condition satisfied after {self.attempts} attempt(s) "
                    f"({elapsed_ms:.0f}ms)"
                )
                return result

            if elapsed_ms >= self.timeout_ms:
                self.state = WaitState.TIMED_OUT
                logger.debug(
                    f"Wait timed out after {self.attempts} attempt(s) "
                    f"({elapsed_ms:.0f}ms of {self.timeout_ms}ms)"
                )
                return result

            time.sleep(interval)


def wait_for(
    subject: Any,
    timeout_ms: float,
    predicate: Callable[[Any], T],
    options: Optional[WaitOptions] = None,
) -> Optional[T]:
    """Run a WaitLoop once and return its result."""
    return WaitLoop(timeout_ms, predicate, options=options).run(subject)


__all__ = [
    # Loop
    "WaitLoop",
    "WaitState",
    "DEFAULT_OPTIONS",
    "is_satisfied",
    "wait_for",
    # Conditions
    "WaitCondition",
    "ElementVisible",
    "ElementHidden",
    "ElementChecked",
    "ElementUnchecked",
    "ElementTextContains",
    "ElementTextEquals",
    "ElementTextMatches",
    "ElementHasAttribute",
    "ElementAttributeEquals",
    "ElementHasClass",
    "ElementNotHasClass",
    "ChildPresent",
    "AllConditions",
    "AnyCondition",
    "NotCondition",
    "CustomCondition",
]
