"""
Awaitable predicates over browser state.

A ``Condition`` wraps a check that waits up to a timeout for something
observable (URL, element visibility) to become true. Evaluating a
condition never raises for driver failures: the result is one of
satisfied, still pending, or errored, so the retry and polling loops can
log a malfunctioning driver separately from a page that is still loading.
"""

import asyncio
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional, Pattern, Union

from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from common.exceptions import ConditionEvaluationError

logger = logging.getLogger(__name__)

# check(timeout_ms) -> True once the condition holds, False on timeout
ConditionCheck = Callable[[float], Awaitable[bool]]


class ConditionState(str, Enum):
    """Result of evaluating a condition once."""

    SATISFIED = "satisfied"
    PENDING = "pending"
    ERROR = "error"


@dataclass(frozen=True)
class ConditionEvaluation:
    """A single evaluation of a named condition."""

    condition: str
    state: ConditionState
    error: Optional[ConditionEvaluationError] = None

    @property
    def satisfied(self) -> bool:
        return self.state is ConditionState.SATISFIED


@dataclass(frozen=True)
class Condition:
    """A named, independently awaitable predicate."""

    name: str
    check: ConditionCheck

    async def evaluate(self, timeout_ms: float = 0) -> ConditionEvaluation:
        """
        Evaluate the condition, waiting at most ``timeout_ms``.

        Args:
            timeout_ms: How long the check may wait; 0 checks the current state.

        Returns:
            The evaluation. Exceptions raised by the check are wrapped in a
            ConditionEvaluationError and reported as ``ERROR``.
        """
        try:
            holds = await self.check(timeout_ms)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            error = ConditionEvaluationError(self.name, e)
            logger.warning("%s; treating as not yet true", error)
            return ConditionEvaluation(self.name, ConditionState.ERROR, error)

        state = ConditionState.SATISFIED if holds else ConditionState.PENDING
        return ConditionEvaluation(self.name, state)

    def __str__(self) -> str:
        return self.name


def url_matches(page: Page, pattern: Union[str, Pattern[str]]) -> Condition:
    """
    Condition that holds once the page URL matches ``pattern``.

    Args:
        page: The page to observe.
        pattern: Regular expression searched for in the URL.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern

    async def check(timeout_ms: float) -> bool:
        if regex.search(page.url):
            return True
        if timeout_ms <= 0:
            return False
        try:
            await page.wait_for_url(regex, timeout=timeout_ms)
        except PlaywrightTimeoutError:
            return False
        return True

    return Condition(f"urlMatches({regex.pattern})", check)


def element_visible(locator: Locator, label: str) -> Condition:
    """
    Condition that holds once ``locator`` is visible.

    Args:
        locator: Element to observe; the first match is used.
        label: Human-readable name used in the condition name.
    """
    target = locator.first

    async def check(timeout_ms: float) -> bool:
        # Playwright treats timeout=0 as "wait forever"
        if timeout_ms <= 0:
            return await target.is_visible()
        try:
            await target.wait_for(state="visible", timeout=timeout_ms)
        except PlaywrightTimeoutError:
            return False
        return True

    return Condition(f"elementVisible({label})", check)


def selector_visible(page: Page, selector: str) -> Condition:
    """Condition that holds once an element matching ``selector`` is visible."""
    condition = element_visible(page.locator(selector), selector)
    return Condition(f"selectorVisible({selector})", condition.check)
