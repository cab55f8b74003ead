"""
Retry and polling primitives for driving the storefront.

Components:
    - ActionRetrier: bounded retry of an action, racing success conditions
    - StatusPoller: probe-and-check loop bounded by a wall-clock deadline
    - Condition factories over Playwright pages and locators
"""

from .clock import Clock, SystemClock
from .conditions import (
    Condition,
    ConditionEvaluation,
    ConditionState,
    element_visible,
    selector_visible,
    url_matches,
)
from .polling import Probe, StatusPoller
from .retry import ActionRetrier

__all__ = [
    "ActionRetrier",
    "Clock",
    "Condition",
    "ConditionEvaluation",
    "ConditionState",
    "Probe",
    "StatusPoller",
    "SystemClock",
    "element_visible",
    "selector_visible",
    "url_matches",
]
