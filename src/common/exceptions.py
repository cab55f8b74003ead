"""
Custom exceptions for the SFShop checkout E2E suite.

This module defines the exceptions raised by the retry and polling
helpers and by the page objects, so that a failing test reports the
step, attempt count, elapsed time and page location it failed at.
"""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .models import PollOutcome


class CheckoutTestError(Exception):
    """Base exception for all checkout suite errors."""

    def __init__(self, message: str,
                 details: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# Retry / polling exceptions
class WaitError(CheckoutTestError):
    """Base exception for retry and polling failures."""


class ActionExhaustedError(WaitError):
    """Raised when an action used all attempts without any success condition firing."""

    def __init__(
        self,
        description: str,
        attempts: int,
        elapsed_ms: float = 0,
        location: Optional[str] = None,
        last_error: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize action exhausted error.

        Args:
            description: What the action was doing (e.g. "click Bayar Sekarang").
            attempts: Number of attempts performed.
            elapsed_ms: Total time spent across all attempts.
            location: Last observed page location.
            last_error: Message of the last exception raised by the action.
            details: Optional dictionary with additional error details.
        """
        message = (
            f"'{description}' failed after {attempts} attempt(s) "
            f"in {elapsed_ms / 1000:.1f}s"
        )
        if location:
            message += f" at {location}"
        super().__init__(message, details)
        self.description = description
        self.attempts = attempts
        self.elapsed_ms = elapsed_ms
        self.location = location
        self.last_error = last_error


class ConditionEvaluationError(WaitError):
    """
    Raised when a condition check itself fails unexpectedly.

    The retry and polling loops never propagate this error; they record it
    on the evaluation and treat the condition as not yet true.
    """

    def __init__(
        self,
        condition: str,
        cause: BaseException,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            f"Evaluating '{condition}' failed: {type(cause).__name__}: {cause}",
            details,
        )
        self.condition = condition
        self.cause = cause


class DeadlineExceededError(WaitError):
    """Raised when a polling deadline elapsed without the terminal condition."""

    def __init__(
        self,
        step: str,
        outcome: "PollOutcome",
        location: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize deadline exceeded error.

        Args:
            step: The step that was polling (e.g. "wait for order completion").
            outcome: The polling outcome at the time of failure.
            location: Last observed page location.
            details: Optional dictionary with additional error details.
        """
        message = (
            f"'{step}' did not complete within {outcome.deadline_ms / 1000:.1f}s "
            f"({outcome.probe_count} probe(s), {outcome.elapsed_ms / 1000:.1f}s elapsed)"
        )
        if location:
            message += f" at {location}"
        super().__init__(message, details)
        self.step = step
        self.outcome = outcome
        self.location = location


# Checkout flow exceptions
class CheckoutFlowError(CheckoutTestError):
    """Base exception for unexpected states of the site under test."""


class OrderIdNotFoundError(CheckoutFlowError):
    """Raised when the order page URL carries no order identifier."""

    def __init__(self, url: str,
                 details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(f"Order ID not found in URL: {url}", details)
        self.url = url


class UnknownFixtureError(CheckoutTestError):
    """Raised when a named customer, payment method or product does not exist."""

    def __init__(
        self,
        kind: str,
        name: str,
        available: Optional[list[str]] = None,
    ) -> None:
        message = f"Unknown {kind} '{name}'"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message)
        self.kind = kind
        self.name = name


# Configuration Exceptions
class ConfigurationError(CheckoutTestError):
    """Base exception for configuration-related errors."""


class MissingConfigError(ConfigurationError):
    """Raised when a required configuration value is missing."""

    def __init__(
        self, config_key: str, details: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            f"Missing required configuration: '{config_key}'", details)
        self.config_key = config_key


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""

    def __init__(
        self,
        config_key: str,
        value: Any,
        reason: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize invalid config error.

        Args:
            config_key: The configuration key with invalid value.
            value: The invalid value.
            reason: Optional reason why the value is invalid.
            details: Optional dictionary with additional error details.
        """
        message = f"Invalid value for configuration '{config_key}': {value}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, details)
        self.config_key = config_key
        self.value = value
        self.reason = reason
