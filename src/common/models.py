"""
Data models for the SFShop checkout E2E suite.

Fixture records (customers, payment methods, products) are pydantic
models; the results of the retry and polling helpers are plain
dataclasses created fresh per call.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class PaymentType(str, Enum):
    """Kind of payment channel offered at checkout."""

    VIRTUAL_ACCOUNT = "virtual_account"
    QRIS = "qris"
    EWALLET = "ewallet"


class PollState(str, Enum):
    """Terminal state of a polling run."""

    COMPLETED = "completed"
    TIMED_OUT = "timed_out"


class CustomerData(BaseModel):
    """Customer form input for a top-up purchase."""

    model_config = ConfigDict(frozen=True)

    player_id: str
    zone_id: str
    email: str
    phone: str


class PaymentMethod(BaseModel):
    """Descriptor of a payment method tile on the checkout page."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    name: str
    type: PaymentType
    selector: str = Field(..., min_length=1)
    requires_otp: bool = False
    requires_simulation: bool = False


class ProductData(BaseModel):
    """A product listed on the storefront."""

    model_config = ConfigDict(frozen=True)

    name: str
    image_alt: str
    category: str = "games"


class ValidationCase(BaseModel):
    """A customer-form input expected to be rejected by the site."""

    model_config = ConfigDict(frozen=True)

    test_name: str
    player_id: str = ""
    zone_id: str = ""
    email: str = ""
    phone: str = ""
    expected_error: str = ""

    def to_customer(self) -> CustomerData:
        """Return the form input part of this case."""
        return CustomerData(
            player_id=self.player_id,
            zone_id=self.zone_id,
            email=self.email,
            phone=self.phone,
        )


@dataclass(frozen=True)
class RetryOutcome:
    """Result of an ActionRetrier run."""

    attempts: int
    succeeded: bool
    matched_condition: Optional[str] = None
    elapsed_ms: float = 0
    last_error: Optional[str] = None

    def __post_init__(self) -> None:
        if self.attempts < 1:
            raise ValueError("attempts must be at least 1")
        if self.succeeded and not self.matched_condition:
            raise ValueError("a successful outcome must name its matched condition")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "attempts": self.attempts,
            "succeeded": self.succeeded,
            "matched_condition": self.matched_condition,
            "elapsed_ms": self.elapsed_ms,
            "last_error": self.last_error,
        }


@dataclass(frozen=True)
class PollOutcome:
    """Result of a StatusPoller run."""

    elapsed_ms: float
    probe_count: int
    completed: bool
    deadline_ms: float = 0
    interval_ms: float = 0

    def __post_init__(self) -> None:
        if self.elapsed_ms < 0:
            raise ValueError("elapsed_ms cannot be negative")
        if self.probe_count < 0:
            raise ValueError("probe_count cannot be negative")

    @property
    def state(self) -> PollState:
        """Terminal state reached by the run."""
        return PollState.COMPLETED if self.completed else PollState.TIMED_OUT

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "elapsed_ms": self.elapsed_ms,
            "probe_count": self.probe_count,
            "completed": self.completed,
            "state": self.state.value,
            "deadline_ms": self.deadline_ms,
            "interval_ms": self.interval_ms,
        }
