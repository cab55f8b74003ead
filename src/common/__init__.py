"""
Shared configuration, data models and exceptions for the checkout suite.
"""

from .catalog import (
    get_customer_data,
    get_otp,
    get_payment_method,
    get_product,
)
from .config import Settings, get_settings, reload_settings
from .exceptions import (
    ActionExhaustedError,
    CheckoutTestError,
    ConditionEvaluationError,
    DeadlineExceededError,
    OrderIdNotFoundError,
)
from .models import (
    CustomerData,
    PaymentMethod,
    PollOutcome,
    PollState,
    ProductData,
    RetryOutcome,
)

__all__ = [
    "ActionExhaustedError",
    "CheckoutTestError",
    "ConditionEvaluationError",
    "CustomerData",
    "DeadlineExceededError",
    "OrderIdNotFoundError",
    "PaymentMethod",
    "PollOutcome",
    "PollState",
    "ProductData",
    "RetryOutcome",
    "Settings",
    "get_customer_data",
    "get_otp",
    "get_payment_method",
    "get_product",
    "get_settings",
    "reload_settings",
]
