"""
Page Object Model classes for the SFShop checkout E2E tests.

These classes provide reusable selectors and methods for interacting
with the storefront from product selection to the order status page.
"""

from .base_page import BasePage
from .checkout_page import CheckoutPage
from .home_page import HomePage
from .order_page import OrderPage
from .payment_page import PaymentPage

__all__ = [
    "BasePage",
    "CheckoutPage",
    "HomePage",
    "OrderPage",
    "PaymentPage",
]
