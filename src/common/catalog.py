"""
Named fixture data for the checkout suite.

Single source of truth for the customers, payment methods, products and
OTP digits the e2e tests use.
"""

from .exceptions import UnknownFixtureError
from .models import (
    CustomerData,
    PaymentMethod,
    PaymentType,
    ProductData,
    ValidationCase,
)

CUSTOMERS: dict[str, CustomerData] = {
    # Happy path
    "default": CustomerData(
        player_id="115383687",
        zone_id="2584",
        email="bozartandjung@gmail.com",
        phone="088110001000",
    ),
    "alternative": CustomerData(
        player_id="987654321",
        zone_id="1234",
        email="test.user@sfshop.id",
        phone="081234567890",
    ),
    # Negative testing
    "invalid": CustomerData(
        player_id="123",
        zone_id="45",
        email="invalid-email",
        phone="123",
    ),
}

PAYMENT_METHODS: dict[str, PaymentMethod] = {
    "ximpaysf": PaymentMethod(
        name="XimpaySF Virtual Account",
        type=PaymentType.VIRTUAL_ACCOUNT,
        selector='img[alt*="ximpaysf"]',
        requires_otp=True,
        requires_simulation=False,
    ),
    "xendit_qris": PaymentMethod(
        name="Xendit QRIS",
        type=PaymentType.QRIS,
        selector='img[alt*="xenditqris"]',
        requires_otp=False,
        requires_simulation=True,
    ),
}

PRODUCTS: dict[str, ProductData] = {
    "mobile_legends": ProductData(
        name="Mobile Legends",
        image_alt=r"25\+3 diamonds",
        category="games",
    ),
}

OTP_CODES: dict[str, list[str]] = {
    "valid": ["1", "2", "3", "4"],
    "invalid": ["0", "0", "0", "0"],
}

VALIDATION_CASES: list[ValidationCase] = [
    ValidationCase(
        test_name="empty player id",
        player_id="",
        zone_id="2584",
        email="bozartandjung@gmail.com",
        phone="088110001000",
        expected_error="wajib",
    ),
    ValidationCase(
        test_name="malformed email",
        player_id="115383687",
        zone_id="2584",
        email="invalid-email",
        phone="088110001000",
        expected_error="email",
    ),
    ValidationCase(
        test_name="short phone number",
        player_id="115383687",
        zone_id="2584",
        email="bozartandjung@gmail.com",
        phone="123",
        expected_error="nomor",
    ),
]


def _lookup(kind: str, table: dict, name: str):
    try:
        return table[name]
    except KeyError:
        raise UnknownFixtureError(kind, name, sorted(table)) from None


def get_customer_data(name: str = "default") -> CustomerData:
    """Get customer data by name ('default', 'alternative' or 'invalid')."""
    return _lookup("customer", CUSTOMERS, name)


def get_payment_method(name: str) -> PaymentMethod:
    """Get a payment method descriptor by name ('ximpaysf' or 'xendit_qris')."""
    return _lookup("payment method", PAYMENT_METHODS, name)


def get_product(name: str) -> ProductData:
    """Get product data by name."""
    return _lookup("product", PRODUCTS, name)


def get_otp(name: str = "valid") -> list[str]:
    """Get a copy of the OTP digits by name."""
    return list(_lookup("OTP code", OTP_CODES, name))
