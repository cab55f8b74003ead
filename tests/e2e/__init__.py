"""
SFShop checkout E2E Tests Package.

This package contains end-to-end tests that buy a product on the SFShop
storefront using Playwright and pytest-asyncio.

Test Modules:
    - test_purchase_ximpaysf: Purchase paid with XimpaySF (OTP flow)
    - test_purchase_xendit_qris: Purchase paid with Xendit QRIS (simulated)
    - test_customer_validation: Customer form validation errors

Page Objects:
    - pages/: Page Object Model classes for reusable selectors

Configuration:
    - conftest.py: Pytest fixtures and configuration
    - playwright_config.py: Browser projects (in project root)

Running Tests:
    # Run all E2E tests against staging
    sfshop-e2e

    # Or through pytest directly
    pytest tests/e2e/ --run-e2e

    # Run in headed mode on the desktop project
    sfshop-e2e --project desktop-chromium --headed

Environment Variables:
    E2E_RUN: Enable E2E tests without --run-e2e (default: false)
    E2E_PROJECT: Browser project (default: mobile-chromium)
    E2E_BASE_URL: Storefront URL (default: https://stg.sfshop.id)
    E2E_HEADLESS: Run in headless mode (default: true)
    E2E_SLOW_MO: Slow motion delay in ms (default: 0)
    E2E_RECORD_VIDEO: Record video (default: false)
    E2E_RECORD_TRACE: Record a Playwright trace (default: false)
"""

__all__ = [
    "pages",
]
