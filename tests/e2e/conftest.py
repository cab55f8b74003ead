"""
Pytest fixtures for Playwright E2E tests.

This module provides fixtures for the browser session, a fresh context
and page per test, page objects, and a screenshot on failure.
"""

import logging
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from playwright.async_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    async_playwright,
)

from common.config import Settings, get_settings
from playwright_config import (
    BrowserConfig,
    ensure_directories,
    get_project,
    get_screenshot_path,
    get_trace_path,
)

from .pages import CheckoutPage, HomePage, OrderPage, PaymentPage

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

@pytest.fixture(scope="session")
def settings() -> Settings:
    """Suite settings, loaded once per session."""
    settings = get_settings()
    ensure_directories(settings)
    return settings


@pytest.fixture(scope="session")
def project() -> BrowserConfig:
    """Browser project selected with E2E_PROJECT (default mobile-chromium)."""
    return get_project()


# =============================================================================
# Playwright Fixtures
# =============================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def playwright() -> AsyncGenerator[Playwright, None]:
    """Create a Playwright instance for the test session."""
    async with async_playwright() as pw:
        yield pw


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser(
    playwright: Playwright, project: BrowserConfig, settings: Settings
) -> AsyncGenerator[Browser, None]:
    """Launch the project's browser for the session."""
    browser_type = getattr(playwright, project.browser_name)
    browser = await browser_type.launch(**project.to_launch_options(settings))
    logger.info("Launched %s for project %s", project.browser_name, project.name)
    yield browser
    await browser.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(
    request, browser: Browser, project: BrowserConfig, settings: Settings
) -> AsyncGenerator[BrowserContext, None]:
    """
    Create a new browser context for each test.

    This provides isolation between tests with separate cookies,
    storage, and other browser state.
    """
    context = await browser.new_context(**project.to_context_options(settings))
    context.set_default_timeout(settings.site.action_timeout)
    context.set_default_navigation_timeout(settings.site.navigation_timeout)

    if settings.site.record_trace:
        await context.tracing.start(screenshots=True, snapshots=True)

    yield context

    if settings.site.record_trace:
        path = get_trace_path(request.node.name, settings)
        await context.tracing.stop(path=str(path))
        logger.info("Trace saved: %s", path)
    await context.close()


@pytest_asyncio.fixture(loop_scope="session")
async def page(context: BrowserContext) -> AsyncGenerator[Page, None]:
    """Create a new page for each test."""
    page = await context.new_page()
    yield page
    await page.close()


# =============================================================================
# Page Object Fixtures
# =============================================================================

@pytest.fixture
def home_page(page: Page, settings: Settings) -> HomePage:
    return HomePage(page, settings)


@pytest.fixture
def checkout_page(page: Page, settings: Settings) -> CheckoutPage:
    return CheckoutPage(page, settings)


@pytest.fixture
def payment_page(page: Page, settings: Settings) -> PaymentPage:
    return PaymentPage(page, settings)


@pytest.fixture
def order_page(page: Page, settings: Settings) -> OrderPage:
    return OrderPage(page, settings)


# =============================================================================
# Utility Fixtures
# =============================================================================

@pytest_asyncio.fixture(loop_scope="session", autouse=True)
async def screenshot_on_failure(
    request, page: Page, settings: Settings
) -> AsyncGenerator[None, None]:
    """Take a full-page screenshot when a test fails."""
    yield

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        path = get_screenshot_path(request.node.name, settings)
        await page.screenshot(path=str(path), full_page=True)
        logger.info("Failure screenshot saved: %s", path)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Hook to store test result for screenshot_on_failure fixture."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)
