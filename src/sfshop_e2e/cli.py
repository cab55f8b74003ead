#!/usr/bin/env python3
"""
Command-line interface for the SFShop checkout E2E suite.

This module provides the entry point installed as `sfshop-e2e`. It
configures logging and the environment, then runs the end-to-end tests
through pytest.

Usage:
    sfshop-e2e [OPTIONS] [-- PYTEST_ARGS...]

Options:
    --project NAME  Browser project (mobile-chromium, desktop-chromium)
    --base-url URL  Storefront to test
    --headed        Show the browser window
    --debug         Enable debug logging
    --show-config   Print the effective configuration and exit
    --version       Show version and exit
"""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from common.config import Settings, reload_settings
from common.exceptions import ConfigurationError
from sfshop_e2e import __version__

PROJECTS = ("mobile-chromium", "desktop-chromium")
DEFAULT_TESTS_PATH = "tests/e2e"


def setup_logging(debug: bool = False, settings: Optional[Settings] = None) -> None:
    """
    Configure logging for a suite run.

    Args:
        debug: Enable debug logging.
        settings: Settings providing the log level, format and file.
    """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_level = logging.DEBUG if debug else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if settings is not None:
        log_format = settings.logging.format
        if not debug:
            log_level = getattr(logging, settings.logging.level)
        if settings.logging.file:
            handlers.append(logging.FileHandler(settings.logging.file))

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=handlers,
        force=True,
    )

    if not debug:
        logging.getLogger("asyncio").setLevel(logging.WARNING)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace; ``pytest_args`` holds everything after ``--``.
    """
    parser = argparse.ArgumentParser(
        prog="sfshop-e2e",
        description="SFShop checkout end-to-end tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Run all checkout tests on the mobile project:
        sfshop-e2e

    Run on desktop against another environment, with a visible browser:
        sfshop-e2e --project desktop-chromium --base-url https://stg.sfshop.id --headed

    Pass options through to pytest:
        sfshop-e2e -- -k xendit -x

Environment Variables:
    E2E_BASE_URL            Storefront base URL
    E2E_HEADLESS            Run headless (true/false)
    E2E_PROJECT             Browser project name
    SFSHOP_E2E_DEBUG        Enable debug mode (true/false)
    SFSHOP_E2E_CONFIG_FILE  TOML configuration file path
        """,
    )

    parser.add_argument(
        "--project",
        choices=PROJECTS,
        default=None,
        help="Browser project to run (default: mobile-chromium)",
    )

    parser.add_argument(
        "--base-url",
        default=None,
        help="Storefront base URL",
    )

    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )

    parser.add_argument(
        "--tests",
        default=DEFAULT_TESTS_PATH,
        help=(
            f"Test path to run, relative to the current directory "
            f"(default: {DEFAULT_TESTS_PATH}; run from the repository root, "
            f"the tests are not installed with the package)"
        ),
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Enable debug logging",
    )

    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the effective configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"sfshop-e2e {__version__}",
    )

    parser.add_argument(
        "pytest_args",
        nargs="*",
        help="Extra arguments passed to pytest (after --)",
    )

    return parser.parse_args(argv)


def apply_environment(args: argparse.Namespace) -> None:
    """Export command-line choices so settings and fixtures pick them up."""
    os.environ["E2E_RUN"] = "true"
    if args.project:
        os.environ["E2E_PROJECT"] = args.project
    if args.base_url:
        os.environ["E2E_BASE_URL"] = args.base_url
    if args.headed:
        os.environ["E2E_HEADLESS"] = "false"


def show_config(settings: Settings) -> None:
    """Print the effective configuration."""
    site = settings.site
    print(f"SFShop E2E {__version__} ({settings.environment})")
    print("=" * 50)
    print(f"Base URL: {site.base_url}")
    print(f"Project: {os.environ.get('E2E_PROJECT', PROJECTS[0])}")
    print(f"Headless: {site.headless}")
    print(f"Locale / Timezone: {site.locale} / {site.timezone_id}")
    print(f"Action Timeout: {site.action_timeout}ms")
    print(f"Navigation Timeout: {site.navigation_timeout}ms")
    print(f"Retry Attempts: {settings.retry.max_attempts}")
    print(
        f"Status Polling: every {settings.retry.poll_interval}ms "
        f"for up to {settings.retry.poll_deadline}ms"
    )
    print(f"Results Directory: {site.results_dir}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (pytest's exit code, or 1 on configuration errors).
    """
    args = parse_args(argv)
    apply_environment(args)

    try:
        settings = reload_settings()
        settings.validate_required()
    except (ConfigurationError, ValidationError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    debug = args.debug if args.debug is not None else settings.debug
    setup_logging(debug, settings)
    logger = logging.getLogger(__name__)

    if args.show_config:
        show_config(settings)
        return 0

    import pytest

    pytest_args = [args.tests, "-m", "e2e", *args.pytest_args]
    logger.info("Running sfshop-e2e v%s against %s", __version__, settings.site.base_url)
    logger.debug("pytest arguments: %s", pytest_args)

    try:
        exit_code = int(pytest.main(pytest_args))
    except KeyboardInterrupt:
        logger.info("Run interrupted by user")
        return 130

    logger.info("Test run finished with exit code %d", exit_code)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
