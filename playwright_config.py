"""
Playwright configuration for the SFShop checkout E2E tests.

This module defines the browser projects the suite runs on, the launch
and context options derived from them, and where test artifacts go.
Values come from the suite settings (see ``common.config``), so the
usual environment variables apply.

Usage:
    sfshop-e2e --project mobile-chromium
    sfshop-e2e --project desktop-chromium --headed
    E2E_BASE_URL=https://stg.sfshop.id pytest tests/e2e --run-e2e
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from common.config import Settings, get_settings


# =============================================================================
# Browser Configuration
# =============================================================================

@dataclass
class BrowserConfig:
    """Configuration for a browser project."""

    # Project name as selected with --project / E2E_PROJECT
    name: str

    # Browser name: chromium, firefox, webkit
    browser_name: str = "chromium"

    # Browser channel: chrome, msedge, ...
    channel: Optional[str] = None

    # Viewport dimensions
    viewport_width: int = 1920
    viewport_height: int = 1080

    # Device emulation
    device_scale_factor: float = 1.0
    is_mobile: bool = False
    has_touch: bool = False
    user_agent: Optional[str] = None

    # Extra HTTP headers
    extra_http_headers: Dict[str, str] = field(default_factory=dict)

    def to_launch_options(self, settings: Settings) -> Dict[str, Any]:
        """Convert to Playwright browser launch options."""
        options: Dict[str, Any] = {
            "headless": settings.site.headless,
            "slow_mo": settings.site.slow_mo,
        }
        if self.channel:
            options["channel"] = self.channel
        return options

    def to_context_options(self, settings: Settings) -> Dict[str, Any]:
        """Convert to Playwright browser context options."""
        site = settings.site
        options: Dict[str, Any] = {
            "viewport": {
                "width": self.viewport_width,
                "height": self.viewport_height,
            },
            "device_scale_factor": self.device_scale_factor,
            "is_mobile": self.is_mobile,
            "has_touch": self.has_touch,
            "locale": site.locale,
            "timezone_id": site.timezone_id,
            "base_url": site.base_url,
        }

        if self.user_agent:
            options["user_agent"] = self.user_agent
        if self.extra_http_headers:
            options["extra_http_headers"] = self.extra_http_headers
        if site.record_video:
            options["record_video_dir"] = str(videos_dir(settings))

        return options


# =============================================================================
# Projects
# =============================================================================

MOBILE_CHROMIUM = BrowserConfig(
    name="mobile-chromium",
    viewport_width=412,
    viewport_height=915,
    device_scale_factor=2.625,
    is_mobile=True,
    has_touch=True,
    user_agent=(
        "Mozilla/5.0 (Linux; Android 10; SM-N981B) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/80.0.3987.162 Mobile Safari/537.36"
    ),
)

DESKTOP_CHROMIUM = BrowserConfig(
    name="desktop-chromium",
    viewport_width=1920,
    viewport_height=1080,
)

PROJECTS: Dict[str, BrowserConfig] = {
    MOBILE_CHROMIUM.name: MOBILE_CHROMIUM,
    DESKTOP_CHROMIUM.name: DESKTOP_CHROMIUM,
}

DEFAULT_PROJECT = MOBILE_CHROMIUM.name


def get_project(name: Optional[str] = None) -> BrowserConfig:
    """
    Get a browser project by name.

    Args:
        name: Project name; defaults to E2E_PROJECT, then mobile-chromium.

    Raises:
        KeyError: If the project is not defined.
    """
    name = name or os.environ.get("E2E_PROJECT") or DEFAULT_PROJECT
    try:
        return PROJECTS[name]
    except KeyError:
        raise KeyError(
            f"Unknown project '{name}' (available: {', '.join(PROJECTS)})"
        ) from None


# =============================================================================
# Artifact Paths
# =============================================================================

def _safe_name(test_name: str) -> str:
    return "".join(c if c.isalnum() or c in "-_" else "_" for c in test_name)


def screenshots_dir(settings: Optional[Settings] = None) -> Path:
    settings = settings or get_settings()
    return settings.site.results_dir / "screenshots"


def videos_dir(settings: Optional[Settings] = None) -> Path:
    settings = settings or get_settings()
    return settings.site.results_dir / "videos"


def traces_dir(settings: Optional[Settings] = None) -> Path:
    settings = settings or get_settings()
    return settings.site.results_dir / "traces"


def ensure_directories(settings: Optional[Settings] = None) -> None:
    """Ensure artifact directories exist."""
    for directory in (screenshots_dir(settings), videos_dir(settings), traces_dir(settings)):
        directory.mkdir(parents=True, exist_ok=True)


def get_screenshot_path(test_name: str, settings: Optional[Settings] = None) -> Path:
    """Get the screenshot path for a test."""
    return screenshots_dir(settings) / f"{_safe_name(test_name)}.png"


def get_trace_path(test_name: str, settings: Optional[Settings] = None) -> Path:
    """Get the trace path for a test."""
    return traces_dir(settings) / f"{_safe_name(test_name)}.zip"
