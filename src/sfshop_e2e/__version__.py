"""Version information for the SFShop checkout E2E suite."""

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Release information
__title__ = "sfshop-e2e"
__description__ = "End-to-end checkout tests for the SFShop top-up storefront"
__author__ = "SFShop QA Team"
__license__ = "MIT"


def get_version() -> str:
    """Return the current version string."""
    return __version__
