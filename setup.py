#!/usr/bin/env python3
"""
Setup script for the SFShop checkout E2E suite.

Install with `pip install -e .` for development, or `pip install -e .[dev]`
to include coverage tooling.
"""

import sys

if sys.version_info < (3, 11):
    sys.exit("Error: sfshop-e2e requires Python 3.11 or higher.")

try:
    from setuptools import setup
except ImportError:
    sys.exit("Error: setuptools is required. Install it with: pip install setuptools")

# Read version from __version__.py for consistency
try:
    import re
    from pathlib import Path

    version_file = Path(__file__).parent / "src" / "sfshop_e2e" / "__version__.py"
    version_content = version_file.read_text(encoding="utf-8")
    version_match = re.search(r'^__version__\s*=\s*["\']([^"\']+)["\']', version_content, re.M)
    version = version_match.group(1) if version_match else "0.1.0"
except OSError:
    version = "0.1.0"

# Read long description from README if available
try:
    from pathlib import Path

    readme_path = Path(__file__).parent / "README.md"
    if readme_path.exists():
        long_description = readme_path.read_text(encoding="utf-8")
        long_description_content_type = "text/markdown"
    else:
        long_description = "End-to-end checkout tests for the SFShop top-up storefront"
        long_description_content_type = "text/plain"
except OSError:
    long_description = "End-to-end checkout tests for the SFShop top-up storefront"
    long_description_content_type = "text/plain"

# Core dependencies: the suite runs pytest itself
install_requires = [
    "playwright>=1.40.0",
    "pydantic>=2.0.0",
    "pydantic-settings>=2.0.0",
    "pytest>=7.4.0",
    "pytest-asyncio>=0.24.0",
]

# Development dependencies
extras_require = {
    "dev": [
        "black>=23.0.0",
        "flake8>=6.1.0",
        "mypy>=1.7.0",
        "pytest-cov>=4.1.0",
    ],
}

setup(
    name="sfshop-e2e",
    version=version,
    description="End-to-end checkout tests for the SFShop top-up storefront",
    long_description=long_description,
    long_description_content_type=long_description_content_type,
    author="SFShop QA Team",
    license="MIT",
    python_requires=">=3.11",
    packages=["automation", "common", "sfshop_e2e"],
    package_dir={
        "automation": "src/automation",
        "common": "src/common",
        "sfshop_e2e": "src/sfshop_e2e",
    },
    py_modules=["playwright_config"],
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "sfshop-e2e=sfshop_e2e.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Testing",
    ],
    keywords=["e2e", "playwright", "checkout", "testing"],
)
