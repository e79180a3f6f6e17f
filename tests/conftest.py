"""Root pytest configuration.

Test Structure:
    tests/
    ├── bkper_sdk/
    │   ├── unit/              # Fast, isolated tests per layer
    │   │   ├── domain/
    │   │   ├── application/
    │   │   └── infrastructure/
    │   └── external/          # Live Bkper API (requires credentials)
    ├── bkper_config/          # Settings loading
    └── shared/                # Shared fixtures and factories

Environment Variables:
    RUN_EXTERNAL=1       Run @pytest.mark.external tests against the live API
    BKPER_TEST_BOOK_ID   Book read by the external tests

Pytest Options:
    --run-external       Run external tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from bkper_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-external",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.external",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "external: Tests connecting to the live Bkper API (auto-skipped)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip external tests unless explicitly enabled."""
    run_external = config.getoption("--run-external") or os.environ.get(
        "RUN_EXTERNAL",
        "",
    ).lower() in ("1", "true", "yes")

    if run_external:
        return

    skip_external = pytest.mark.skip(
        reason="External test - run with --run-external or RUN_EXTERNAL=1",
    )
    for item in items:
        if "external" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_external)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Clear cached settings so each test sees its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
