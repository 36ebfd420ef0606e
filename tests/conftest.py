"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (ports mocked)
    ├── integration/       # SQLite-backed persistence and end-to-end flows
    └── shared/            # Shared builders and constants

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests (real PostgreSQL)

Pytest Options:
    --run-integration    Run integration tests
"""

import os

import pytest

from friggsys_config import clear_settings_cache


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that need an external database (auto-skipped)",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    run_integration = config.getoption("--run-integration") or os.environ.get(
        "RUN_INTEGRATION",
        "",
    ).lower() in ("1", "true", "yes")

    if run_integration:
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        if "integration" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_integration)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with a fresh settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()
