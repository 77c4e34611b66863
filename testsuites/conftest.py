"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers, sets up logging and gates browser scenarios.

================================================================================
"""

import os

import pytest

from bank_tools.common import get_config, init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers and logging."""
    init_logger()

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )
    config.addinivalue_line(
        "markers", "unit: Framework tests running without a browser"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser scenarios against the banking application"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "customer: Customer login and account operations"
    )
    config.addinivalue_line(
        "markers", "manager: Bank manager operations"
    )
    config.addinivalue_line(
        "markers", "transactions: Transaction history"
    )


def _e2e_enabled(config) -> bool:
    return config.getoption("--run-e2e") or get_config("ui.run_e2e", False)


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Adds 'ui'/'unit' markers from the directory layout and skips browser
    scenarios unless they were asked for.
    """
    skip_e2e = pytest.mark.skip(
        reason="browser scenario: use --run-e2e or UI_RUN_E2E=true"
    )
    run_e2e = _e2e_enabled(config)

    for item in items:
        path = str(item.path)

        if f"{os.sep}ui_testing{os.sep}" in path:
            item.add_marker(pytest.mark.ui)
            if not run_e2e:
                item.add_marker(skip_e2e)

        if f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "XYZ Bank UI Automation Suite",
        f"Application: {get_config('ui.base_url')}",
        f"Browser scenarios: {'enabled' if _e2e_enabled(config) else 'skipped'}",
        "=" * 60,
        "",
    ]
