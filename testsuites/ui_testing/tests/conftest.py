"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for the banking UI scenarios, providing fixtures
for browser management, page objects and logged-in sessions.

Fixture graph:

    browser_manager ─► page ─┬─► login_page ─┬─► logged_in_customer
                             ├─► customer_page ┘
                             ├─► manager_page ─► logged_in_manager
                             └─► transactions_page

Every fixture is function scoped: each test owns its browser, page and page
objects.

================================================================================
"""

import pytest
from typing import Any, AsyncGenerator, Dict

from playwright.async_api import Page

from testsuites.ui_testing.data import load_test_data
from testsuites.ui_testing.framework.bank_logger import Logger
from testsuites.ui_testing.framework.banking_contexts import (
    logged_in_customer as customer_session,
    logged_in_manager as manager_session,
)
from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.helpers import TestHelper
from testsuites.ui_testing.pages.customer_page import CustomerPage
from testsuites.ui_testing.pages.login_page import LoginPage
from testsuites.ui_testing.pages.manager_page import ManagerPage
from testsuites.ui_testing.pages.transactions_page import TransactionsPage


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Function-scoped browser manager fixture.

    Launches a browser for the test and closes it with all its contexts.
    """
    async with BrowserManager() as manager:
        yield manager


@pytest.fixture
async def page(
    request: pytest.FixtureRequest,
    browser_manager: BrowserManager,
) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture in a fresh browser context.

    Captures a full-page screenshot when the test body failed.
    """
    page = await browser_manager.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        await TestHelper.take_screenshot(page, f"failure_{request.node.name}")


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
async def login_page(page: Page) -> LoginPage:
    """Provides LoginPage, already on the login screen."""
    Logger.info("Setting up LoginPage fixture")
    login_page = LoginPage(page)
    await login_page.navigate_to_login_page()
    return login_page


@pytest.fixture
def customer_page(page: Page) -> CustomerPage:
    """Provides CustomerPage bound to the test page."""
    Logger.info("Setting up CustomerPage fixture")
    return CustomerPage(page)


@pytest.fixture
def manager_page(page: Page, login_page: LoginPage) -> ManagerPage:
    """Provides ManagerPage; the login screen is loaded first."""
    Logger.info("Setting up ManagerPage fixture")
    return ManagerPage(page)


@pytest.fixture
def transactions_page(page: Page) -> TransactionsPage:
    """Provides TransactionsPage bound to the test page."""
    Logger.info("Setting up TransactionsPage fixture")
    return TransactionsPage(page)


# ================================================================================
# Session Fixtures
# ================================================================================

@pytest.fixture
async def logged_in_customer(
    login_page: LoginPage,
    customer_page: CustomerPage,
) -> AsyncGenerator[CustomerPage, None]:
    """
    Provides CustomerPage logged in as the default customer.

    Logout is attempted after the test; failures there never fail the test.
    """
    Logger.info("Setting up logged_in_customer fixture")
    async with customer_session(login_page, customer_page) as logged_in:
        yield logged_in


@pytest.fixture
async def logged_in_manager(
    login_page: LoginPage,
    manager_page: ManagerPage,
) -> AsyncGenerator[ManagerPage, None]:
    """Provides ManagerPage inside the bank manager area."""
    Logger.info("Setting up logged_in_manager fixture")
    async with manager_session(login_page, manager_page) as logged_in:
        yield logged_in


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Keep each phase report on the item.

    The `page` fixture reads `rep_call` in teardown to decide whether to
    capture a failure screenshot.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def test_data() -> Dict[str, Any]:
    """
    Provides the banking test data tables.
    """
    return load_test_data()
