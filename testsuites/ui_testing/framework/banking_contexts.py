"""
================================================================================
Banking Session Contexts
================================================================================

Composable setup/teardown units used by the pytest fixtures:

    login page  ──►  logged_in_customer  (yields CustomerPage)
                └─►  logged_in_manager   (yields ManagerPage)

Setup errors propagate and fail the test. Teardown is best effort: logout is
attempted when the logout control is showing and any failure is only logged.

================================================================================
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from testsuites.ui_testing.framework.bank_logger import Logger
from testsuites.ui_testing.pages.customer_page import CustomerPage
from testsuites.ui_testing.pages.login_page import LoginPage
from testsuites.ui_testing.pages.manager_page import ManagerPage


DEFAULT_CUSTOMER = "Hermoine Granger"


@asynccontextmanager
async def logged_in_customer(
    login_page: LoginPage,
    customer_page: CustomerPage,
    customer_name: str = DEFAULT_CUSTOMER,
) -> AsyncIterator[CustomerPage]:
    """
    Log in as ``customer_name`` and yield the customer page.

    Args:
        login_page: Login page bound to the test's browser page
        customer_page: Customer page bound to the same browser page
        customer_name: Name as listed in the customer dropdown
    """
    Logger.info(f"Logging in as customer '{customer_name}'")
    await login_page.navigate_to_login_page()
    await login_page.click_customer_login()
    await customer_page.select_customer(customer_name)
    await customer_page.login()
    Logger.info("Customer logged in successfully")

    try:
        yield customer_page
    finally:
        await _logout_customer(customer_page)


async def _logout_customer(customer_page: CustomerPage) -> None:
    try:
        if await customer_page.is_visible(customer_page.logout_button):
            await customer_page.logout()
    except Exception as e:
        Logger.warning(f"Could not log out at the end of the test: {e}")


@asynccontextmanager
async def logged_in_manager(
    login_page: LoginPage,
    manager_page: ManagerPage,
) -> AsyncIterator[ManagerPage]:
    """
    Enter the bank manager area and yield the manager page.

    The manager area has no logout control; leaving it needs no cleanup.
    """
    Logger.info("Logging in as bank manager")
    await login_page.navigate_to_login_page()
    await login_page.click_bank_manager_login()
    yield manager_page


__all__ = [
    "DEFAULT_CUSTOMER",
    "logged_in_customer",
    "logged_in_manager",
]
