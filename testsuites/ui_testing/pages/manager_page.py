"""
================================================================================
Bank Manager Page Object (Async / Playwright)
================================================================================

Bank manager operations:
    - Add Customer form (first name, last name, post code)
    - Open Account form (customer + currency)
    - Customers list (search, delete)

Adding a customer and opening an account both confirm through a native
alert; those operations capture and accept it and return its text.

================================================================================
"""

from __future__ import annotations

import asyncio

import allure
from loguru import logger
from playwright.async_api import Page

from bank_tools.common import get_config
from testsuites.ui_testing.framework.helpers import TestHelper
from testsuites.ui_testing.framework.page_base import PageBase, RowIndexError


class ManagerPage(PageBase):
    """Bank manager page object (async)."""

    # Main navigation
    ADD_CUSTOMER_BUTTON = 'button[ng-click="addCust()"]'
    OPEN_ACCOUNT_BUTTON = 'button[ng-click="openAccount()"]'
    CUSTOMERS_BUTTON = 'button[ng-click="showCust()"]'

    # Add Customer form
    FIRST_NAME_INPUT = 'input[ng-model="fName"]'
    LAST_NAME_INPUT = 'input[ng-model="lName"]'
    POST_CODE_INPUT = 'input[ng-model="postCd"]'
    ADD_CUSTOMER_SUBMIT_BUTTON = 'button[type="submit"]'

    # Open Account form
    CUSTOMER_SELECT = "#userSelect"
    CURRENCY_SELECT = "#currency"
    PROCESS_BUTTON = 'button[type="submit"]'

    # Customers list
    SEARCH_CUSTOMER_INPUT = 'input[ng-model="searchCustomer"]'
    DELETE_CUSTOMER_BUTTONS = 'button[ng-click="deleteCust(cust)"]'
    CUSTOMER_ROWS = "tbody tr"

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)

        self.add_customer_button = page.locator(self.ADD_CUSTOMER_BUTTON)
        self.open_account_button = page.locator(self.OPEN_ACCOUNT_BUTTON)
        self.customers_button = page.locator(self.CUSTOMERS_BUTTON)

        self.first_name_input = page.locator(self.FIRST_NAME_INPUT)
        self.last_name_input = page.locator(self.LAST_NAME_INPUT)
        self.post_code_input = page.locator(self.POST_CODE_INPUT)
        self.add_customer_submit_button = page.locator(self.ADD_CUSTOMER_SUBMIT_BUTTON)

        self.customer_select = page.locator(self.CUSTOMER_SELECT)
        self.currency_select = page.locator(self.CURRENCY_SELECT)
        self.process_button = page.locator(self.PROCESS_BUTTON)

        self.search_customer_input = page.locator(self.SEARCH_CUSTOMER_INPUT)
        self.delete_customer_buttons = page.locator(self.DELETE_CUSTOMER_BUTTONS)
        self.customer_rows = page.locator(self.CUSTOMER_ROWS)

    @allure.step("Open Add Customer form")
    async def navigate_to_add_customer(self) -> None:
        await self.click(self.add_customer_button)

    @allure.step("Open Open Account form")
    async def navigate_to_open_account(self) -> None:
        await self.click(self.open_account_button)

    @allure.step("Open Customers list")
    async def navigate_to_customers(self) -> None:
        await self.click(self.customers_button)

    @allure.step("Add customer {first_name} {last_name}")
    async def add_customer(
        self,
        first_name: str,
        last_name: str,
        post_code: str,
    ) -> str:
        """
        Submit the Add Customer form.

        Args:
            first_name: Customer's first name
            last_name: Customer's last name
            post_code: Customer's post code

        Returns:
            Text of the confirmation alert
        """
        await self.navigate_to_add_customer()
        await self.fill(self.first_name_input, first_name)
        await self.fill(self.last_name_input, last_name)
        await self.fill(self.post_code_input, post_code)
        return await self._submit_and_read_alert(self.add_customer_submit_button)

    @allure.step("Open {currency} account for {customer_name}")
    async def open_account(self, customer_name: str, currency: str) -> str:
        """
        Submit the Open Account form.

        Args:
            customer_name: Full name as listed in the customer dropdown
            currency: Currency label (Dollar, Pound, Rupee)

        Returns:
            Text of the confirmation alert
        """
        await self.navigate_to_open_account()
        await self.select_option(self.customer_select, customer_name)
        await self.select_option(self.currency_select, currency)
        return await self._submit_and_read_alert(self.process_button)

    async def _submit_and_read_alert(self, submit_button) -> str:
        timeout_ms = get_config("ui.default_timeout", 10000)
        alert, release = TestHelper.capture_alert(self.page)
        try:
            await self.click(submit_button)
            message = await asyncio.wait_for(alert, timeout=timeout_ms / 1000)
        finally:
            release()
        logger.debug(f"Alert accepted: {message}")
        return message

    @allure.step("Search customer '{search_text}'")
    async def search_customer(self, search_text: str) -> None:
        await self.navigate_to_customers()
        await self.fill(self.search_customer_input, search_text)

    @allure.step("Delete customer at row {index}")
    async def delete_customer(self, index: int) -> None:
        """
        Delete the customer shown at ``index`` (0-based) in the customers list.

        Raises:
            RowIndexError: no row at ``index``
        """
        delete_buttons = await self.delete_customer_buttons.all()
        if not 0 <= index < len(delete_buttons):
            raise RowIndexError(f"Customer at index {index} does not exist")
        await delete_buttons[index].click()

    async def get_customer_count(self) -> int:
        return await self.customer_rows.count()
