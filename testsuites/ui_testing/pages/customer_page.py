"""
================================================================================
Customer Page Object (Async / Playwright)
================================================================================

Customer selection and account operations: choose a customer, log in, switch
accounts, deposit, withdraw, open the transaction history, log out.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from testsuites.ui_testing.framework.page_base import PageBase


# Returned by get_transaction_message when the app renders no message element
TRANSACTION_MESSAGE_MISSING = "Transaction message not displayed"

DEFAULT_MESSAGE_TIMEOUT_MS = 5000


class CustomerPage(PageBase):
    """Customer account page object (async)."""

    CUSTOMER_DROPDOWN = "#userSelect"
    LOGIN_BUTTON = 'button[type="submit"]'
    WELCOME_TEXT = "span.fontBig"
    ACCOUNT_DROPDOWN = "#accountSelect"
    DEPOSIT_BUTTON = 'button[ng-click="deposit()"]'
    WITHDRAWAL_BUTTON = 'button[ng-click="withdrawl()"]'
    TRANSACTIONS_BUTTON = 'button[ng-click="transactions()"]'
    LOGOUT_BUTTON = 'button[ng-click="byebye()"]'
    AMOUNT_INPUT = 'input[ng-model="amount"]'
    SUBMIT_TRANSACTION_BUTTON = 'button[type="submit"]'
    TRANSACTION_MESSAGE = '[ng-show="message"]'
    BALANCE = ".center strong:nth-child(2)"

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.customer_dropdown = page.locator(self.CUSTOMER_DROPDOWN)
        self.login_button = page.locator(self.LOGIN_BUTTON)
        self.welcome_text = page.locator(self.WELCOME_TEXT)
        self.account_dropdown = page.locator(self.ACCOUNT_DROPDOWN)
        self.deposit_button = page.locator(self.DEPOSIT_BUTTON)
        self.withdrawal_button = page.locator(self.WITHDRAWAL_BUTTON)
        self.transactions_button = page.locator(self.TRANSACTIONS_BUTTON)
        self.logout_button = page.locator(self.LOGOUT_BUTTON)
        self.amount_input = page.locator(self.AMOUNT_INPUT)
        self.submit_transaction_button = page.locator(self.SUBMIT_TRANSACTION_BUTTON)
        self.transaction_message = page.locator(self.TRANSACTION_MESSAGE)
        self.balance = page.locator(self.BALANCE)

    @allure.step("Select customer '{customer_name}'")
    async def select_customer(self, customer_name: str) -> None:
        await self.select_option(self.customer_dropdown, customer_name)

    @allure.step("Submit customer login")
    async def login(self) -> None:
        await self.click(self.login_button)

    async def get_welcome_message(self) -> str:
        """Return the greeting text, which holds the customer's full name."""
        return await self.get_text(self.welcome_text)

    @allure.step("Select account {account_number}")
    async def select_account(self, account_number: str) -> None:
        await self.select_option(self.account_dropdown, account_number)

    async def get_balance(self) -> int:
        """
        Return the balance of the selected account.

        Raises:
            ValueError: the balance element does not hold an integer
        """
        balance_text = await self.get_text(self.balance)
        return int(balance_text.strip())

    @allure.step("Deposit {amount}")
    async def make_deposit(self, amount: str) -> None:
        await self.click(self.deposit_button)
        await self.fill(self.amount_input, amount)
        await self.click(self.submit_transaction_button)

    @allure.step("Withdraw {amount}")
    async def make_withdrawal(self, amount: str) -> None:
        await self.click(self.withdrawal_button)
        await self.fill(self.amount_input, amount)
        await self.click(self.submit_transaction_button)

    async def get_transaction_message(
        self,
        timeout_ms: float = DEFAULT_MESSAGE_TIMEOUT_MS,
    ) -> str:
        """
        Read the success/failure message shown after a transaction.

        Waits up to ``timeout_ms`` for the message to become visible. If it
        never does, the text of a hidden message element is returned instead,
        and when there is no message element at all the
        ``TRANSACTION_MESSAGE_MISSING`` sentinel is returned.

        Args:
            timeout_ms: Visibility timeout in milliseconds

        Returns:
            Message text, possibly empty, or the sentinel
        """
        try:
            await self.wait_for_element(self.transaction_message, timeout=timeout_ms)
            return await self.get_text(self.transaction_message)
        except PlaywrightTimeoutError:
            if await self.transaction_message.count() > 0:
                logger.debug("Transaction message present but hidden, reading raw text")
                return await self.transaction_message.first.text_content(timeout=timeout_ms) or ""
            logger.debug("Transaction message element not found")
            return TRANSACTION_MESSAGE_MISSING

    @allure.step("Open transactions")
    async def view_transactions(self) -> None:
        await self.click(self.transactions_button)

    @allure.step("Customer logout")
    async def logout(self) -> None:
        await self.click(self.logout_button)
