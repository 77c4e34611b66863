"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Landing screen of the XYZ Bank app: choose between the customer and the bank
manager areas.

================================================================================
"""

from __future__ import annotations

import re

import allure
from playwright.async_api import Page, expect

from testsuites.ui_testing.framework.page_base import PageBase


class LoginPage(PageBase):
    """Login page object (async)."""

    URL_PATH = "/#/login"

    CUSTOMER_LOGIN_BUTTON = 'button[ng-click="customer()"]'
    BANK_MANAGER_LOGIN_BUTTON = 'button[ng-click="manager()"]'
    HOME_BUTTON = ".home"

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.customer_login_button = page.locator(self.CUSTOMER_LOGIN_BUTTON)
        self.bank_manager_login_button = page.locator(self.BANK_MANAGER_LOGIN_BUTTON)
        self.home_button = page.locator(self.HOME_BUTTON)

    @allure.step("Open login page")
    async def navigate_to_login_page(self) -> None:
        await self.navigate()

    @allure.step("Click Customer Login")
    async def click_customer_login(self) -> None:
        await self.click(self.customer_login_button)

    @allure.step("Click Bank Manager Login")
    async def click_bank_manager_login(self) -> None:
        await self.click(self.bank_manager_login_button)

    @allure.step("Go to home page")
    async def go_home(self) -> None:
        await self.click(self.home_button)

    @allure.step("Verify login page is loaded")
    async def assert_login_page_loaded(self) -> None:
        """Assert the URL is the login route and both entry buttons are shown."""
        await expect(self.page).to_have_url(re.compile(r".*#/login"))
        await expect(self.customer_login_button).to_be_visible()
        await expect(self.bank_manager_login_button).to_be_visible()
