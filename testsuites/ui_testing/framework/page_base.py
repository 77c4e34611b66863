"""
================================================================================
Base Page Object
================================================================================

Foundation class for the Page Object Model implementation.

Provides:
    - Navigation relative to the configured application URL
    - One-action primitives over Playwright locators (click, fill, read, select)
    - Visibility waits
    - Screenshot capture attached to Allure

Primitives never retry and never translate Playwright errors; whatever the
engine raises reaches the caller unchanged.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page

from bank_tools.common import ensure_directory, get_config
from bank_tools.report_tools import attach_png


DEFAULT_BASE_URL = "https://www.globalsqa.com/angularJs-protractor/BankingProject"


class RowIndexError(IndexError):
    """Raised when a table row is requested beyond the rows currently shown."""
    pass


class BasePage:
    """
    Base class for all page objects.

    Subclasses declare their locators in ``__init__`` from fixed selectors and
    compose the primitives below into screen-specific operations.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/#/login"

            def __init__(self, page):
                super().__init__(page)
                self.customer_login_button = page.locator("button[ng-click='customer()']")

            async def click_customer_login(self):
                await self.click(self.customer_login_button)
    """

    # Override in subclasses
    URL_PATH: str = ""

    def __init__(
        self,
        page: Page,
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object (borrowed from the fixture layer)
            base_url: Application URL; defaults to ``ui.base_url`` from config
        """
        self.page = page
        if not base_url:
            base_url = get_config("ui.base_url", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def navigate(self, path: Optional[str] = None) -> None:
        """
        Navigate to a path relative to the application URL.

        Args:
            path: URL path (e.g. "/#/login"); defaults to ``URL_PATH``
        """
        path = self.URL_PATH if path is None else path
        target = f"{self.base_url}{path}"
        with allure.step(f"Navigate to {path or '/'}"):
            await self.page.goto(target)
            logger.debug(f"Navigated to: {target}")

    async def wait_for_element(
        self,
        locator: Locator,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Wait for an element to become visible.

        Args:
            locator: Element locator
            timeout: Timeout in milliseconds (page default when None)
        """
        await locator.wait_for(state="visible", timeout=timeout)

    async def is_visible(self, locator: Locator) -> bool:
        """Return whether the element is currently visible (no waiting)."""
        return await locator.is_visible()

    async def get_text(self, locator: Locator) -> str:
        """Return the rendered text of the element."""
        return await locator.inner_text()

    async def click(self, locator: Locator) -> None:
        with allure.step(f"Click: {locator}"):
            await locator.click()

    async def fill(self, locator: Locator, text: str) -> None:
        with allure.step(f"Fill {locator}: {text}"):
            await locator.fill(text)

    async def select_option(self, locator: Locator, option_text: str) -> None:
        """
        Select a dropdown option by its visible label.

        Args:
            locator: The select element locator
            option_text: Visible option text
        """
        with allure.step(f"Select '{option_text}' in {locator}"):
            await locator.select_option(label=option_text)

    async def take_screenshot(self, name: str) -> Path:
        """
        Save a viewport screenshot as ``<screenshot dir>/<name>.png``.

        Args:
            name: Screenshot name (without extension)

        Returns:
            Path to saved screenshot
        """
        screenshot_dir = ensure_directory(get_config("paths.screenshots", "screenshots"))
        filepath = screenshot_dir / f"{name}.png"

        await self.page.screenshot(path=str(filepath))
        attach_png(filepath, name=name)

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath


__all__ = [
    "BasePage",
    "PageBase",
    "RowIndexError",
    "DEFAULT_BASE_URL",
]

# Page objects import the base under either name
PageBase = BasePage
