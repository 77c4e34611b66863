"""
================================================================================
Test Helper
================================================================================

Common helpers for UI scenarios:
    - explicit delays (discouraged, logged as warnings)
    - random data for unique customer names
    - timestamped full-page screenshots
    - native alert capture

================================================================================
"""

from __future__ import annotations

import asyncio
import random
import string
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Tuple

from playwright.async_api import Dialog, Page

from bank_tools.common import ensure_directory, get_config
from bank_tools.report_tools import attach_png

from .bank_logger import Logger


RANDOM_CHARACTERS = string.ascii_letters + string.digits


class TestHelper:
    """Stateless helper functions for UI tests."""

    # Not a test class, despite the name
    __test__ = False

    @staticmethod
    async def wait(ms: int) -> None:
        """
        Sleep for a fixed amount of time.

        Prefer waiting on elements; this exists for app animations that expose
        no observable state.

        Args:
            ms: Time to wait in milliseconds
        """
        Logger.warning(
            f"Using explicit wait for {ms}ms - consider using element waiting instead"
        )
        await asyncio.sleep(ms / 1000)

    @staticmethod
    def generate_random_string(length: int = 8) -> str:
        """Return a random alphanumeric string of ``length`` characters."""
        return "".join(random.choice(RANDOM_CHARACTERS) for _ in range(length))

    @staticmethod
    def generate_random_number(min_value: int, max_value: int) -> int:
        """Return a random integer in ``[min_value, max_value]``."""
        return random.randint(min_value, max_value)

    @staticmethod
    async def take_screenshot(page: Page, test_name: str) -> Optional[Path]:
        """
        Take a full-page screenshot with a timestamped name.

        Failures are logged, never raised, so this is safe in teardown code.

        Args:
            page: Playwright page
            test_name: Label used as the file name prefix

        Returns:
            Path of the saved file, or None when capture failed
        """
        try:
            screenshot_dir = ensure_directory(get_config("paths.screenshots", "screenshots"))
            timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S-%f")
            filepath = screenshot_dir / f"{test_name}_{timestamp}.png"
            await page.screenshot(path=str(filepath), full_page=True)
            attach_png(filepath, name=test_name)
            Logger.info(f"Screenshot saved for {test_name}")
            return filepath
        except Exception as e:
            Logger.error("Failed to take screenshot", e)
            return None

    @staticmethod
    def capture_alert(page: Page) -> Tuple["asyncio.Future[str]", Callable[[], None]]:
        """
        Intercept the next native dialog on ``page``.

        Register before the action that opens the alert. The dialog is
        accepted and the returned future resolves with its message. Call
        ``release`` once done waiting: if no dialog arrived, the listener is
        removed and the pending future cancelled, so a later dialog on the
        page is left to whoever handles it.

        Usage:
            alert, release = TestHelper.capture_alert(page)
            try:
                await page.locator("button[type='submit']").click()
                message = await asyncio.wait_for(alert, timeout=5)
            finally:
                release()

        Args:
            page: Playwright page

        Returns:
            (future resolved with the dialog message text, release callable)
        """
        message: "asyncio.Future[str]" = asyncio.get_running_loop().create_future()
        fired = False

        async def on_dialog(dialog: Dialog) -> None:
            nonlocal fired
            fired = True
            if not message.done():
                message.set_result(dialog.message)
            Logger.info(f"Dialog message: {dialog.message}")
            await dialog.accept()

        def release() -> None:
            if fired:
                return
            page.remove_listener("dialog", on_dialog)
            if not message.done():
                message.cancel()

        page.once("dialog", on_dialog)
        return message, release


__all__ = [
    "TestHelper",
]
