"""
================================================================================
Transactions Page Object (Async / Playwright)
================================================================================

Customer transaction history: table rows, date-range filter, reset, back.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

import allure
from loguru import logger
from playwright.async_api import Page

from testsuites.ui_testing.framework.page_base import PageBase, RowIndexError


DateLike = Union[date, str]

# Sets both datetime-local inputs and notifies AngularJS so the table re-filters
SET_DATE_RANGE_SCRIPT = """
([fromSelector, fromValue, toSelector, toValue]) => {
    for (const [selector, value] of [[fromSelector, fromValue], [toSelector, toValue]]) {
        const input = document.querySelector(selector);
        if (!input) continue;
        input.value = value;
        input.dispatchEvent(new Event("input", { bubbles: true }));
        input.dispatchEvent(new Event("change", { bubbles: true }));
    }
}
"""


@dataclass(frozen=True)
class TransactionDetails:
    """One row of the transactions table."""
    date_time: str
    amount: str
    transaction_type: str
    balance: str = "N/A"


class TransactionsPage(PageBase):
    """Transaction history page object (async)."""

    TRANSACTIONS_TABLE = "#anchor0"
    TRANSACTION_ROWS = "tbody tr"
    BACK_BUTTON = 'button[ng-click="back()"]'
    RESET_BUTTON = 'button[ng-click="reset()"]'
    DATE_FROM_INPUT = 'input[ng-model="startDate"]'
    DATE_TO_INPUT = 'input[ng-model="end"]'
    NO_DATA_MESSAGE = "span.error"

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.transactions_table = page.locator(self.TRANSACTIONS_TABLE)
        self.transaction_rows = page.locator(self.TRANSACTION_ROWS)
        self.back_button = page.locator(self.BACK_BUTTON)
        self.reset_button = page.locator(self.RESET_BUTTON)
        self.date_from_input = page.locator(self.DATE_FROM_INPUT)
        self.date_to_input = page.locator(self.DATE_TO_INPUT)
        self.no_data_message = page.locator(self.NO_DATA_MESSAGE)

    async def get_transactions_count(self) -> int:
        return await self.transaction_rows.count()

    async def get_transaction_details(self, index: int) -> TransactionDetails:
        """
        Read the cells of the transaction at ``index`` (0-based).

        Raises:
            RowIndexError: no row at ``index``
        """
        rows = await self.transaction_rows.all()
        if not 0 <= index < len(rows):
            raise RowIndexError(f"Transaction at index {index} does not exist")

        cells = await rows[index].locator("td").all()
        texts = [await cell.inner_text() for cell in cells[:4]]

        return TransactionDetails(
            date_time=texts[0],
            amount=texts[1],
            transaction_type=texts[2],
            balance=(texts[3] if len(texts) > 3 else "") or "N/A",
        )

    @allure.step("Filter transactions from {from_date} to {to_date}")
    async def filter_by_date_range(self, from_date: DateLike, to_date: DateLike) -> None:
        """
        Restrict the history to a date range (whole days, inclusive).

        Args:
            from_date: Start date, ``date`` or ``YYYY-MM-DD``
            to_date: End date, ``date`` or ``YYYY-MM-DD``
        """
        from_value = f"{_iso_day(from_date)}T00:00:00"
        to_value = f"{_iso_day(to_date)}T23:59:59"
        await self.page.evaluate(
            SET_DATE_RANGE_SCRIPT,
            [self.DATE_FROM_INPUT, from_value, self.DATE_TO_INPUT, to_value],
        )
        logger.debug(f"Date filter set: {from_value} .. {to_value}")

    @allure.step("Reset transactions")
    async def reset_filters(self) -> None:
        await self.click(self.reset_button)

    @allure.step("Back to account")
    async def back_to_account(self) -> None:
        await self.click(self.back_button)

    async def has_no_transactions(self) -> bool:
        return await self.is_visible(self.no_data_message)

    async def get_no_data_message(self) -> str:
        """Return the "no data" notice, or an empty string when not shown."""
        if await self.has_no_transactions():
            return await self.get_text(self.no_data_message)
        return ""


def _iso_day(value: DateLike) -> str:
    if isinstance(value, date):
        return value.isoformat()[:10]
    return value


__all__ = [
    "TransactionDetails",
    "TransactionsPage",
]
