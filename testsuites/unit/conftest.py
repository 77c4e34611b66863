"""
================================================================================
Unit Test Configuration
================================================================================

Fake Playwright objects for exercising page objects, contexts and helpers
without a browser.

    FakePage.locator(selector)  -> FakeLocator (one per selector, cached)
    FakeLocator async methods   -> AsyncMock, every call written to
                                   FakePage.journal as (action, selector, *args)
    FakePage.fire_dialog(text)  -> runs the handler registered with once()

================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple
from unittest.mock import DEFAULT, AsyncMock, MagicMock

import pytest
from loguru import logger

from bank_tools.common import reset_config


PNG_BYTES = b"\x89PNG\r\n\x1a\n"

LOCATOR_ACTIONS = (
    "click",
    "fill",
    "inner_text",
    "text_content",
    "wait_for",
    "select_option",
    "is_visible",
    "count",
    "all",
)


class FakeLocator:
    """Stand-in for playwright.async_api.Locator."""

    def __init__(self, selector: str, journal: List[Tuple[Any, ...]]):
        self.selector = selector
        self._journal = journal
        self._children: Dict[str, "FakeLocator"] = {}
        for action in LOCATOR_ACTIONS:
            setattr(self, action, AsyncMock(side_effect=self._recorder(action)))
        self.inner_text.return_value = ""
        self.text_content.return_value = None
        self.is_visible.return_value = False
        self.count.return_value = 0
        self.all.return_value = []

    def _recorder(self, action: str) -> Callable:
        async def record(*args, **kwargs):
            self._journal.append((action, self.selector, *args, *kwargs.values()))
            return DEFAULT
        return record

    @property
    def first(self) -> "FakeLocator":
        return self

    def locator(self, selector: str) -> "FakeLocator":
        if selector not in self._children:
            self._children[selector] = FakeLocator(f"{self.selector} >> {selector}", self._journal)
        return self._children[selector]

    def __repr__(self) -> str:
        return f"<FakeLocator selector={self.selector!r}>"


class FakePage:
    """Stand-in for playwright.async_api.Page."""

    def __init__(self, url: str = "about:blank"):
        self.url = url
        self.journal: List[Tuple[Any, ...]] = []
        self._locators: Dict[str, FakeLocator] = {}
        self._once: Dict[str, Callable] = {}
        self.goto = AsyncMock()
        self.evaluate = AsyncMock()
        self.screenshot = AsyncMock(side_effect=self._write_png)
        self.on = MagicMock()

    def locator(self, selector: str) -> FakeLocator:
        if selector not in self._locators:
            self._locators[selector] = FakeLocator(selector, self.journal)
        return self._locators[selector]

    def once(self, event: str, handler: Callable) -> None:
        self._once[event] = handler

    def remove_listener(self, event: str, handler: Callable) -> None:
        if self._once.get(event) is not handler:
            raise KeyError(event)
        del self._once[event]

    def has_listener(self, event: str) -> bool:
        return event in self._once

    async def fire_dialog(self, message: str) -> MagicMock:
        """Deliver a native dialog to the registered one-shot handler."""
        dialog = MagicMock()
        dialog.message = message
        dialog.accept = AsyncMock()
        handler = self._once.pop("dialog")
        await handler(dialog)
        return dialog

    async def _write_png(self, path=None, **kwargs):
        if path:
            Path(path).write_bytes(PNG_BYTES)
        return PNG_BYTES


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Fresh configuration per test, screenshots under tmp_path."""
    monkeypatch.setenv("SCREENSHOT_DIR", str(tmp_path / "screenshots"))
    monkeypatch.delenv("UI_BASE_URL", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
