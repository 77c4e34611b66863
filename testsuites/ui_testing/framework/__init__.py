"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the XYZ Bank application.

Components:
    - page_base: Base page object with one-action primitives
    - browser_manager: Browser lifecycle management
    - banking_contexts: Logged-in customer / manager setup with best-effort logout
    - bank_logger: Leveled logging facade over loguru
    - helpers: Random data, explicit waits, screenshots, alert capture

Author: Automation Team
License: MIT
================================================================================
"""

from .bank_logger import Logger
from .browser_manager import BrowserManager
from .helpers import TestHelper
from .page_base import BasePage, RowIndexError

__all__ = [
    "BasePage",
    "BrowserManager",
    "Logger",
    "RowIndexError",
    "TestHelper",
]
