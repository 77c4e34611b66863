"""
================================================================================
Bank Test Tools
================================================================================

Shared infrastructure for the XYZ Bank UI automation suite.

Modules:
    - common: Configuration loading and loguru logger setup
    - report_tools: Allure attachment helpers

Example:
    from bank_tools.common import get_config, init_logger

    init_logger()
    base_url = get_config("ui.base_url")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
