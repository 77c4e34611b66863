"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the XYZ Bank screens.

Each page class encapsulates:
    - Element locators (fixed selectors, created once per instance)
    - Page-specific actions
    - Verification helpers

Author: Automation Team
License: MIT
================================================================================
"""

from .customer_page import CustomerPage, TRANSACTION_MESSAGE_MISSING
from .login_page import LoginPage
from .manager_page import ManagerPage
from .transactions_page import TransactionDetails, TransactionsPage

__all__ = [
    "CustomerPage",
    "LoginPage",
    "ManagerPage",
    "TransactionDetails",
    "TransactionsPage",
    "TRANSACTION_MESSAGE_MISSING",
]
