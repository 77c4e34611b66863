"""
================================================================================
Banking Test Data
================================================================================

Static tables for the UI scenarios: customers, currencies, transaction
amounts and expected messages. Each call to `load_test_data` returns a fresh
copy, so a test cannot change what the next one reads.

================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


DATA_FILE = Path(__file__).parent / "banking_data.yaml"


def load_test_data(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load the banking test data tables.

    Args:
        path: Alternative YAML file (defaults to ``banking_data.yaml``)

    Returns:
        Nested dict of the data tables
    """
    path = path or DATA_FILE
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    logger.debug(f"Loaded test data from {path}")
    return data


__all__ = [
    "DATA_FILE",
    "load_test_data",
]
