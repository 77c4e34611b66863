"""
================================================================================
Allure Report Utilities
================================================================================

Screenshot attachment shared by the page objects, the test helper and the
pytest failure hook.

================================================================================
"""

from pathlib import Path
from typing import Union

import allure
from loguru import logger


def attach_png(source: Union[bytes, str, Path], name: str = "Screenshot"):
    """
    Attach a PNG image to Allure report.

    Args:
        source: Raw PNG bytes or path to a PNG file
        name: Attachment name
    """
    if isinstance(source, (str, Path)):
        allure.attach.file(
            str(source),
            name=name,
            attachment_type=allure.attachment_type.PNG
        )
    else:
        allure.attach(
            source,
            name=name,
            attachment_type=allure.attachment_type.PNG
        )
    logger.debug(f"Attached screenshot to report: {name}")


__all__ = [
    "attach_png",
]
