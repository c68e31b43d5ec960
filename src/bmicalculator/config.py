"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps window geometry, logging defaults and label styling
   out of the widget code.
2. Consistency: The panels and the main window read the same values, so the
   look of the form is changed in one place.

Exports:
    WINDOW_SIZE (tuple[int, int]): Initial main window size in pixels.
    LOG_LEVEL (int): Level passed to `setup_logging` at startup.
    LOG_FILE (str | None): Optional log file path.
    ERROR_STYLE (str): Stylesheet of the validation error label.
    RESULT_VALUE_STYLE (str): Stylesheet of the BMI value label.
    RESULT_CATEGORY_STYLE (str): Stylesheet of the category label.
"""
import logging
from typing import Optional

WINDOW_SIZE: tuple[int, int] = (420, 460)

LOG_LEVEL: int = logging.INFO
LOG_FILE: Optional[str] = None

ERROR_STYLE: str = "color: #ef4444; font-weight: 600;"
RESULT_VALUE_STYLE: str = "font-size: 32pt; font-weight: 700;"
RESULT_CATEGORY_STYLE: str = "font-size: 13pt; color: #4b5563;"
TITLE_STYLE: str = "font-size: 20pt; font-weight: 700;"
DESCRIPTION_STYLE: str = "color: #4b5563;"
