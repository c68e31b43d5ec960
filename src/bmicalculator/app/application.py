from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import logging
import sys
import os

ORG_ID = "bmicalculator"
APP_ID = "bmi-calculator"

VISIBLE_APP_NAME = "BMI Calculator"

logger = logging.getLogger(__name__)


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(sys.argv if argv is None else argv)

    # Set the visible, translatable display name
    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    logger.info(f"Qt application created ({QApplication.platformName()}).")
    return app
