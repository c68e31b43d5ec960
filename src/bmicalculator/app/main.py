"""
Run with: python -m bmicalculator
"""
from __future__ import annotations

import sys

from bmicalculator import config
from bmicalculator.app.application import create_app
from bmicalculator.app.ui.main_window import MainWindow
from bmicalculator.logging_config import setup_logging


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)
    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
