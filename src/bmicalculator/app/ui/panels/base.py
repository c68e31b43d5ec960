from __future__ import annotations

from PySide6.QtWidgets import QWidget

from bmicalculator.app.state import Store


class BasePanel(QWidget):
    """Base class for form panels. Holds a reference to the widget's store."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
