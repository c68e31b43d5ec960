from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel, QFrame

from bmicalculator import config
from bmicalculator.app.application import VISIBLE_APP_NAME
from bmicalculator.app.state import Store
from bmicalculator.app.ui.panels.bmi import BmiPanel


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(self.tr(VISIBLE_APP_NAME))
        self.resize(*config.WINDOW_SIZE)

        # One store per window
        self.store = store if store is not None else Store()

        # ---- Central: card with header + form ----
        central = QWidget(self)
        outer = QVBoxLayout(central)
        outer.setContentsMargins(24, 24, 24, 24)

        card = QFrame(central)
        card.setFrameShape(QFrame.Shape.StyledPanel)
        outer.addWidget(card)

        v = QVBoxLayout(card)
        v.setContentsMargins(16, 16, 16, 16)

        self.title_label = QLabel(self.tr("BMI Calculator"), card)
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.title_label.setStyleSheet(config.TITLE_STYLE)
        v.addWidget(self.title_label)

        self.description_label = QLabel(
            self.tr("Enter your height and weight to calculate your BMI."), card
        )
        self.description_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(config.DESCRIPTION_STYLE)
        v.addWidget(self.description_label)

        self.panel = BmiPanel(self.store, parent=card)
        v.addWidget(self.panel, 1)

        self.setCentralWidget(central)
