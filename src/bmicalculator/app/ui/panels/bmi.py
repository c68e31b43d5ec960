from __future__ import annotations

from PySide6.QtCore import Qt, Slot, QT_TRANSLATE_NOOP, QCoreApplication
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QLabel, QLineEdit, QPushButton, QSizePolicy,
)

from bmicalculator import config
from bmicalculator.app.state import Store
from bmicalculator.app.ui.panels.base import BasePanel
from bmicalculator.model.bmi import BmiCategory, CalculationResult

# Display text is translated in _show_result().
CATEGORY_LABELS = {
    BmiCategory.UNDERWEIGHT: QT_TRANSLATE_NOOP("BmiCategory", "Underweight"),
    BmiCategory.NORMAL: QT_TRANSLATE_NOOP("BmiCategory", "Normal"),
    BmiCategory.OVERWEIGHT: QT_TRANSLATE_NOOP("BmiCategory", "Overweight"),
    BmiCategory.OBESE: QT_TRANSLATE_NOOP("BmiCategory", "Obese"),
}


class BmiPanel(BasePanel):
    """
    Height/weight form with its output region.

    Top: two labelled inputs, pushed into the Store on every keystroke.
    Below: the Calculate button, then either the error label or the result
    labels. The panel only renders what the Store publishes.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)
        root.setSpacing(12)

        self.grid = QGridLayout()
        self.grid.setVerticalSpacing(8)
        root.addLayout(self.grid)
        self._row = 0

        self.height_edit = self._add_field(self.tr("Height (cm)"), self.tr("Enter your height"))
        self.weight_edit = self._add_field(self.tr("Weight (kg)"), self.tr("Enter your weight"))

        self.calculate_button = QPushButton(self.tr("Calculate"), self)
        self.calculate_button.setDefault(True)
        root.addWidget(self.calculate_button)

        # output region
        self.error_label = QLabel("", self)
        self.error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(config.ERROR_STYLE)
        root.addWidget(self.error_label)

        self.value_label = QLabel("", self)
        self.value_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.value_label.setStyleSheet(config.RESULT_VALUE_STYLE)
        root.addWidget(self.value_label)

        self.category_label = QLabel("", self)
        self.category_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.category_label.setStyleSheet(config.RESULT_CATEGORY_STYLE)
        root.addWidget(self.category_label)

        root.addStretch()

        # wiring
        self.height_edit.textChanged.connect(self.store.set_height)
        self.weight_edit.textChanged.connect(self.store.set_weight)
        self.height_edit.returnPressed.connect(self._on_calculate)
        self.weight_edit.returnPressed.connect(self._on_calculate)
        self.calculate_button.clicked.connect(self._on_calculate)

        self.store.error_changed.connect(self._show_error)
        self.store.result_changed.connect(self._show_result)

        self._show_error(self.store.error)
        self._show_result(self.store.result)

    def _add_field(self, label: str, placeholder: str) -> QLineEdit:
        row = self._row
        self._row += 1
        lab = QLabel(label, self)
        self.grid.addWidget(lab, row, 0)
        w = QLineEdit(self)
        w.setPlaceholderText(placeholder)
        w.setInputMethodHints(Qt.InputMethodHint.ImhFormattedNumbersOnly)
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        lab.setBuddy(w)
        self.grid.addWidget(w, row, 1)
        return w

    @Slot()
    def _on_calculate(self) -> None:
        self.store.calculate()

    @Slot(str)
    def _show_error(self, message: str) -> None:
        self.error_label.setText(message)
        self.error_label.setHidden(not message)

    @Slot(object)
    def _show_result(self, result: CalculationResult | None) -> None:
        if result is None:
            self.value_label.clear()
            self.category_label.clear()
        else:
            self.value_label.setText(result.display_value)
            self.category_label.setText(
                QCoreApplication.translate("BmiCategory", CATEGORY_LABELS[result.category])
            )
        self.value_label.setHidden(result is None)
        self.category_label.setHidden(result is None)
