from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from bmicalculator.model.bmi import (
    CalculationResult,
    InputValidationError,
    RawInput,
    evaluate,
)

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Widget state with signals for panel sync.

    Holds the raw form text and the outcome of the last calculation. At most
    one of `result` and `error` is set at any time.
    """
    result_changed = Signal(object)
    error_changed = Signal(str)

    def __init__(self) -> None:
        super().__init__()
        self._raw = RawInput()
        self._result: CalculationResult | None = None
        self._error: str = ""

    @property
    def raw(self) -> RawInput:
        return self._raw

    @property
    def result(self) -> CalculationResult | None:
        return self._result

    @property
    def error(self) -> str:
        return self._error

    def set_height(self, text: str) -> None:
        self._raw = RawInput(height=text, weight=self._raw.weight)

    def set_weight(self, text: str) -> None:
        self._raw = RawInput(height=self._raw.height, weight=text)

    def calculate(self) -> CalculationResult | None:
        """Evaluate the current input and publish either a result or an error."""
        try:
            result = evaluate(self._raw)
        except InputValidationError as e:
            self._set_outcome(None, e.message)
            return None

        logger.debug(
            f"BMI {result.display_value} ({result.category.label}) "
            f"for height={self._raw.height!r}, weight={self._raw.weight!r}"
        )
        self._set_outcome(result, "")
        return result

    def _set_outcome(self, result: CalculationResult | None, error: str) -> None:
        self._result = result
        self._error = error
        self.error_changed.emit(self._error)
        self.result_changed.emit(self._result)
