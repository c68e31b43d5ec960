from bmicalculator.model.bmi import (
    BmiCategory,
    CalculationResult,
    InputValidationError,
    InvalidHeightError,
    InvalidWeightError,
    MissingInputError,
    RawInput,
    classify,
    compute_bmi,
    evaluate,
    format_bmi,
)

__all__ = [
    "BmiCategory",
    "CalculationResult",
    "InputValidationError",
    "InvalidHeightError",
    "InvalidWeightError",
    "MissingInputError",
    "RawInput",
    "classify",
    "compute_bmi",
    "evaluate",
    "format_bmi",
]
