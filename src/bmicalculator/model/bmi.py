"""
BMI Calculation (Domain Model)
==============================
Pure functions that turn the raw text of the form into a BMI result.

Why is this file needed?
------------------------
1. Validation: It decides whether the two raw input strings are usable and
   raises a typed error carrying the message shown to the user.
2. Calculation: It converts centimeters to meters and applies
   weight / height^2.
3. Classification: It maps the BMI value onto one of four fixed bands.

Nothing here knows about Qt; the Store calls `evaluate()` and the panels only
ever see its outcome.

Classes:
    RawInput: The two unvalidated text fields.
    BmiCategory: The four classification bands.
    CalculationResult: A successful calculation.
    InputValidationError: Base class of the three validation errors.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum

UNDERWEIGHT_LIMIT = 18.5
NORMAL_LIMIT = 25.0
OVERWEIGHT_LIMIT = 30.0

# Plain ASCII decimal or exponent notation, as a numeric form field submits it
_NUMBER_RE = re.compile(r"\s*[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?\s*")


class BmiCategory(Enum):
    """Classification bands. Values are the display labels."""
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"

    @property
    def label(self) -> str:
        return self.value


class InputValidationError(ValueError):
    """Raised when the form input cannot produce a BMI."""
    MESSAGE: str = "Invalid input."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.MESSAGE)

    @property
    def message(self) -> str:
        return str(self)


class MissingInputError(InputValidationError):
    MESSAGE = "Please enter both height and weight."


class InvalidHeightError(InputValidationError):
    MESSAGE = "Height must be a positive number."


class InvalidWeightError(InputValidationError):
    MESSAGE = "Weight must be a positive number."


@dataclass(frozen=True)
class RawInput:
    """Unvalidated text exactly as typed into the form."""
    height: str = ""
    weight: str = ""


@dataclass(frozen=True)
class CalculationResult:
    value: float
    category: BmiCategory

    @property
    def display_value(self) -> str:
        return format_bmi(self.value)


def _parse_number(text: str) -> float | None:
    """Parse text as a finite float, or return None."""
    if _NUMBER_RE.fullmatch(text) is None:
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def compute_bmi(height_cm: float, weight_kg: float) -> float:
    """
    Compute the BMI from a height in centimeters and a weight in kilograms.

    Raises:
        InvalidHeightError: height is not a positive finite number.
        InvalidWeightError: weight is not a positive finite number.
    """
    height_m = height_cm / 100.0
    if not math.isfinite(height_m) or height_m <= 0:
        raise InvalidHeightError()
    if not math.isfinite(weight_kg) or weight_kg <= 0:
        raise InvalidWeightError()

    denominator = height_m * height_m
    # Heights this small square to zero
    if denominator == 0:
        raise InvalidHeightError()
    bmi = weight_kg / denominator
    if not math.isfinite(bmi):
        raise InvalidWeightError()
    return bmi


def classify(bmi: float) -> BmiCategory:
    """Bands are half-open: each lower limit belongs to the next band up."""
    if bmi < UNDERWEIGHT_LIMIT:
        return BmiCategory.UNDERWEIGHT
    if bmi < NORMAL_LIMIT:
        return BmiCategory.NORMAL
    if bmi < OVERWEIGHT_LIMIT:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE


def format_bmi(bmi: float) -> str:
    """Format with one fractional digit, ties rounded away from zero."""
    with localcontext() as ctx:
        # Wide enough for every integer digit of the largest finite float
        ctx.prec = 400
        return str(Decimal(bmi).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def evaluate(raw: RawInput) -> CalculationResult:
    """
    Validate the raw form input and calculate the BMI.

    Checks run in order and stop at the first failure: both fields present,
    height usable, weight usable.

    Raises:
        MissingInputError: either field is the empty string.
        InvalidHeightError: height is unparseable, non-finite or not positive.
        InvalidWeightError: weight is unparseable, non-finite or not positive.
    """
    if not raw.height or not raw.weight:
        raise MissingInputError()

    height_cm = _parse_number(raw.height)
    if height_cm is None or height_cm <= 0:
        raise InvalidHeightError()

    weight_kg = _parse_number(raw.weight)
    if weight_kg is None or weight_kg <= 0:
        raise InvalidWeightError()

    bmi = compute_bmi(height_cm, weight_kg)
    return CalculationResult(value=bmi, category=classify(bmi))
