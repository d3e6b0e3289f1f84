"""Body measurement helpers: BMI, week anchoring and display formatting.

Weights are pounds and heights are inches throughout.
"""

from datetime import date, datetime, timedelta
from typing import Union

from weightwise.utils.enums import BMICategory

# Imperial BMI conversion factor
BMI_IMPERIAL_FACTOR = 703

BMI_THRESHOLDS = [
    (18.5, BMICategory.underweight),
    (25.0, BMICategory.normal),
    (30.0, BMICategory.overweight),
]

DateLike = Union[date, datetime]


class InvalidMeasurementError(ValueError):
    """Raised when a height or weight is not a positive number."""


def calculate_bmi(weight: float, height: float) -> float:
    """
    Calculate Body Mass Index from imperial units.

    Args:
        weight: Body weight in pounds
        height: Height in inches

    Returns:
        BMI value (weight / height^2 * 703)

    Raises:
        InvalidMeasurementError: If weight or height is not positive
    """
    if height is None or height <= 0:
        raise InvalidMeasurementError(f"Height must be positive, got {height}")
    if weight is None or weight <= 0:
        raise InvalidMeasurementError(f"Weight must be positive, got {weight}")
    return (weight / (height * height)) * BMI_IMPERIAL_FACTOR


def categorize_bmi(bmi: float) -> BMICategory:
    for upper_bound, category in BMI_THRESHOLDS:
        if bmi < upper_bound:
            return category
    return BMICategory.obese


def week_start(value: DateLike) -> DateLike:
    """
    Return the Sunday that begins the calendar week containing `value`.

    Datetimes keep their time of day, so only the date portion is a stable key.
    """
    # date.weekday() is Monday=0 ... Sunday=6
    days_since_sunday = (value.weekday() + 1) % 7
    return value - timedelta(days=days_since_sunday)


def format_weight(weight: float) -> str:
    return f"{weight:.1f} lbs"


def format_date(value: DateLike) -> str:
    """Long US date, e.g. 'October 19, 2026'."""
    return f"{value:%B} {value.day}, {value.year}"


def format_short_date(value: DateLike) -> str:
    """Chart axis label, e.g. 'Oct 19'."""
    return f"{value:%b} {value.day}"
