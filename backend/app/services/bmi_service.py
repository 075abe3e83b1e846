"""
BMI calculation and classification.

BMI = weight_kg / (height_m)^2, stored with one decimal of precision.
Categories use half-open ranges; a value on a threshold belongs to the
higher category.
"""
import math

from app.utils.enums import BMICategory


UNDERWEIGHT_UPPER = 18.5
NORMAL_UPPER = 25.0
OVERWEIGHT_UPPER = 30.0


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """
    Calculate BMI from weight (kg) and height (cm).

    Args:
        weight_kg: Weight in kilograms, positive
        height_cm: Height in centimeters, positive

    Returns:
        BMI rounded to 1 decimal place

    Examples:
        >>> calculate_bmi(70, 175)
        22.9
        >>> calculate_bmi(100, 175)
        32.7
    """
    if not (math.isfinite(weight_kg) and weight_kg > 0):
        raise ValueError(f"weight must be a positive number, got {weight_kg!r}")
    if not (math.isfinite(height_cm) and height_cm > 0):
        raise ValueError(f"height must be a positive number, got {height_cm!r}")

    height_m = height_cm / 100.0
    return round(weight_kg / (height_m ** 2), 1)


def categorize(bmi: float) -> BMICategory:
    """Map a BMI value to its category"""
    if bmi < UNDERWEIGHT_UPPER:
        return BMICategory.underweight
    if bmi < NORMAL_UPPER:
        return BMICategory.normal
    if bmi < OVERWEIGHT_UPPER:
        return BMICategory.overweight
    return BMICategory.obese
