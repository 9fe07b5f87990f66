"""Body Mass Index calculation and classification."""

from core.logger import get_logger
from schemas.calculator_schema import BmiInput, BmiResult
from services.messages import bmi_message
from services.rounding import round_half_up

logger = get_logger("services.bmi_engine")

UNDERWEIGHT_BELOW = 18.5
OVERWEIGHT_FROM = 25.0
OBESE_FROM = 30.0


def body_mass_index(height_cm: float, weight_kg: float) -> float:
    """Return the unrounded BMI for a height in cm and weight in kg."""
    h_m = height_cm / 100.0
    return weight_kg / (h_m * h_m)


def classify_bmi(bmi: float) -> str:
    if bmi < UNDERWEIGHT_BELOW:
        return "underweight"
    if bmi < OVERWEIGHT_FROM:
        return "normal"
    if bmi < OBESE_FROM:
        return "overweight"
    return "obese"


def compute_bmi(data: BmiInput) -> BmiResult:
    """Compute BMI for an already validated input.

    The category comes from the unrounded value, so a BMI of 24.96 is shown
    as 25.0 but still classified as "normal".
    """
    bmi = body_mass_index(data.height, data.weight)
    category = classify_bmi(bmi)
    logger.debug("BMI calculated: %s (%s)", bmi, category)
    return BmiResult(
        bmi=round_half_up(bmi, 1),
        category=category,
        message=bmi_message(category),
    )
