"""Body fat percentage using the U.S. Navy circumference method.

All measurements are metric (cm) and go into the base-10 log form of the
formula:

    male:   495 / (1.0324 - 0.19077*log10(waist - neck) + 0.15456*log10(height)) - 450
    female: 495 / (1.29579 - 0.35004*log10(waist + hip - neck) + 0.22100*log10(height)) - 450

The displayed value is clamped to 3-45%; the category is taken from the raw
estimate.
"""

import math
from typing import Dict, Tuple

from core.exceptions import DomainError, HipMeasurementRequiredError
from core.logger import get_logger
from schemas.calculator_schema import BodyFatInput, BodyFatResult
from services.messages import body_fat_message
from services.rounding import round_half_up

logger = get_logger("services.body_fat_engine")

MIN_BODY_FAT = 3.0
MAX_BODY_FAT = 45.0

# (essential below, athletic below, fitness below); anything else is "average"
CATEGORY_THRESHOLDS: Dict[str, Tuple[float, float, float]] = {
    "male": (6.0, 14.0, 25.0),
    "female": (16.0, 24.0, 32.0),
}

INVALID_COMBINATION = "Invalid measurement combination"


def _circumference_term(data: BodyFatInput) -> float:
    if data.gender == "female":
        return data.waist + data.hip - data.neck
    return data.waist - data.neck


def _invalid_combination(data: BodyFatInput, circumference: float) -> DomainError:
    details = {"gender": data.gender}
    if math.isfinite(circumference):
        details["circumference"] = round(circumference, 2)
    return DomainError(INVALID_COMBINATION, details=details)


def navy_body_fat(data: BodyFatInput) -> float:
    """Return the raw (unclamped, unrounded) Navy estimate.

    Raises:
        HipMeasurementRequiredError: female input without a positive hip.
        DomainError: the measurements put the formula outside its domain.
    """
    if data.gender == "female" and not (data.hip is not None and data.hip > 0):
        raise HipMeasurementRequiredError()

    circumference = _circumference_term(data)
    if not circumference > 0:
        raise _invalid_combination(data, circumference)

    if data.gender == "male":
        denominator = 1.0324 - 0.19077 * math.log10(circumference) + 0.15456 * math.log10(data.height)
    else:
        denominator = 1.29579 - 0.35004 * math.log10(circumference) + 0.22100 * math.log10(data.height)

    if not denominator > 0:
        raise _invalid_combination(data, circumference)

    body_fat = 495 / denominator - 450
    if not math.isfinite(body_fat):
        raise _invalid_combination(data, circumference)
    return body_fat


def classify_body_fat(gender: str, body_fat: float) -> str:
    essential, athletic, fitness = CATEGORY_THRESHOLDS[gender]
    if body_fat < essential:
        return "essential"
    if body_fat < athletic:
        return "athletic"
    if body_fat < fitness:
        return "fitness"
    return "average"


def compute_body_fat(data: BodyFatInput) -> BodyFatResult:
    raw = navy_body_fat(data)
    category = classify_body_fat(data.gender, raw)
    clamped_value = max(MIN_BODY_FAT, min(MAX_BODY_FAT, raw))
    clamped = clamped_value != raw
    if clamped:
        logger.warning("Body fat estimate %.2f%% clamped to %.1f%%", raw, clamped_value)
    else:
        logger.debug("Body fat calculated: %s (%s)", raw, category)

    return BodyFatResult(
        body_fat=round_half_up(clamped_value, 1),
        category=category,
        message=body_fat_message(category),
        clamped=clamped,
    )
