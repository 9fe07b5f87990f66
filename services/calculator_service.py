"""Calculator service used by the API layer.

Wraps the validator and the three engines behind one object: raw mapping in,
typed result out. Validation failures are raised as `ValidationError` with
every violated field; body-fat domain failures propagate as `DomainError`.
"""

from typing import Any, Mapping

from core.logger import get_logger
from schemas.calculator_schema import BmiResult, BodyFatResult, EnergyResult
from services.bmi_engine import compute_bmi
from services.body_fat_engine import compute_body_fat
from services.energy_engine import compute_energy
from services.validator import validate_bmi, validate_body_fat, validate_energy

logger = get_logger("services.calculator_service")


class CalculatorService:
    """Class-based calculator facade used across the app."""

    def calculate_bmi(self, raw: Mapping[str, Any]) -> BmiResult:
        """Validate `raw` as BMI input and compute the result.

        Raises:
            ValidationError: If height or weight is missing or out of range.
        """
        data = validate_bmi(raw).unwrap()
        result = compute_bmi(data)
        logger.debug("BMI result: %s", result)
        return result

    def calculate_energy(self, raw: Mapping[str, Any]) -> EnergyResult:
        """Validate `raw` as an energy profile and compute calories and macros.

        Raises:
            ValidationError: If any profile field is missing, mistyped or out of range.
        """
        data = validate_energy(raw).unwrap()
        result = compute_energy(data)
        logger.debug("Energy result for goal %s: %s", data.goal, result)
        return result

    def calculate_body_fat(self, raw: Mapping[str, Any]) -> BodyFatResult:
        """Validate `raw` as body measurements and compute the Navy estimate.

        Raises:
            ValidationError: If a field is missing, mistyped or out of range.
            HipMeasurementRequiredError: If a female profile has no positive hip.
            DomainError: If the measurements are undefined for the formula.
        """
        data = validate_body_fat(raw).unwrap()
        result = compute_body_fat(data)
        logger.debug("Body fat result: %s", result)
        return result


# export singleton
calculator_service = CalculatorService()
__all__ = ["CalculatorService", "calculator_service"]
