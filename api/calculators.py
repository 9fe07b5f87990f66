"""Calculator API router.

Each endpoint hands the parsed body to the calculator service and, when the
request carries a `user_id`, records the result in the calculation history.
Nothing is recorded when the calculation fails.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from database.deps import get_db_write
from core.logger import get_logger
from services.calculator_service import calculator_service
from services.history_service import record_calculation
from schemas import (
    BmiRequest,
    BmiResult,
    BodyFatRequest,
    BodyFatResult,
    CalorieRequest,
    EnergyResult,
)

logger = get_logger("api.calculators")
router = APIRouter(prefix="/api/calculators", tags=["calculators"])


@router.post("/bmi", response_model=BmiResult)
def calculate_bmi(payload: BmiRequest, user_id: Optional[str] = None, db: Session = Depends(get_db_write)):
    """Compute BMI, its category and guidance message.

    Raises:
        ValidationError: If height or weight is out of range.
    """
    result = calculator_service.calculate_bmi(payload.model_dump())
    if user_id:
        record_calculation(
            db,
            user_id,
            "bmi",
            result.bmi,
            {"height": payload.height, "weight": payload.weight, "category": result.category},
        )
    return result


@router.post("/calories", response_model=EnergyResult)
def calculate_calories(payload: CalorieRequest, user_id: Optional[str] = None, db: Session = Depends(get_db_write)):
    """Compute the daily calorie target and macro split.

    Raises:
        ValidationError: If any profile field is out of range or not an allowed value.
    """
    result = calculator_service.calculate_energy(payload.model_dump())
    if user_id:
        record_calculation(db, user_id, "calories", result.calories, result.model_dump())
    return result


@router.post("/bodyfat", response_model=BodyFatResult)
def calculate_body_fat(payload: BodyFatRequest, user_id: Optional[str] = None, db: Session = Depends(get_db_write)):
    """Compute body fat percentage with the U.S. Navy method.

    Raises:
        ValidationError: If a measurement is out of range.
        HipMeasurementRequiredError: If gender is female and no hip is given.
        DomainError: If the measurements are undefined for the formula.
    """
    result = calculator_service.calculate_body_fat(payload.model_dump())
    if user_id:
        details = payload.model_dump()
        details["category"] = result.category
        record_calculation(db, user_id, "bodyfat", result.body_fat, details)
    return result
