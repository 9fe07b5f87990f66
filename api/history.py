"""Calculation history API router."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from database.deps import get_db_read
from core.logger import get_logger
from services.history_service import calculation_to_dict, list_calculations
from schemas import CalculationHistoryResponse, CalculationRecord

logger = get_logger("api.history")
router = APIRouter(prefix="/api/users", tags=["history"])


@router.get("/{user_id}/calculations", response_model=CalculationHistoryResponse)
def get_user_calculations(
    user_id: str,
    calc_type: Optional[str] = Query(None, alias="type", description="bmi, calories or bodyfat"),
    db: Session = Depends(get_db_read),
):
    """Return a user's stored calculations, newest first.

    Raises:
        ValidationError: If `type` is not a known calculation type.
    """
    rows = list_calculations(db, user_id, calc_type)
    logger.info("Returning %s calculations for user=%s", len(rows), user_id)
    return CalculationHistoryResponse(
        calculations=[CalculationRecord(**calculation_to_dict(r)) for r in rows]
    )
