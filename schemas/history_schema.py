"""Schemas for stored calculation history."""

from pydantic import BaseModel
from typing import Any, Dict, List


class CalculationRecord(BaseModel):
    """One stored calculation as returned to clients."""

    id: int
    user_id: str
    type: str
    value: str
    details: Dict[str, Any]
    date: str


class CalculationHistoryResponse(BaseModel):
    """Response wrapper for a user's calculations, newest first."""

    calculations: List[CalculationRecord]
