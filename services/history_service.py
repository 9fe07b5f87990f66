"""Per-user calculation history.

The calculator core never touches storage; the API layer hands finished
results to this module when the request names a user.
"""

import json
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from core.exceptions import ValidationError
from core.logger import get_logger
from core.repository import BaseRepository
from database.models import UserCalculation

logger = get_logger("services.history_service")

CALCULATION_TYPES = ("bmi", "calories", "bodyfat")


class CalculationRepository(BaseRepository[UserCalculation]):
    """Repository for `UserCalculation` rows."""

    def __init__(self, session: Session):
        super().__init__(UserCalculation, session)

    def for_user(self, user_id: str, calc_type: Optional[str] = None) -> List[UserCalculation]:
        q = self.query().filter(UserCalculation.user_id == user_id)
        if calc_type:
            q = q.filter(UserCalculation.type == calc_type)
        return q.order_by(UserCalculation.date.desc(), UserCalculation.id.desc()).all()


def _check_type(calc_type: str) -> None:
    if calc_type not in CALCULATION_TYPES:
        raise ValidationError(
            f"Unknown calculation type '{calc_type}'",
            field="type",
            violations=[{
                "field": "type",
                "constraint": "enum",
                "message": f"Type must be one of {', '.join(CALCULATION_TYPES)}",
            }],
        )


def record_calculation(
    db: Session,
    user_id: str,
    calc_type: str,
    value: Any,
    details: Dict[str, Any],
) -> UserCalculation:
    """Persist one calculation for a user.

    Args:
        db: Write session.
        user_id: Opaque user identifier supplied by the caller.
        calc_type: One of ``bmi``, ``calories`` or ``bodyfat``.
        value: Headline number; stored as text.
        details: Inputs and result fields; stored as JSON.

    Returns:
        The stored `UserCalculation` row.
    """
    _check_type(calc_type)
    row = CalculationRepository(db).create(UserCalculation(
        user_id=user_id,
        type=calc_type,
        value=str(value),
        details=json.dumps(details),
    ))
    logger.info("Recorded %s calculation for user=%s (id=%s)", calc_type, user_id, row.id)
    return row


def list_calculations(db: Session, user_id: str, calc_type: Optional[str] = None) -> List[UserCalculation]:
    """Return a user's calculations newest first, optionally of one type."""
    if calc_type:
        _check_type(calc_type)
    return CalculationRepository(db).for_user(user_id, calc_type)


def calculation_to_dict(row: UserCalculation) -> Dict[str, Any]:
    return {
        "id": row.id,
        "user_id": row.user_id,
        "type": row.type,
        "value": row.value,
        "details": json.loads(row.details) if row.details else {},
        "date": row.date.isoformat(),
    }
