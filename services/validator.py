"""Smart constructors for calculator input records.

Each ``validate_*`` function takes an untyped mapping and returns a
`ValidationResult`: either the typed, range-checked record or the full list
of violated field constraints. Bad input never raises here; callers decide
whether to turn a failure into an exception with `ValidationResult.unwrap`.
"""

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Tuple, Type, TypeVar

import pydantic

from core.exceptions import ValidationError
from core.logger import get_logger
from schemas.calculator_schema import BmiInput, BodyFatInput, EnergyInput

logger = get_logger("services.validator")

T = TypeVar("T", bound=pydantic.BaseModel)

# pydantic error type -> constraint kind reported to callers
_CONSTRAINT_KINDS = {
    "missing": "required",
    "greater_than_equal": "min",
    "greater_than": "min",
    "less_than_equal": "max",
    "less_than": "max",
    "literal_error": "enum",
    "enum": "enum",
    "finite_number": "type",
}


@dataclass(frozen=True)
class FieldViolation:
    """One failed constraint on one input field."""

    field: str
    constraint: str
    message: str

    def as_dict(self) -> dict:
        return {"field": self.field, "constraint": self.constraint, "message": self.message}


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Tagged outcome of a smart constructor.

    Exactly one of `value` (on success) or `violations` (on failure) is
    meaningful; check `ok` first.
    """

    value: Optional[T] = None
    violations: Tuple[FieldViolation, ...] = ()

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.violations

    def unwrap(self) -> T:
        """Return the record, or raise `ValidationError` listing every violation."""
        if self.ok:
            return self.value
        raise ValidationError(
            "Validation failed",
            violations=[v.as_dict() for v in self.violations],
        )


def _violation_from_error(error: dict) -> FieldViolation:
    loc = ".".join(str(part) for part in error.get("loc", ()))
    kind = error.get("type", "")
    constraint = _CONSTRAINT_KINDS.get(kind)
    if constraint is None:
        constraint = "type" if kind.endswith("_type") or kind.endswith("_parsing") else kind
    return FieldViolation(field=loc, constraint=constraint, message=error.get("msg", ""))


def _validate(schema: Type[T], raw: Any) -> ValidationResult[T]:
    try:
        record = schema.model_validate(raw)
    except pydantic.ValidationError as exc:
        result = ValidationResult(violations=tuple(_violation_from_error(err) for err in exc.errors()))
        logger.debug("%s rejected: %s", schema.__name__, violated_fields(result))
        return result
    return ValidationResult(value=record)


def validate_bmi(raw: Any) -> ValidationResult[BmiInput]:
    return _validate(BmiInput, raw)


def validate_energy(raw: Any) -> ValidationResult[EnergyInput]:
    return _validate(EnergyInput, raw)


def validate_body_fat(raw: Any) -> ValidationResult[BodyFatInput]:
    """Validate body-fat input field by field.

    The female hip requirement spans two fields and is left to the body-fat
    engine.
    """
    return _validate(BodyFatInput, raw)


def violated_fields(result: ValidationResult) -> List[str]:
    """Names of the fields that failed, in the order they were reported."""
    return [v.field for v in result.violations]
