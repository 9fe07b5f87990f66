"""Typed, immutable records consumed and produced by the calculator core.

Input records are strict: numbers must already be numbers. Turning form or
query-string text into numbers is the job of the wire schemas in
`schemas.request_schema`, not of these records.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Gender = Literal["male", "female"]
Goal = Literal["lose", "maintain", "gain"]
BmiCategory = Literal["underweight", "normal", "overweight", "obese"]
BodyFatCategory = Literal["essential", "athletic", "fitness", "average"]

HEIGHT_RANGE = (50, 300)
WEIGHT_RANGE = (20, 500)
AGE_RANGE = (15, 100)
ACTIVITY_RANGE = (1.2, 1.9)
NECK_RANGE = (20, 80)
WAIST_RANGE = (40, 200)


class _InputRecord(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")


class _ResultRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class BmiInput(_InputRecord):
    """Height and weight for a BMI calculation."""

    height: float = Field(..., ge=HEIGHT_RANGE[0], le=HEIGHT_RANGE[1], allow_inf_nan=False, description="Height in centimeters (50-300)")
    weight: float = Field(..., ge=WEIGHT_RANGE[0], le=WEIGHT_RANGE[1], allow_inf_nan=False, description="Weight in kilograms (20-500)")


class BmiResult(_ResultRecord):
    bmi: float
    category: BmiCategory
    message: str


class EnergyInput(_InputRecord):
    """Profile for a daily energy / macro calculation."""

    gender: Gender
    age: int = Field(..., ge=AGE_RANGE[0], le=AGE_RANGE[1], description="Age in years (15-100)")
    height: float = Field(..., ge=HEIGHT_RANGE[0], le=HEIGHT_RANGE[1], allow_inf_nan=False, description="Height in centimeters (50-300)")
    weight: float = Field(..., ge=WEIGHT_RANGE[0], le=WEIGHT_RANGE[1], allow_inf_nan=False, description="Weight in kilograms (20-500)")
    activity_level: float = Field(..., ge=ACTIVITY_RANGE[0], le=ACTIVITY_RANGE[1], allow_inf_nan=False, description="Activity multiplier (1.2-1.9)")
    goal: Goal


class Macros(_ResultRecord):
    """Daily macronutrient targets in grams."""

    protein: int
    carbs: int
    fats: int


class EnergyResult(_ResultRecord):
    calories: int
    macros: Macros


class BodyFatInput(_InputRecord):
    """Circumference measurements for the U.S. Navy body-fat method.

    `hip` is optional here; whether it is required depends on gender and is
    checked by the body-fat engine.
    """

    gender: Gender
    age: int = Field(..., ge=AGE_RANGE[0], le=AGE_RANGE[1], description="Age in years (15-100)")
    height: float = Field(..., ge=HEIGHT_RANGE[0], le=HEIGHT_RANGE[1], allow_inf_nan=False, description="Height in centimeters (50-300)")
    weight: float = Field(..., ge=WEIGHT_RANGE[0], le=WEIGHT_RANGE[1], allow_inf_nan=False, description="Weight in kilograms (20-500)")
    neck: float = Field(..., ge=NECK_RANGE[0], le=NECK_RANGE[1], allow_inf_nan=False, description="Neck circumference in centimeters (20-80)")
    waist: float = Field(..., ge=WAIST_RANGE[0], le=WAIST_RANGE[1], allow_inf_nan=False, description="Waist circumference in centimeters (40-200)")
    hip: Optional[float] = Field(None, description="Hip circumference in centimeters, required for females")


class BodyFatResult(_ResultRecord):
    body_fat: float = Field(..., alias="bodyFat")
    category: BodyFatCategory
    message: str
    clamped: bool = Field(False, description="True when the raw estimate fell outside 3-45% and was clipped")
