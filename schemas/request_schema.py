"""Wire schemas for calculator requests.

These only fix the shape of the JSON body and coerce values to numbers
(``"180"`` -> ``180.0``). Ranges and enumerations are checked afterwards by
`services.validator`, which reports every violation at once.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class BmiRequest(BaseModel):
    """Request payload for the BMI calculator."""

    height: float = Field(..., examples=[175.0], description="Height in centimeters (50-300)")
    weight: float = Field(..., examples=[70.0], description="Weight in kilograms (20-500)")


class CalorieRequest(BaseModel):
    """Request payload for the calorie and macro calculator."""

    model_config = ConfigDict(populate_by_name=True)

    gender: str = Field(..., examples=["male"], description="Gender (male/female)")
    age: int = Field(..., examples=[30], description="Age in years (15-100)")
    height: float = Field(..., examples=[180.0], description="Height in centimeters (50-300)")
    weight: float = Field(..., examples=[80.0], description="Weight in kilograms (20-500)")
    activity_level: float = Field(..., alias="activityLevel", examples=[1.55], description="Activity multiplier (1.2-1.9)")
    goal: str = Field(..., examples=["maintain"], description="Goal: lose, maintain, gain")


class BodyFatRequest(BaseModel):
    """Request payload for the U.S. Navy body-fat calculator."""

    gender: str = Field(..., examples=["female"], description="Gender (male/female)")
    age: int = Field(..., examples=[30], description="Age in years (15-100)")
    height: float = Field(..., examples=[165.0], description="Height in centimeters (50-300)")
    weight: float = Field(..., examples=[60.0], description="Weight in kilograms (20-500)")
    neck: float = Field(..., examples=[35.0], description="Neck circumference in centimeters (20-80)")
    waist: float = Field(..., examples=[75.0], description="Waist circumference in centimeters (40-200)")
    hip: Optional[float] = Field(None, examples=[95.0], description="Hip circumference in centimeters, required for females")
