"""Pydantic schema package for calculator records and API payloads."""

from .calculator_schema import (
    BmiInput,
    BmiResult,
    EnergyInput,
    EnergyResult,
    Macros,
    BodyFatInput,
    BodyFatResult,
)
from .request_schema import BmiRequest, CalorieRequest, BodyFatRequest
from .history_schema import CalculationRecord, CalculationHistoryResponse
from .video_schema import WorkoutVideoDetail, VideoListResponse, VideoResponse

__all__ = [
    "BmiInput",
    "BmiResult",
    "EnergyInput",
    "EnergyResult",
    "Macros",
    "BodyFatInput",
    "BodyFatResult",
    "BmiRequest",
    "CalorieRequest",
    "BodyFatRequest",
    "CalculationRecord",
    "CalculationHistoryResponse",
    "WorkoutVideoDetail",
    "VideoListResponse",
    "VideoResponse",
]
