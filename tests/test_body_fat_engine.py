"""
Unit tests for the U.S. Navy body-fat engine.

Covers both formulas, clamping, classification and the measurement
combinations the formula is not defined for.
"""

import pytest

from core.exceptions import DomainError, HipMeasurementRequiredError, ValidationError
from schemas.calculator_schema import BodyFatInput
from services.body_fat_engine import (
    MAX_BODY_FAT,
    MIN_BODY_FAT,
    classify_body_fat,
    compute_body_fat,
    navy_body_fat,
)
from services.messages import BODY_FAT_MESSAGES


def _measurements(**overrides):
    data = {
        "gender": "male",
        "age": 30,
        "height": 180,
        "weight": 80,
        "neck": 38,
        "waist": 85,
    }
    data.update(overrides)
    return BodyFatInput(**data)


class TestNavyFormula:
    """Raw formula values for realistic measurements."""

    def test_male_reference(self):
        result = compute_body_fat(_measurements())
        assert MIN_BODY_FAT <= result.body_fat <= MAX_BODY_FAT
        assert result.body_fat == pytest.approx(16.1, abs=0.15)
        assert result.category == "fitness"
        assert result.category == classify_body_fat("male", navy_body_fat(_measurements()))
        assert result.message == BODY_FAT_MESSAGES["fitness"]
        assert result.clamped is False

    def test_female_reference(self):
        result = compute_body_fat(_measurements(gender="female", height=165, weight=60, neck=35, waist=75, hip=95))
        assert result.body_fat == pytest.approx(25.9, abs=0.15)
        assert result.category == "fitness"
        assert result.clamped is False

    def test_male_ignores_hip(self):
        with_hip = compute_body_fat(_measurements(hip=100))
        without_hip = compute_body_fat(_measurements())
        assert with_hip == without_hip

    def test_result_has_one_decimal(self):
        result = compute_body_fat(_measurements())
        assert result.body_fat == round(result.body_fat, 1)

    def test_idempotent(self):
        data = _measurements(neck=41.3, waist=97.2)
        assert compute_body_fat(data) == compute_body_fat(data)


class TestClamping:
    """Results outside 3-45% are clipped but keep their raw category."""

    def test_low_estimate_is_clamped_to_minimum(self):
        data = _measurements(height=200, neck=39, waist=40)
        assert navy_body_fat(data) < MIN_BODY_FAT
        result = compute_body_fat(data)
        assert result.body_fat == MIN_BODY_FAT
        assert result.category == "essential"
        assert result.clamped is True

    def test_high_estimate_is_clamped_to_maximum(self):
        data = _measurements(height=50, neck=20, waist=200)
        assert navy_body_fat(data) > MAX_BODY_FAT
        result = compute_body_fat(data)
        assert result.body_fat == MAX_BODY_FAT
        assert result.category == "average"
        assert result.clamped is True


class TestClassification:

    @pytest.mark.parametrize("body_fat,category", [
        (5.99, "essential"),
        (6, "athletic"),
        (13.99, "athletic"),
        (14, "fitness"),
        (24.99, "fitness"),
        (25, "average"),
    ])
    def test_male_thresholds(self, body_fat, category):
        assert classify_body_fat("male", body_fat) == category

    @pytest.mark.parametrize("body_fat,category", [
        (15.99, "essential"),
        (16, "athletic"),
        (23.99, "athletic"),
        (24, "fitness"),
        (31.99, "fitness"),
        (32, "average"),
    ])
    def test_female_thresholds(self, body_fat, category):
        assert classify_body_fat("female", body_fat) == category

    @pytest.mark.parametrize("neck,waist", [(20, 45), (30, 70), (38, 85), (40, 120), (45, 200)])
    def test_category_is_always_documented(self, neck, waist):
        result = compute_body_fat(_measurements(neck=neck, waist=waist))
        assert result.category in BODY_FAT_MESSAGES
        assert not result.message.startswith("Invalid")


class TestFemaleHipRule:

    @pytest.mark.parametrize("hip", [None, 0, -10, float("nan")])
    def test_missing_or_non_positive_hip_is_rejected(self, hip):
        data = _measurements(gender="female", height=165, neck=35, waist=75, hip=hip)
        with pytest.raises(HipMeasurementRequiredError) as exc_info:
            compute_body_fat(data)
        exc = exc_info.value
        assert exc.message == "Hip measurement is required for females"
        assert exc.violations[0]["constraint"] == "required_for_female"

    def test_hip_error_is_a_validation_error_distinct_from_range_failures(self):
        assert issubclass(HipMeasurementRequiredError, ValidationError)
        assert not issubclass(HipMeasurementRequiredError, DomainError)


class TestUndefinedMeasurements:
    """Combinations that are in range field by field but break the logarithm."""

    def test_male_neck_larger_than_waist(self):
        with pytest.raises(DomainError) as exc_info:
            compute_body_fat(_measurements(neck=80, waist=40))
        assert exc_info.value.message == "Invalid measurement combination"
        assert exc_info.value.status_code == 422
        assert exc_info.value.details["circumference"] == -40

    def test_male_neck_equal_to_waist(self):
        with pytest.raises(DomainError):
            compute_body_fat(_measurements(neck=50, waist=50))

    def test_female_neck_larger_than_waist_plus_hip(self):
        with pytest.raises(DomainError):
            compute_body_fat(_measurements(gender="female", neck=80, waist=40, hip=1))

    def test_female_extreme_hip_breaks_denominator(self):
        with pytest.raises(DomainError):
            compute_body_fat(_measurements(gender="female", height=165, neck=20, waist=40, hip=1e7))
