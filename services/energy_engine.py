"""Daily energy needs and macronutrient split.

BMR follows Mifflin-St Jeor, TDEE scales it by the activity multiplier and the
goal shifts it by a fixed 500 kcal. Macros: 2 g protein per kg bodyweight,
25% of calories from fat, carbohydrates take the remainder.

There is no minimum calorie floor, and carbohydrate grams are not clamped:
an extreme "lose" profile can produce a negative carbs figure, which is
returned as-is.
"""

from typing import Dict

from core.logger import get_logger
from schemas.calculator_schema import EnergyInput, EnergyResult, Macros
from services.rounding import round_to_int

logger = get_logger("services.energy_engine")

GOAL_ADJUSTMENT = {
    "lose": -500.0,
    "maintain": 0.0,
    "gain": 500.0,
}

PROTEIN_G_PER_KG = 2.0
FAT_CALORIE_SHARE = 0.25
KCAL_PER_G_PROTEIN = 4.0
KCAL_PER_G_CARBS = 4.0
KCAL_PER_G_FAT = 9.0


def basal_metabolic_rate(gender: str, age: int, height_cm: float, weight_kg: float) -> float:
    """Mifflin-St Jeor BMR in kcal/day."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if gender == "male":
        return base + 5
    return base - 161


def total_daily_energy_expenditure(bmr: float, activity_level: float) -> float:
    return bmr * activity_level


def goal_adjusted_calories(tdee: float, goal: str) -> float:
    return tdee + GOAL_ADJUSTMENT[goal]


def macro_split(calories: float, weight_kg: float) -> Dict[str, float]:
    """Unrounded grams of protein, fats and carbs for a calorie target."""
    protein_g = weight_kg * PROTEIN_G_PER_KG
    fats_g = calories * FAT_CALORIE_SHARE / KCAL_PER_G_FAT
    carbs_g = (calories - protein_g * KCAL_PER_G_PROTEIN - fats_g * KCAL_PER_G_FAT) / KCAL_PER_G_CARBS
    return {"protein": protein_g, "carbs": carbs_g, "fats": fats_g}


def compute_energy(data: EnergyInput) -> EnergyResult:
    """Compute the calorie target and macro split for a validated profile.

    Each figure is rounded on its own, so the rounded macros may not add up
    to the rounded calories exactly.
    """
    bmr = basal_metabolic_rate(data.gender, data.age, data.height, data.weight)
    tdee = total_daily_energy_expenditure(bmr, data.activity_level)
    calories = goal_adjusted_calories(tdee, data.goal)
    macros = macro_split(calories, data.weight)
    logger.debug("BMR=%s TDEE=%s target=%s macros=%s", bmr, tdee, calories, macros)
    if macros["carbs"] < 0:
        logger.info("Carbohydrate target is negative (%s g) for goal %s", macros["carbs"], data.goal)

    return EnergyResult(
        calories=round_to_int(calories),
        macros=Macros(
            protein=round_to_int(macros["protein"]),
            carbs=round_to_int(macros["carbs"]),
            fats=round_to_int(macros["fats"]),
        ),
    )
