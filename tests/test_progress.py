"""Tests for progress against goals."""

import math

from daily_macros.domain.goals import Goals, Sex
from daily_macros.domain.nutrition import NutrientTotals
from daily_macros.services.progress import compute_progress, progress_percent

GOALS = Goals(sex=Sex.MALE, calories=2000, protein=150, carbs=250, fat=65, fiber=30)


def test_progress_lists_nutrients_in_display_order() -> None:
    progress = compute_progress(NutrientTotals(), GOALS)

    assert [entry.nutrient for entry in progress] == [
        "calories",
        "protein",
        "carbs",
        "fat",
        "fiber",
    ]
    assert [entry.unit for entry in progress] == ["kcal", "g", "g", "g", "g"]


def test_progress_formats_like_the_form() -> None:
    totals = NutrientTotals(calories=525, protein=12.5, carbs=100, fat=3.25, fiber=0)

    progress = {entry.nutrient: entry for entry in compute_progress(totals, GOALS)}

    assert progress["calories"].display == "525 / 2000 kcal"
    assert progress["protein"].display == "12.5 / 150g"
    assert math.isclose(progress["carbs"].percent, 40)
    assert math.isclose(progress["calories"].percent, 26.25)


def test_progress_percent_clamps_to_hundred() -> None:
    assert progress_percent(3000, 2000) == 100


def test_progress_percent_handles_zero_goal() -> None:
    assert progress_percent(50, 0) == 0


def test_progress_percent_handles_nan_consumed() -> None:
    totals = NutrientTotals(calories=float("nan"))

    calories = compute_progress(totals, GOALS)[0]

    assert calories.percent == 0
    assert math.isnan(calories.consumed)
