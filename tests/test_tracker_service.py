"""Tests for the tracker service."""

import pytest

from daily_macros.domain.goals import Sex
from daily_macros.domain.meals import Unit
from daily_macros.services.tracker import TrackerService


def test_add_ingredient_returns_new_entry(tracker_service: TrackerService) -> None:
    ingredient = tracker_service.add_ingredient("1")

    assert ingredient is not None
    assert ingredient.id == "ing-1"
    assert tracker_service.store.get_meal("1").ingredients == (ingredient,)


def test_add_ingredient_unknown_meal_returns_none(
    tracker_service: TrackerService,
) -> None:
    before = tracker_service.store

    assert tracker_service.add_ingredient("bogus") is None
    assert tracker_service.store is before


def test_totals_follow_every_edit(tracker_service: TrackerService) -> None:
    rice = tracker_service.add_ingredient("2")
    chicken = tracker_service.add_ingredient("2")
    tracker_service.update_ingredient(
        "2", rice.id, {"name": "Rice", "amount": 150, "calories": 130}
    )
    tracker_service.update_ingredient(
        "2", chicken.id, {"name": "Chicken", "amount": 200, "calories": 165}
    )

    assert tracker_service.totals().calories == 525
    assert tracker_service.meal_totals()["2"].calories == 525
    assert tracker_service.meal_totals()["1"].calories == 0

    tracker_service.remove_ingredient("2", chicken.id)

    assert tracker_service.totals().calories == 195


def test_update_ingredient_returns_updated_entry(
    tracker_service: TrackerService,
) -> None:
    added = tracker_service.add_ingredient("4")

    updated = tracker_service.update_ingredient("4", added.id, {"unit": "ml"})

    assert updated is not None
    assert updated.unit is Unit.MILLILITERS


def test_update_ingredient_missing_returns_none(
    tracker_service: TrackerService,
) -> None:
    assert tracker_service.update_ingredient("1", "missing", {"amount": 1}) is None


def test_remove_ingredient_reports_missing(tracker_service: TrackerService) -> None:
    assert tracker_service.remove_ingredient("1", "missing") is False


def test_update_goals_keeps_other_targets(tracker_service: TrackerService) -> None:
    goals = tracker_service.update_goals({"sex": "female", "fiber": 25})

    assert goals.sex is Sex.FEMALE
    assert goals.fiber == 25
    assert goals.calories == 2000
    assert tracker_service.goals is goals


def test_update_goals_invalid_sex_leaves_goals(
    tracker_service: TrackerService,
) -> None:
    before = tracker_service.goals

    with pytest.raises(ValueError):
        tracker_service.update_goals({"sex": "unknown"})

    assert tracker_service.goals is before


def test_progress_uses_current_goals(tracker_service: TrackerService) -> None:
    added = tracker_service.add_ingredient("1")
    tracker_service.update_ingredient("1", added.id, {"amount": 100, "calories": 500})
    tracker_service.update_goals({"calories": 1000})

    calories = tracker_service.progress()[0]

    assert calories.percent == 50
    assert calories.display == "500 / 1000 kcal"
