"""Shared test fixtures."""

import itertools
from collections.abc import Callable

import pytest

from daily_macros.config import Settings
from daily_macros.containers import AppContainer
from daily_macros.domain.meals import MealStore
from daily_macros.services.meal_store import create_store
from daily_macros.services.tracker import TrackerService


def counter_ids(prefix: str = "ing") -> Callable[[], str]:
    """Return an id factory yielding ing-1, ing-2, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        meal_names=("Breakfast", "Lunch", "Snack", "Dinner"),
        default_sex="male",
        goal_calories=2000,
        goal_protein=150,
        goal_carbs=250,
        goal_fat=65,
        goal_fiber=30,
        environment="test",
    )


@pytest.fixture
def store(settings: Settings) -> MealStore:
    return create_store(settings.meal_names)


@pytest.fixture
def tracker_service(settings: Settings) -> TrackerService:
    tracker = TrackerService.from_settings(settings)
    tracker.id_factory = counter_ids()
    return tracker


@pytest.fixture
def container(settings: Settings, tracker_service: TrackerService) -> AppContainer:
    return AppContainer(settings=settings, tracker_service=tracker_service)
