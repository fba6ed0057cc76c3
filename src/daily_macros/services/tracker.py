"""In-memory tracker holding the current meals and goals."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from daily_macros.config import Settings
from daily_macros.domain.goals import Goals
from daily_macros.domain.meals import Ingredient, MealStore
from daily_macros.domain.nutrition import NutrientProgress, NutrientTotals
from daily_macros.services import meal_store
from daily_macros.services.goals import default_goals, update_goals
from daily_macros.services.progress import compute_progress
from daily_macros.services.totals import compute_meal_totals, compute_totals

logger = logging.getLogger(__name__)


@dataclass
class TrackerService:
    """Service that owns the current snapshot and applies edits to it."""

    store: MealStore
    goals: Goals
    id_factory: meal_store.IdFactory = meal_store.new_ingredient_id

    @classmethod
    def from_settings(cls, settings: Settings) -> "TrackerService":
        """Create a tracker with the configured meals and default goals."""
        return cls(
            store=meal_store.create_store(settings.meal_names),
            goals=default_goals(settings),
        )

    def add_ingredient(self, meal_id: str) -> Ingredient | None:
        """Add a blank ingredient and return it, or None for an unknown meal."""
        before = self.store.get_meal(meal_id)
        if before is None:
            return None
        self.store = meal_store.add_ingredient(self.store, meal_id, self.id_factory)
        meal = self.store.get_meal(meal_id)
        return meal.ingredients[-1] if meal else None

    def remove_ingredient(self, meal_id: str, ingredient_id: str) -> bool:
        """Remove an ingredient; return False when nothing matched."""
        before = self.store
        self.store = meal_store.remove_ingredient(self.store, meal_id, ingredient_id)
        return self.store is not before

    def update_ingredient(
        self, meal_id: str, ingredient_id: str, updates: Mapping[str, object]
    ) -> Ingredient | None:
        """Apply a partial update and return the ingredient, or None if missing."""
        self.store = meal_store.update_ingredient(
            self.store, meal_id, ingredient_id, updates
        )
        return self.get_ingredient(meal_id, ingredient_id)

    def get_ingredient(self, meal_id: str, ingredient_id: str) -> Ingredient | None:
        """Return an ingredient from the current snapshot."""
        meal = self.store.get_meal(meal_id)
        return meal.get_ingredient(ingredient_id) if meal else None

    def update_goals(self, updates: Mapping[str, object]) -> Goals:
        """Apply field-level goal updates."""
        self.goals = update_goals(self.goals, updates)
        logger.debug("Goals updated: %s", sorted(updates))
        return self.goals

    def totals(self) -> NutrientTotals:
        """Return totals recomputed from the current store."""
        return compute_totals(self.store)

    def meal_totals(self) -> dict[str, NutrientTotals]:
        """Return per-meal subtotals keyed by meal id."""
        return {meal.id: compute_meal_totals(meal) for meal in self.store.meals}

    def progress(self) -> list[NutrientProgress]:
        """Return progress of current totals against goals."""
        return compute_progress(self.totals(), self.goals)
