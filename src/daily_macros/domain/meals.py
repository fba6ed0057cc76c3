"""Domain models for meals and their ingredients."""

from dataclasses import dataclass, field
from enum import Enum


class Unit(str, Enum):
    """Unit an ingredient amount is measured in."""

    GRAMS = "g"
    MILLILITERS = "ml"


@dataclass(frozen=True)
class Ingredient:
    """A single food entry with per-100-unit nutrient intensities."""

    id: str
    name: str = ""
    amount: float = 0.0
    unit: Unit = Unit.GRAMS
    calories: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbs: float = 0.0
    fiber: float = 0.0


@dataclass(frozen=True)
class Meal:
    """A named, ordered group of ingredients."""

    id: str
    name: str
    ingredients: tuple[Ingredient, ...] = ()

    def get_ingredient(self, ingredient_id: str) -> Ingredient | None:
        """Return the ingredient with the given id, if present."""
        for ingredient in self.ingredients:
            if ingredient.id == ingredient_id:
                return ingredient
        return None


@dataclass(frozen=True)
class MealStore:
    """Ordered collection of the day's meals."""

    meals: tuple[Meal, ...] = field(default_factory=tuple)

    def get_meal(self, meal_id: str) -> Meal | None:
        """Return the meal with the given id, if present."""
        for meal in self.meals:
            if meal.id == meal_id:
                return meal
        return None
