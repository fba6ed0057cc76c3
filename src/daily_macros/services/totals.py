"""Nutrient aggregation over the meal store."""

from daily_macros.domain.meals import Ingredient, Meal, MealStore
from daily_macros.domain.nutrition import NutrientTotals


def compute_totals(store: MealStore) -> NutrientTotals:
    """Return the day's totals across every meal.

    Values are not validated: negative or NaN fields flow through the
    arithmetic unchanged.
    """
    total = NutrientTotals()
    for meal in store.meals:
        total = total + compute_meal_totals(meal)
    return total


def compute_meal_totals(meal: Meal) -> NutrientTotals:
    """Return the totals for a single meal."""
    total = NutrientTotals()
    for ingredient in meal.ingredients:
        total = total + compute_ingredient_totals(ingredient)
    return total


def compute_ingredient_totals(ingredient: Ingredient) -> NutrientTotals:
    """Scale an ingredient's per-100-unit values by its amount."""
    amount = ingredient.amount
    return NutrientTotals(
        calories=ingredient.calories * amount / 100,
        protein=ingredient.protein * amount / 100,
        carbs=ingredient.carbs * amount / 100,
        fat=ingredient.fat * amount / 100,
        fiber=ingredient.fiber * amount / 100,
    )
