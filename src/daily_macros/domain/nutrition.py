"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutrientTotals:
    """Aggregated nutrient amounts."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0

    def __add__(self, other: "NutrientTotals") -> "NutrientTotals":
        return NutrientTotals(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
            fiber=self.fiber + other.fiber,
        )


@dataclass(frozen=True)
class NutrientProgress:
    """Consumption of one nutrient against its goal."""

    nutrient: str
    label: str
    unit: str
    consumed: float
    goal: float
    percent: float
    display: str
