"""Domain models for daily goals."""

from dataclasses import dataclass
from enum import Enum


class Sex(str, Enum):
    """Sex tag shown on the goals form."""

    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class Goals:
    """User-configured daily nutrient targets."""

    sex: Sex
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float
