"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_MEAL_NAMES = ("Breakfast", "Lunch", "Snack", "Dinner")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    meal_names: tuple[str, ...] = DEFAULT_MEAL_NAMES
    default_sex: str = "male"
    goal_calories: float = 2000
    goal_protein: float = 150
    goal_carbs: float = 250
    goal_fat: float = 65
    goal_fiber: float = 30
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
