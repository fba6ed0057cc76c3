"""Daily goals defaults and field-level updates."""

import logging
from collections.abc import Mapping
from dataclasses import replace

from daily_macros.config import Settings
from daily_macros.domain.goals import Goals, Sex

logger = logging.getLogger(__name__)

GOAL_FIELDS = frozenset({"sex", "calories", "protein", "carbs", "fat", "fiber"})


def default_goals(settings: Settings) -> Goals:
    """Return the configured starting goals."""
    return Goals(
        sex=Sex(settings.default_sex),
        calories=settings.goal_calories,
        protein=settings.goal_protein,
        carbs=settings.goal_carbs,
        fat=settings.goal_fat,
        fiber=settings.goal_fiber,
    )


def update_goals(goals: Goals, updates: Mapping[str, object]) -> Goals:
    """Return goals with the given fields replaced."""
    changes: dict[str, object] = {}
    for key, value in updates.items():
        if key not in GOAL_FIELDS:
            logger.warning("Ignoring unknown goal field %r", key)
            continue
        changes[key] = Sex(value) if key == "sex" else value
    if not changes:
        return goals
    return replace(goals, **changes)
