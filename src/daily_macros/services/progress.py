"""Progress of daily totals against goals."""

import math

from daily_macros.domain.goals import Goals
from daily_macros.domain.nutrition import NutrientProgress, NutrientTotals

# (field, label, unit, decimals) in display order.
_DISPLAY = (
    ("calories", "Calories", "kcal", 0),
    ("protein", "Protein", "g", 1),
    ("carbs", "Carbs", "g", 1),
    ("fat", "Fat", "g", 1),
    ("fiber", "Fiber", "g", 1),
)


def compute_progress(totals: NutrientTotals, goals: Goals) -> list[NutrientProgress]:
    """Return per-nutrient progress with percentages clamped to 100."""
    entries = []
    for nutrient, label, unit, decimals in _DISPLAY:
        consumed = getattr(totals, nutrient)
        goal = getattr(goals, nutrient)
        entries.append(
            NutrientProgress(
                nutrient=nutrient,
                label=label,
                unit=unit,
                consumed=consumed,
                goal=goal,
                percent=progress_percent(consumed, goal),
                display=_format_display(consumed, goal, unit, decimals),
            )
        )
    return entries


def progress_percent(consumed: float, goal: float) -> float:
    """Return consumed as a share of goal, clamped to the 0-100 range."""
    if goal <= 0 or math.isnan(consumed) or math.isnan(goal):
        return 0.0
    return max(0.0, min(100.0, consumed / goal * 100))


def _format_display(consumed: float, goal: float, unit: str, decimals: int) -> str:
    separator = " " if unit == "kcal" else ""
    return f"{consumed:.{decimals}f} / {_format_goal(goal)}{separator}{unit}"


def _format_goal(goal: float) -> str:
    if float(goal).is_integer():
        return str(int(goal))
    return str(goal)
