"""Request models and input parsing for the tracker form."""

import math

from pydantic import BaseModel, ConfigDict

INGREDIENT_NUMERIC_FIELDS = ("amount", "calories", "protein", "fat", "carbs", "fiber")
GOAL_NUMERIC_FIELDS = ("calories", "protein", "carbs", "fat", "fiber")


def parse_number(value: object) -> float | None:
    """Parse user input into a finite float, or None when it is not a number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


class IngredientUpdateRequest(BaseModel):
    """Partial ingredient edit as submitted by the form."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    amount: float | str | None = None
    unit: str | None = None
    calories: float | str | None = None
    protein: float | str | None = None
    fat: float | str | None = None
    carbs: float | str | None = None
    fiber: float | str | None = None

    def to_updates(self) -> dict[str, object]:
        """Return the fields to apply, dropping unparseable numbers."""
        return _collect_updates(self, INGREDIENT_NUMERIC_FIELDS)


class GoalsUpdateRequest(BaseModel):
    """Partial goals edit as submitted by the form."""

    model_config = ConfigDict(extra="ignore")

    sex: str | None = None
    calories: float | str | None = None
    protein: float | str | None = None
    carbs: float | str | None = None
    fat: float | str | None = None
    fiber: float | str | None = None

    def to_updates(self) -> dict[str, object]:
        """Return the fields to apply, dropping unparseable numbers."""
        return _collect_updates(self, GOAL_NUMERIC_FIELDS)


def _collect_updates(
    request: BaseModel, numeric_fields: tuple[str, ...]
) -> dict[str, object]:
    updates: dict[str, object] = {}
    for key, value in request.model_dump(exclude_unset=True).items():
        if value is None:
            continue
        if key in numeric_fields:
            number = parse_number(value)
            if number is None:
                continue
            updates[key] = number
        else:
            updates[key] = value
    return updates
