"""Replace-on-write operations over the meal store.

Every operation takes a ``MealStore`` and returns the next version of it. The
input is never modified; an edit addressed to a meal or ingredient that does
not exist returns the input store unchanged.
"""

import logging
import secrets
import string
from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace

from daily_macros.domain.meals import Ingredient, Meal, MealStore, Unit

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {"name", "amount", "unit", "calories", "protein", "fat", "carbs", "fiber"}
)

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_LENGTH = 9
_MAX_ID_ATTEMPTS = 16

IdFactory = Callable[[], str]


def new_ingredient_id() -> str:
    """Return a random 9-character base-36 token."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


def create_store(meal_names: Iterable[str]) -> MealStore:
    """Build a store with one empty meal per name, ids numbered from 1."""
    meals = tuple(
        Meal(id=str(index), name=name)
        for index, name in enumerate(meal_names, start=1)
    )
    return MealStore(meals=meals)


def add_ingredient(
    store: MealStore, meal_id: str, id_factory: IdFactory = new_ingredient_id
) -> MealStore:
    """Append a blank ingredient to the given meal."""
    meal = store.get_meal(meal_id)
    if meal is None:
        logger.info("Ignoring add for unknown meal %s", meal_id)
        return store
    ingredient = Ingredient(id=_unique_id(store, id_factory))
    logger.debug("Adding ingredient %s to meal %s", ingredient.id, meal_id)
    updated = replace(meal, ingredients=(*meal.ingredients, ingredient))
    return _replace_meal(store, updated)


def remove_ingredient(store: MealStore, meal_id: str, ingredient_id: str) -> MealStore:
    """Remove an ingredient from the given meal."""
    meal = store.get_meal(meal_id)
    if meal is None or meal.get_ingredient(ingredient_id) is None:
        logger.info(
            "Ignoring remove for unknown ingredient %s in meal %s",
            ingredient_id,
            meal_id,
        )
        return store
    logger.debug("Removing ingredient %s from meal %s", ingredient_id, meal_id)
    remaining = tuple(item for item in meal.ingredients if item.id != ingredient_id)
    return _replace_meal(store, replace(meal, ingredients=remaining))


def update_ingredient(
    store: MealStore,
    meal_id: str,
    ingredient_id: str,
    updates: Mapping[str, object],
) -> MealStore:
    """Apply a partial field update to one ingredient.

    Only ``UPDATABLE_FIELDS`` are applied; other keys are ignored. A ``unit``
    value is coerced to ``Unit`` and raises ``ValueError`` for an unknown tag.
    Numeric values are stored as given.
    """
    meal = store.get_meal(meal_id)
    ingredient = meal.get_ingredient(ingredient_id) if meal else None
    if meal is None or ingredient is None:
        logger.info(
            "Ignoring update for unknown ingredient %s in meal %s",
            ingredient_id,
            meal_id,
        )
        return store
    changes = _clean_updates(updates)
    if not changes:
        return store
    logger.debug(
        "Updating ingredient %s in meal %s: %s", ingredient_id, meal_id, sorted(changes)
    )
    updated_ingredient = replace(ingredient, **changes)
    ingredients = tuple(
        updated_ingredient if item.id == ingredient_id else item
        for item in meal.ingredients
    )
    return _replace_meal(store, replace(meal, ingredients=ingredients))


def _clean_updates(updates: Mapping[str, object]) -> dict[str, object]:
    changes: dict[str, object] = {}
    for key, value in updates.items():
        if key not in UPDATABLE_FIELDS:
            logger.warning("Ignoring non-updatable ingredient field %r", key)
            continue
        if key == "unit":
            changes[key] = Unit(value)
        elif key == "name":
            changes[key] = str(value)
        else:
            changes[key] = value
    return changes


def _replace_meal(store: MealStore, meal: Meal) -> MealStore:
    meals = tuple(meal if item.id == meal.id else item for item in store.meals)
    return replace(store, meals=meals)


def _unique_id(store: MealStore, id_factory: IdFactory) -> str:
    existing = {
        ingredient.id for meal in store.meals for ingredient in meal.ingredients
    }
    for _ in range(_MAX_ID_ATTEMPTS):
        candidate = id_factory()
        if candidate not in existing:
            return candidate
    msg = "Could not generate a unique ingredient id"
    raise RuntimeError(msg)
