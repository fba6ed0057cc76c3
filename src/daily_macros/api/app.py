"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from daily_macros.api.forms import GoalsUpdateRequest, IngredientUpdateRequest
from daily_macros.api.page import TRACKER_PAGE_HTML
from daily_macros.app_logging import configure_logging
from daily_macros.containers import AppContainer
from daily_macros.domain.goals import Goals
from daily_macros.domain.meals import Ingredient, Meal, MealStore
from daily_macros.domain.nutrition import NutrientTotals
from daily_macros.services.tracker import TrackerService

UNPROCESSABLE = 422


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Daily Macros")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def tracker_page() -> HTMLResponse:
        """Single-page form that consumes the tracker API."""
        return HTMLResponse(TRACKER_PAGE_HTML)

    @app.get("/meals")
    async def list_meals(request: Request) -> dict[str, object]:
        """Return the current meals with their ingredients."""
        tracker = _tracker(request)
        return {"meals": _store_payload(tracker.store)}

    @app.post("/meals/{meal_id}/ingredients", status_code=status.HTTP_201_CREATED)
    async def add_ingredient(meal_id: str, request: Request) -> dict[str, object]:
        """Append a blank ingredient to a meal."""
        tracker = _tracker(request)
        ingredient = tracker.add_ingredient(meal_id)
        if ingredient is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Meal not found"
            )
        logger.info("Added ingredient %s to meal %s", ingredient.id, meal_id)
        return {
            "ingredient": _ingredient_payload(ingredient),
            "meals": _store_payload(tracker.store),
        }

    @app.patch("/meals/{meal_id}/ingredients/{ingredient_id}")
    async def update_ingredient(
        meal_id: str,
        ingredient_id: str,
        payload: IngredientUpdateRequest,
        request: Request,
    ) -> dict[str, object]:
        """Apply a partial edit to an ingredient."""
        tracker = _tracker(request)
        if tracker.get_ingredient(meal_id, ingredient_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Ingredient not found"
            )
        try:
            ingredient = tracker.update_ingredient(
                meal_id, ingredient_id, payload.to_updates()
            )
        except ValueError as exc:
            raise HTTPException(status_code=UNPROCESSABLE, detail=str(exc)) from exc
        if ingredient is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Ingredient not found"
            )
        return {"ingredient": _ingredient_payload(ingredient)}

    @app.delete("/meals/{meal_id}/ingredients/{ingredient_id}")
    async def remove_ingredient(
        meal_id: str, ingredient_id: str, request: Request
    ) -> dict[str, object]:
        """Remove an ingredient from a meal."""
        tracker = _tracker(request)
        if not tracker.remove_ingredient(meal_id, ingredient_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Ingredient not found"
            )
        logger.info("Removed ingredient %s from meal %s", ingredient_id, meal_id)
        return {"meals": _store_payload(tracker.store)}

    @app.get("/totals")
    async def totals(request: Request) -> dict[str, object]:
        """Return the day's totals and per-meal subtotals."""
        tracker = _tracker(request)
        return {
            "totals": _totals_payload(tracker.totals()),
            "meals": {
                meal_id: _totals_payload(meal_totals)
                for meal_id, meal_totals in tracker.meal_totals().items()
            },
        }

    @app.get("/goals")
    async def get_goals(request: Request) -> dict[str, object]:
        """Return the current goals."""
        return {"goals": _goals_payload(_tracker(request).goals)}

    @app.patch("/goals")
    async def update_goals(
        payload: GoalsUpdateRequest, request: Request
    ) -> dict[str, object]:
        """Apply field-level goal edits."""
        tracker = _tracker(request)
        try:
            goals = tracker.update_goals(payload.to_updates())
        except ValueError as exc:
            raise HTTPException(status_code=UNPROCESSABLE, detail=str(exc)) from exc
        return {"goals": _goals_payload(goals)}

    @app.get("/progress")
    async def progress(request: Request) -> dict[str, object]:
        """Return totals against goals, ready for display."""
        tracker = _tracker(request)
        return {"progress": [asdict(entry) for entry in tracker.progress()]}

    return app


def _tracker(request: Request) -> TrackerService:
    container: AppContainer = request.app.state.container
    return container.tracker_service


def _ingredient_payload(ingredient: Ingredient) -> dict[str, object]:
    payload = asdict(ingredient)
    payload["unit"] = ingredient.unit.value
    return payload


def _meal_payload(meal: Meal) -> dict[str, object]:
    return {
        "id": meal.id,
        "name": meal.name,
        "ingredients": [_ingredient_payload(item) for item in meal.ingredients],
    }


def _store_payload(store: MealStore) -> list[dict[str, object]]:
    return [_meal_payload(meal) for meal in store.meals]


def _totals_payload(totals: NutrientTotals) -> dict[str, float]:
    return asdict(totals)


def _goals_payload(goals: Goals) -> dict[str, object]:
    payload = asdict(goals)
    payload["sex"] = goals.sex.value
    return payload
