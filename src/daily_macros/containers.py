"""Dependency container wiring for the application."""

from dataclasses import dataclass

from daily_macros.config import Settings
from daily_macros.services.tracker import TrackerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    tracker_service: TrackerService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    return AppContainer(
        settings=resolved_settings,
        tracker_service=TrackerService.from_settings(resolved_settings),
    )
