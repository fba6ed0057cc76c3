"""ASGI entrypoint for the daily macros API."""

from daily_macros.api.app import create_app
from daily_macros.containers import build_container

app = create_app(build_container())
