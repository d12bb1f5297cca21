"""ASGI entrypoint for the calorie log API."""

from calorie_log.api.app import create_app
from calorie_log.containers import build_container

app = create_app(build_container())
