"""ASGI entrypoint for the eco tracker API."""

from eco_tracker.api.app import create_app
from eco_tracker.containers import build_container

app = create_app(build_container())
