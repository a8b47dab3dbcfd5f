"""ASGI entrypoint for the nutriplan API."""

from nutriplan.api.app import create_app
from nutriplan.containers import build_container

app = create_app(build_container())
