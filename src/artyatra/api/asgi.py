"""ASGI entrypoint for the ArtYatra API."""

from artyatra.api.app import create_app
from artyatra.containers import build_container

app = create_app(build_container())
