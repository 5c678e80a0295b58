"""ASGI entrypoint for the keto recipes API."""

from keto_recipes.api.app import create_app
from keto_recipes.containers import build_container

app = create_app(build_container())
