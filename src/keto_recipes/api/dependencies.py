"""FastAPI dependencies shared by the routers."""

from fastapi import Depends, Header, Request

from keto_recipes.containers import AppContainer
from keto_recipes.domain.actors import Actor


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def get_actor(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> Actor:
    """Resolve the caller from the Authorization header."""
    return container.identity_provider.resolve(_bearer_token(authorization))
