"""Identity resolution backed by Supabase Auth."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from supabase import Client

from keto_recipes.domain.actors import ANONYMOUS, Actor, AuthenticatedUser
from keto_recipes.errors import UnauthorizedError

_logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    """Resolves a request's bearer token into an actor."""

    def resolve(self, access_token: str | None) -> Actor:
        """Return the actor for a token, anonymous when no token is given."""


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Validates Supabase access tokens via the Auth API."""

    client: Client

    def resolve(self, access_token: str | None) -> Actor:
        """Return the actor for a Supabase JWT."""
        if not access_token:
            return ANONYMOUS
        try:
            response = self.client.auth.get_user(access_token)
        except Exception as exc:
            _logger.info("Rejected access token: %s", type(exc).__name__)
            raise UnauthorizedError("Invalid or expired session") from exc
        user = getattr(response, "user", None)
        if user is None:
            raise UnauthorizedError("Invalid or expired session")
        return AuthenticatedUser(id=UUID(str(user.id)))
