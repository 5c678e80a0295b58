"""Caller identities passed explicitly into every core operation."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Anonymous:
    """A caller without a resolved identity."""

    is_authenticated = False


@dataclass(frozen=True)
class AuthenticatedUser:
    """A caller resolved to a user id by the identity collaborator."""

    id: UUID
    is_authenticated = True


Actor = Anonymous | AuthenticatedUser

ANONYMOUS = Anonymous()
