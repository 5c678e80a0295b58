"""Domain errors raised by services and mapped to HTTP statuses by the API."""


class KetoRecipesError(Exception):
    """Base exception for all domain errors."""


class ValidationError(KetoRecipesError):
    """Raised when caller input is missing or malformed."""


class CsvImportError(ValidationError):
    """Raised when a CSV upload produced no importable rows."""

    def __init__(self, message: str, errors: list[str]) -> None:
        super().__init__(message)
        self.errors = errors


class NotFoundError(KetoRecipesError):
    """Raised when an entity id does not exist."""


class UnauthorizedError(KetoRecipesError):
    """Raised when an operation needs a signed-in actor."""


class ForbiddenError(KetoRecipesError):
    """Raised when the actor may not touch the entity."""
