"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from keto_recipes.api.foods import router as foods_router
from keto_recipes.api.preferences import router as preferences_router
from keto_recipes.api.recipes import router as recipes_router
from keto_recipes.app_logging import configure_logging
from keto_recipes.containers import AppContainer
from keto_recipes.errors import (
    CsvImportError,
    ForbiddenError,
    KetoRecipesError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

_STATUS_BY_ERROR: list[tuple[type[KetoRecipesError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Keto Recipes")
    app.state.container = container

    app.include_router(foods_router)
    app.include_router(recipes_router)
    app.include_router(preferences_router)

    @app.exception_handler(KetoRecipesError)
    async def domain_error_handler(
        request: Request, exc: KetoRecipesError
    ) -> JSONResponse:
        if isinstance(exc, CsvImportError):
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"success": False, "error": str(exc), "errors": exc.errors},
            )
        return JSONResponse(
            status_code=status_for_error(exc), content={"error": str(exc)}
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request",
                "details": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error", extra={"path": request.url.path, "method": request.method}
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok", "mode": container.operating_mode.value}

    return app


def status_for_error(exc: KetoRecipesError) -> int:
    """Map a domain error to its HTTP status category."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
