"""
Centralized error handlers for FastAPI.

Maps packing domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from packit.domain.packing.errors import (
    MissingLocalizationWeatherError,
    PackingDomainError,
    PackingItemAlreadyExistsError,
    PackingItemNotFoundError,
    PackingListAlreadyExistsError,
    PackingListNotFoundError,
    PackingListVersionConflictError,
    WeatherServiceUnavailableError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_422 = 422
HTTP_500 = 500
HTTP_503 = 503


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(PackingListNotFoundError)
    async def handle_packing_list_not_found(
        _request: Request, exc: PackingListNotFoundError
    ) -> JSONResponse:
        logger.warning("Packing list not found: %s", exc.packing_list_id)
        return _error_response(HTTP_404, "Packing list not found", exc.message)

    @app.exception_handler(PackingItemNotFoundError)
    async def handle_packing_item_not_found(
        _request: Request, exc: PackingItemNotFoundError
    ) -> JSONResponse:
        logger.warning("Packing item not found: %s", exc.item_name)
        return _error_response(HTTP_404, "Packing item not found", exc.message)

    @app.exception_handler(PackingListAlreadyExistsError)
    async def handle_packing_list_already_exists(
        _request: Request, exc: PackingListAlreadyExistsError
    ) -> JSONResponse:
        """Handle duplicate list names; the client should pick another name."""
        logger.warning("Packing list already exists: %s", exc.name)
        return _error_response(HTTP_409, "Packing list already exists", exc.message)

    @app.exception_handler(PackingItemAlreadyExistsError)
    async def handle_packing_item_already_exists(
        _request: Request, exc: PackingItemAlreadyExistsError
    ) -> JSONResponse:
        logger.warning(
            "Packing item %s already on list %s", exc.item_name, exc.list_name
        )
        return _error_response(HTTP_409, "Packing item already exists", exc.message)

    @app.exception_handler(PackingListVersionConflictError)
    async def handle_version_conflict(
        _request: Request, exc: PackingListVersionConflictError
    ) -> JSONResponse:
        logger.warning("Concurrent modification of packing list %s", exc.packing_list_id)
        return _error_response(HTTP_409, "Packing list was modified", exc.message)

    @app.exception_handler(MissingLocalizationWeatherError)
    async def handle_missing_weather(
        _request: Request, exc: MissingLocalizationWeatherError
    ) -> JSONResponse:
        """Handle localizations the weather provider knows nothing about."""
        logger.warning("Missing weather for localization: %s", exc.localization)
        return _error_response(HTTP_422, "Missing localization weather", exc.message)

    @app.exception_handler(WeatherServiceUnavailableError)
    async def handle_weather_unavailable(
        _request: Request, exc: WeatherServiceUnavailableError
    ) -> JSONResponse:
        logger.error("Weather service unavailable: %s", exc.reason)
        return _error_response(HTTP_503, "Weather service unavailable")

    @app.exception_handler(PackingDomainError)
    async def handle_packing_domain(
        _request: Request, exc: PackingDomainError
    ) -> JSONResponse:
        """Catch-all for validation errors raised by value objects and entities."""
        logger.warning("Rejected by packing domain: %s", exc.message)
        return _error_response(HTTP_400, "Invalid request", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
