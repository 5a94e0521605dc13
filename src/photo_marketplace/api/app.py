"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from photo_marketplace.api.auth import router as auth_router
from photo_marketplace.api.finances import router as finances_router
from photo_marketplace.api.photographers import router as photographers_router
from photo_marketplace.api.portfolio import areas_router
from photo_marketplace.api.portfolio import router as portfolio_router
from photo_marketplace.api.reviews import router as reviews_router
from photo_marketplace.api.search import router as search_router
from photo_marketplace.api.sessions import router as sessions_router
from photo_marketplace.api.transactions import router as transactions_router
from photo_marketplace.api.users import router as users_router
from photo_marketplace.app_logging import configure_logging
from photo_marketplace.containers import AppContainer
from photo_marketplace.errors import MarketplaceError
from photo_marketplace.services.validation import format_validation_error


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Photo Marketplace API")
    app.state.container = container

    @app.exception_handler(MarketplaceError)
    async def marketplace_error_handler(
        request: Request, exc: MarketplaceError
    ) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "Request failed",
                extra={"path": request.url.path, "reason": exc.message},
            )
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"message": _format_request_errors(exc)},
        )

    @app.exception_handler(PydanticValidationError)
    async def pydantic_validation_handler(
        request: Request, exc: PydanticValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400, content={"message": format_validation_error(exc)}
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        content: dict[str, object] = {"message": "Internal server error"}
        if request.app.state.container.settings.expose_error_details:
            content["details"] = str(exc)
        return JSONResponse(status_code=500, content=content)

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(photographers_router)
    app.include_router(sessions_router)
    app.include_router(transactions_router)
    app.include_router(finances_router)
    app.include_router(reviews_router)
    app.include_router(portfolio_router)
    app.include_router(areas_router)
    app.include_router(search_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _error_body(exc: MarketplaceError) -> dict[str, object]:
    body: dict[str, object] = {"message": exc.message}
    if exc.error_code:
        body["errorCode"] = exc.error_code
    body.update(exc.extra)
    return body


def _format_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part not in {"body", "query"}
        )
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Validation error: " + "; ".join(parts)
