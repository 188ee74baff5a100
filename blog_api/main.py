"""FastAPI application entry point.

Blog API - in-memory users and posts with referential integrity.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.routes import api_router
from blog_api.schemas import ErrorResponse
from blog_api.services.errors import ApiError
from blog_api.settings import Settings, get_settings
from blog_api.stores.memory import MemoryDatabase

logger = logging.getLogger("uvicorn.error")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Turn the first request validation error into a one-line message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    if field:
        return f"Invalid {field}: {first.get('msg')}"
    return f"Invalid request: {first.get('msg')}"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Logs where the server listens and which endpoints it serves.
    """
    settings: Settings = app.state.settings
    logger.info(f"Server running on {settings.base_url}")
    logger.info("Available endpoints:")
    for route in app.routes:
        if isinstance(route, APIRoute):
            for method in sorted(route.methods):
                logger.info(f"   {method:<6} {route.path}")

    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Each call gets its own MemoryDatabase, seeded unless settings.seed_data
    is off.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="In-memory users and posts API",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    db = MemoryDatabase()
    if settings.seed_data:
        db.seed()
    app.state.db = db
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error(400, _describe_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unknown paths and unsupported methods on known paths both read as a missing endpoint.
        if exc.status_code in (404, 405):
            return _error(404, "Endpoint not found")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning the error envelope."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error(500, str(exc) if settings.debug else "Something went wrong!")

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "blog_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
