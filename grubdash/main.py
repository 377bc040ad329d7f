"""
FastAPI Application Entry Point

GrubDash Ordering API - dishes and orders held in memory.

Endpoints:
    - GET/POST /dishes, GET/PUT /dishes/{dishId}
    - GET/POST /orders, GET/PUT/DELETE /orders/{orderId}
    - GET /health: System health check

Errors are always returned as ``{"error": message}``.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from grubdash.api import dishes, health, orders
from grubdash.core.config import get_settings, setup_logging
from grubdash.data import load_seed_data
from grubdash.errors import APIError, MethodNotAllowedError, NotFoundError, ValidationError
from grubdash.services.store import get_dish_store, get_order_store

# Initialize configuration and logging
settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.
    """
    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info(f"   Debug: {settings.debug}")
    logger.info("=" * 60)

    if settings.seed_data:
        load_seed_data(get_dish_store(), get_order_store())

    yield

    logger.info("Shutting down...")


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

app = FastAPI(
    title=settings.app_name,
    description="REST API for a restaurant ordering application: dishes and orders.",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(dishes.router)
app.include_router(orders.router)


# =============================================================================
# ERROR HANDLERS
# =============================================================================

def _error_response(exc: APIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render pipeline failures."""
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request envelopes are client errors, reported as 400."""
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    error = ValidationError(
        f"Request body must be a JSON object with a data object ({location}: {first.get('msg', 'invalid')})."
    )
    logger.warning(f"{request.method} {request.url.path} -> 400: {error.message}")
    return _error_response(error)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown paths and unsupported methods use the same error envelope."""
    if exc.status_code == 404:
        error = NotFoundError(f"Path not found: {request.url.path}")
    elif exc.status_code == 405:
        error = MethodNotAllowedError(f"{request.method} not allowed for {request.url.path}")
    else:
        error = APIError(str(exc.detail), status_code=exc.status_code)
    return JSONResponse(status_code=error.status_code, content=error.to_dict(), headers=exc.headers)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler."""
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "detail": str(exc) if settings.debug else "An unexpected error occurred",
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("grubdash.main:app", host=settings.api_host, port=settings.api_port)
