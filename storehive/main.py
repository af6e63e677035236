"""FastAPI application entry point.

Inventory management API for hives, hive sections, product categories
and catalogue products.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storehive import __version__
from storehive.api.routes import (
    categories_router,
    health_router,
    hives_router,
    products_router,
    sections_router,
)
from storehive.config import settings
from storehive.infra.database import close_db_engine, create_tables, verify_db_connection
from storehive.infra.logging import bind_request_context, get_logger, setup_logging
from storehive.schemas.common import ErrorResponse

# Setup logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Startup:
    - Create missing tables (when enabled)
    - Verify database connection

    Shutdown:
    - Close database connections
    """
    logger.info("StoreHive API starting", environment=settings.environment)

    if settings.db_create_all:
        await create_tables()

    db_ok = await verify_db_connection()
    if not db_ok:
        logger.warning("Database connection failed - will retry on first request")

    yield

    logger.info("StoreHive API shutting down")
    await close_db_engine()
    logger.info("Cleanup complete")


app = FastAPI(
    title="StoreHive API",
    description="Hive and product catalogue management",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "dev" else None,
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log each request with its outcome."""
    bind_request_context(request.method, request.url.path, request.headers.get("X-User-Id"))
    response = await call_next(request)
    logger.debug("Request handled", status_code=response.status_code)
    return response


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed identifiers, query parameters and bodies as 400."""
    logger.info(
        "Request rejected by validation",
        path=request.url.path,
        errors=len(exc.errors()),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions."""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="Internal server error",
            error_type=type(exc).__name__,
        ).model_dump(exclude_none=True),
    )


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router, tags=["Health"])
app.include_router(hives_router, prefix=f"{settings.api_prefix}/hives", tags=["Hives"])
app.include_router(sections_router, prefix=f"{settings.api_prefix}/sections", tags=["Hive Sections"])
app.include_router(
    categories_router, prefix=f"{settings.api_prefix}/categories", tags=["Product Categories"]
)
app.include_router(products_router, prefix=f"{settings.api_prefix}/products", tags=["Products"])


@app.get("/")
async def root() -> dict:
    """Root endpoint - basic service info."""
    return {
        "service": "StoreHive API",
        "version": __version__,
        "environment": settings.environment,
    }
