"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from enumerations.api.v1.router import api_router
from enumerations.catalogs import CATALOGS, LogLevel
from enumerations.core.config import settings
from enumerations.models import ErrorResponse

# Configure loguru
logger.remove()  # Remove default handler
logger.enable("enumerations")  # library logging is off until an application opts in

# Console handler with colored output
logger.add(
    sys.stderr,
    level=settings.loguru_level,
    format=(
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    ),
    colorize=True,
)

# File handler for persistent logs
log_dir = Path(settings.log_dir)
log_dir.mkdir(parents=True, exist_ok=True)

logger.add(
    log_dir / "enumerations_{time:YYYY-MM-DD}.log",
    rotation="00:00",  # New file at midnight
    retention=f"{settings.log_retention_days} days",
    compression="zip",  # Compress old logs
    level=settings.loguru_level,
    format=(
        "{time:YYYY-MM-DD HH:mm:ss} | "
        "{level: <8} | "
        "{name}:{function}:{line} | "
        "{message}"
    ),
)

# Separate error log file
logger.add(
    log_dir / "errors_{time:YYYY-MM-DD}.log",
    rotation="00:00",
    retention=f"{settings.log_retention_days * 3} days",  # Keep error logs longer
    compression="zip",
    level="ERROR",
    format=(
        "{time:YYYY-MM-DD HH:mm:ss} | "
        "{level: <8} | "
        "{name}:{function}:{line} | "
        "{message}\n"
        "{exception}"
    ),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events.

    Args:
        app: FastAPI application instance

    Yields:
        None
    """
    # Startup
    logger.info("=" * 80)
    logger.info("🚀 Starting Enumerations API")
    logger.info("=" * 80)
    logger.info(f"Catalogs loaded: {len(CATALOGS)}")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"Log Invalid Captures: {settings.log_invalid_captures}")
    logger.info(f"API Host: {settings.api_host}:{settings.api_port}")
    logger.info(f"Reload Mode: {settings.api_reload}")
    logger.info("=" * 80)

    yield

    # Shutdown
    logger.info("=" * 80)
    logger.info("🛑 Shutting down Enumerations API")
    logger.info("=" * 80)


# Create FastAPI application
app = FastAPI(
    title="Insurance Enumerations API",
    description="""
    Closed enumerations shared by the insurance-quoting platform.

    ## Features

    * **Catalog browsing**: List every enumeration and read its items with
      descriptions, sort order and metadata
    * **Lookup**: Case-insensitive, alias-aware lookup of a single item; the
      response always carries the canonical id
    * **Validation**: Decode raw partner values through the capturing codec and
      get back which ones are unrecognized, without failing the request

    ## Identifier modes

    Strict identifiers reject unknown values while decoding. Capturing
    identifiers keep the raw value and record an error so a whole document can
    be parsed first and audited afterwards.
    """,
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix="/api/v1")


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Handle uncaught exceptions.

    Args:
        request: The request that caused the exception
        exc: The exception that was raised

    Returns:
        JSON error response
    """
    logger.error(f"❌ Unhandled exception on {request.method} {request.url.path}: {exc}")
    logger.exception("Full traceback:")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error",
            detail=str(exc) if settings.log_level.item() is LogLevel.debug else None,
        ).model_dump(),
    )


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information.

    Returns:
        API metadata
    """
    return {
        "name": "Insurance Enumerations API",
        "version": "0.1.0",
        "status": "running",
        "docs": "/docs",
        "api_prefix": "/api/v1",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "enumerations.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.loguru_level.lower(),
    )
