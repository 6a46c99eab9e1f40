"""FastAPI application entry point."""

import logging
import traceback
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dirlist.config import get_settings
from dirlist.models.response import ErrorDetail, ErrorResponse, ValidationErrorResponse
from dirlist.routers import directory, health
from dirlist.services.errors import DirectoryServiceError
from dirlist.services.permissions import get_permission_resolver
from dirlist.utils.formatters import utc_now

# Configure logging
settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format=settings.log_format
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Directory Listing API")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Scan workers: {settings.scan_max_workers}, scan timeout: {settings.scan_timeout}s")

    # Pick the platform resolver once, before the first request
    get_permission_resolver()

    app.state.scan_executor = ThreadPoolExecutor(
        max_workers=settings.scan_max_workers,
        thread_name_prefix="dirlist-scan",
    )

    yield

    # Cleanup
    logger.info("Shutting down Directory Listing API")
    app.state.scan_executor.shutdown(wait=False, cancel_futures=True)


# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description=settings.api_description,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(directory.router, prefix="/api/v1/directory", tags=["Directory"])


def error_response(status_code: int, message: str, stack: Optional[str] = None) -> JSONResponse:
    """Build the standard error envelope."""
    body = ErrorResponse(
        error=ErrorDetail(message=message, stack=stack),
        timestamp=utc_now(),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(DirectoryServiceError)
async def directory_error_handler(request: Request, exc: DirectoryServiceError):
    """Map service errors to their status codes."""
    logger.error(f"Error {exc.status_code}: {exc.message} ({request.method} {request.url.path})")
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report invalid query parameters as 400."""
    body = ValidationErrorResponse(details=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=400, content=body.model_dump())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    if settings.is_production:
        return error_response(500, "Internal server error")
    stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return error_response(500, str(exc) or "Internal server error", stack=stack)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "description": settings.api_description,
        "docs": "/docs",
        "health": "/health",
        "api": "/api/v1/directory",
    }
