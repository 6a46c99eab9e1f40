"""Health check router."""

import logging
import os

from fastapi import APIRouter, Request

from dirlist.config import get_settings
from dirlist.services.permissions import get_permission_resolver

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns:
        Health status information
    """
    settings = get_settings()
    executor = getattr(request.app.state, "scan_executor", None)

    return {
        "status": "healthy",
        "service": settings.api_title,
        "version": settings.api_version,
        "environment": settings.environment,
        "platform": os.name,
        "permission_resolver": get_permission_resolver().name,
        "scan_pool": "ready" if executor is not None else "default",
    }
