"""Directory listing router."""

import logging

from fastapi import APIRouter, Depends, Query, Request

from dirlist.config import get_settings
from dirlist.models.query import ListingQuery, SortKey, SortOrder
from dirlist.models.response import ApiResponse, DirectoryMetadata, ListingResult
from dirlist.services.base import FilesystemService
from dirlist.services.listing_service import ListingService
from dirlist.services.metadata_service import MetadataService

logger = logging.getLogger(__name__)
router = APIRouter()


def get_filesystem_service(request: Request) -> FilesystemService:
    """Dependency to get a filesystem service bound to the app's worker pool."""
    executor = getattr(request.app.state, "scan_executor", None)
    return FilesystemService(executor=executor)


def get_listing_service(fs: FilesystemService = Depends(get_filesystem_service)) -> ListingService:
    """Dependency to get listing service."""
    return ListingService(fs)


def get_metadata_service(fs: FilesystemService = Depends(get_filesystem_service)) -> MetadataService:
    """Dependency to get metadata service."""
    return MetadataService(fs)


@router.get("")
async def get_api_info():
    """
    Get API information.

    Returns:
        Service name, version, endpoints and features
    """
    settings = get_settings()

    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "description": settings.api_description,
        "endpoints": {
            "GET /api/v1/directory": "API information",
            "GET /api/v1/directory/list": "List directory contents with pagination",
            "GET /api/v1/directory/metadata": "Get directory metadata",
        },
        "features": [
            "Full directory listing with file metadata",
            "File permissions and attributes",
            "Pagination for large directories",
            "Sorting and filtering",
            "Security protection against path traversal",
            "Cross-platform compatibility",
        ],
    }


@router.get("/list", response_model=ApiResponse[ListingResult])
async def list_directory(
    request: Request,
    path: str = Query(..., min_length=1, max_length=4096, description="Directory path to list"),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(100, ge=1, le=1000, description="Items per page"),
    include_hidden: bool = Query(False, alias="includeHidden", description="Include hidden entries"),
    sort_by: SortKey = Query(SortKey.NAME, alias="sortBy", description="Sort key"),
    sort_order: SortOrder = Query(SortOrder.ASC, alias="sortOrder", description="Sort order"),
    service: ListingService = Depends(get_listing_service),
):
    """
    List directory contents with pagination.

    Args:
        path: Directory path to list
        page: Page number (1-based)
        limit: Items per page (max 1000)
        include_hidden: Include hidden entries
        sort_by: name, size, modified or type
        sort_order: asc or desc

    Returns:
        Success envelope wrapping a ListingResult
    """
    client = request.client.host if request.client else None
    logger.info(
        f"Directory listing request: path='{path}', page={page}, limit={limit}, "
        f"include_hidden={include_hidden}, sort_by={sort_by.value}, "
        f"sort_order={sort_order.value}, ip={client}"
    )

    query = ListingQuery(
        page=page,
        limit=limit,
        include_hidden=include_hidden,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    result = await service.list_directory(path, query)

    return ApiResponse[ListingResult](data=result)


@router.get("/metadata", response_model=ApiResponse[DirectoryMetadata])
async def get_directory_metadata(
    request: Request,
    path: str = Query(..., min_length=1, max_length=4096, description="Directory path"),
    service: MetadataService = Depends(get_metadata_service),
):
    """
    Get directory metadata.

    Args:
        path: Directory path

    Returns:
        Success envelope wrapping DirectoryMetadata
    """
    client = request.client.host if request.client else None
    logger.info(f"Directory metadata request: path='{path}', ip={client}")

    metadata = await service.describe(path)

    return ApiResponse[DirectoryMetadata](data=metadata)
