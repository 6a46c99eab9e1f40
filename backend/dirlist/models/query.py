"""Listing query model."""

from enum import Enum

from pydantic import Field, field_validator

from dirlist.config import get_settings
from dirlist.models.base import CamelModel
from dirlist.utils.validators import clamp_limit, clamp_page


class SortKey(str, Enum):
    """Field a listing is ordered by."""

    NAME = "name"
    SIZE = "size"
    MODIFIED = "modified"
    TYPE = "type"


class SortOrder(str, Enum):
    """Direction of a listing sort."""

    ASC = "asc"
    DESC = "desc"


class ListingQuery(CamelModel):
    """Pagination, sort and filter options for one listing call."""

    page: int = Field(1, description="Page number (1-based)", validate_default=True)
    limit: int = Field(None, description="Items per page", validate_default=True)
    include_hidden: bool = Field(False, description="Include hidden entries")
    sort_by: SortKey = Field(SortKey.NAME, description="Sort key")
    sort_order: SortOrder = Field(SortOrder.ASC, description="Sort order")

    @field_validator("page", mode="before")
    @classmethod
    def _clamp_page(cls, value):
        return clamp_page(value)

    @field_validator("limit", mode="before")
    @classmethod
    def _clamp_limit(cls, value):
        settings = get_settings()
        return clamp_limit(value, settings.max_page_limit, settings.default_page_limit)
