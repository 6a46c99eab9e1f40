"""Directory entry models."""

from enum import Enum

from pydantic import ConfigDict, Field

from dirlist.models.base import CamelModel


class EntryKind(str, Enum):
    """Kind of a directory child."""

    FILE = "file"
    DIRECTORY = "directory"


class Permissions(CamelModel):
    """Access probe results for the invoking process."""

    readable: bool = Field(False, description="Process may read the path")
    writable: bool = Field(False, description="Process may write the path")
    executable: bool = Field(False, description="Process may execute/traverse the path")


class EntryPermissions(Permissions):
    """Access probes plus best-effort ownership information."""

    owner: str = Field("unknown", description="Owner name or numeric uid")
    group: str = Field("unknown", description="Group name or numeric gid")
    mode: str = Field("", description="Raw st_mode in octal")


class EntryDescriptor(CamelModel):
    """Metadata record for one filesystem child."""

    name: str = Field(..., description="Entry name")
    path: str = Field(..., description="Full absolute path")
    size: int = Field(..., description="Size in bytes (0 for directories)", ge=0)
    extension: str = Field("", description="Lowercase extension including the dot")
    kind: EntryKind = Field(..., alias="type", description="'file' or 'directory'")
    created_date: str = Field(..., description="Creation timestamp (ISO-8601)")
    modified_date: str = Field(..., description="Last modified timestamp (ISO-8601)")
    permissions: EntryPermissions
    is_hidden: bool = Field(False, description="Whether the entry is hidden")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "report.txt",
                "path": "/srv/data/report.txt",
                "size": 1048576,
                "extension": ".txt",
                "type": "file",
                "createdDate": "2024-01-01T00:00:00.000Z",
                "modifiedDate": "2024-01-15T10:30:00.000Z",
                "permissions": {
                    "readable": True,
                    "writable": True,
                    "executable": False,
                    "owner": "alice",
                    "group": "staff",
                    "mode": "100644",
                },
                "isHidden": False,
            }
        }
    )

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY
