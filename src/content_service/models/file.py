"""File record models.

``FileRecord`` is what the upload handler builds and the store persists,
``FileResponse`` is what listing returns and ``FileUpdate`` is the set of
fields a caller may change after upload.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from bson import ObjectId
from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field

ObjectIdStr = Annotated[str, BeforeValidator(lambda v: str(v) if isinstance(v, ObjectId) else v)]

# BSON stores integers as at most 8 bytes
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
FileSize = Annotated[int, Field(ge=0, le=INT64_MAX)]

# Document keys as stored in the file collection
BLOB_FIELD = "fileBytes"


def file_extension(filename: str) -> str:
    """Suffix of the last path element from its final dot, or "" when it has none.

    A leading dot counts, so ".bashrc" is its own extension.
    """
    base = filename.rpartition("/")[2]
    _, dot, suffix = base.rpartition(".")
    return dot + suffix if dot else ""


class FileRecord(BaseModel):
    """Metadata for one stored file, before it has an id."""

    name: str
    timestamp: datetime
    extension: str = ""
    size: int = 0
    hidden: bool = False

    @classmethod
    def from_upload(cls, filename: str, size: int, *, now: datetime | None = None) -> "FileRecord":
        return cls(
            name=filename,
            timestamp=now or datetime.now(timezone.utc),
            extension=file_extension(filename),
            size=size,
        )

    def to_document(self, blob_id: ObjectId) -> dict[str, Any]:
        doc = self.model_dump()
        doc[BLOB_FIELD] = blob_id
        return doc


class FileResponse(BaseModel):
    id: ObjectIdStr = Field(validation_alias=AliasChoices("_id", "id"))
    name: str
    timestamp: Optional[datetime] = None
    extension: str = ""
    size: int = 0
    file_bytes: Optional[ObjectIdStr] = Field(
        default=None,
        validation_alias=AliasChoices(BLOB_FIELD, "file_bytes"),
        serialization_alias=BLOB_FIELD,
    )
    hidden: bool = False

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FileUpdate(BaseModel):
    name: Optional[str] = None
    timestamp: Optional[datetime] = None
    extension: Optional[str] = None
    size: Optional[FileSize] = None
    hidden: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")

    def fields(self) -> dict[str, Any]:
        """Only the fields the caller actually supplied."""
        return self.model_dump(exclude_unset=True, exclude_none=True)
