from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from bson import ObjectId

from content_service.models.file import FileRecord, FileResponse


@runtime_checkable
class StorageHandler(Protocol):
    """Document + blob store capabilities the HTTP layer depends on.

    Every call goes straight through to the backing store: no retries, no
    batching and no transaction spanning the blob write and the metadata write.
    """

    async def ping(self) -> None:
        ...

    async def read(self, file_id: ObjectId) -> bytes:
        ...

    async def create(self, record: FileRecord, data: bytes) -> ObjectId:
        ...

    async def delete(self, file_id: ObjectId) -> None:
        ...

    async def update_fields(self, file_id: ObjectId, fields: dict[str, Any]) -> None:
        ...

    async def query(self, filters: dict[str, Any]) -> list[FileResponse]:
        ...
