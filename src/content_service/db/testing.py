from __future__ import annotations

from typing import Any

from bson import ObjectId

from content_service.exceptions import RecordNotFoundError, StorageError
from content_service.models.file import BLOB_FIELD, FileRecord, FileResponse


class InMemoryStorageHandler:
    """Dict-backed StorageHandler for tests and local runs without Mongo."""

    def __init__(self) -> None:
        self.records: dict[ObjectId, dict[str, Any]] = {}
        self.blobs: dict[ObjectId, bytes] = {}
        self.healthy = True
        self.calls: list[str] = []

    async def ping(self) -> None:
        self.calls.append("ping")
        if not self.healthy:
            raise StorageError("unable to reach database")

    async def read(self, file_id: ObjectId) -> bytes:
        self.calls.append("read")
        doc = self._get(file_id)
        return self.blobs[doc[BLOB_FIELD]]

    async def create(self, record: FileRecord, data: bytes) -> ObjectId:
        self.calls.append("create")
        blob_id = ObjectId()
        self.blobs[blob_id] = bytes(data)
        file_id = ObjectId()
        self.records[file_id] = {"_id": file_id, **record.to_document(blob_id)}
        return file_id

    async def delete(self, file_id: ObjectId) -> None:
        self.calls.append("delete")
        doc = self._get(file_id)
        del self.records[file_id]
        self.blobs.pop(doc[BLOB_FIELD], None)

    async def update_fields(self, file_id: ObjectId, fields: dict[str, Any]) -> None:
        self.calls.append("update_fields")
        self._get(file_id).update(fields)

    async def query(self, filters: dict[str, Any]) -> list[FileResponse]:
        self.calls.append("query")
        return [
            FileResponse.model_validate(doc)
            for doc in self.records.values()
            if all(doc.get(k) == v for k, v in filters.items())
        ]

    def _get(self, file_id: ObjectId) -> dict[str, Any]:
        doc = self.records.get(file_id)
        if doc is None:
            raise RecordNotFoundError(f"no file found with id {file_id}")
        return doc
