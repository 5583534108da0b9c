from __future__ import annotations

import logging
from typing import Any

from bson import ObjectId
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
    AsyncIOMotorGridFSBucket,
)
from pymongo.errors import PyMongoError

from content_service.exceptions import RecordNotFoundError, StorageError
from content_service.models.file import BLOB_FIELD, FileRecord, FileResponse

from .settings import MongoSettings

logger = logging.getLogger(__name__)


def create_mongo_client(settings: MongoSettings) -> AsyncIOMotorClient:
    return AsyncIOMotorClient(
        settings.resolved_url,
        serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
        tz_aware=True,
    )


class MongoStorageHandler:
    """File records in a Mongo collection, file bytes in a GridFS bucket.

    Upload writes the blob before the record and delete removes the record
    before the blob. A failure between the two steps can leave an orphaned
    blob, never a record pointing at missing bytes.
    """

    def __init__(self, client: AsyncIOMotorClient, settings: MongoSettings):
        self.client = client
        self.settings = settings

    @property
    def database(self) -> AsyncIOMotorDatabase:
        return self.client[self.settings.resolved_database]

    @property
    def files(self) -> AsyncIOMotorCollection:
        return self.database[self.settings.file_collection]

    def bucket(self) -> AsyncIOMotorGridFSBucket:
        return AsyncIOMotorGridFSBucket(self.database, bucket_name=self.settings.bucket_name)

    async def ping(self) -> None:
        try:
            await self.client.admin.command("ping")
        except PyMongoError as exc:
            raise StorageError(f"unable to reach database: {exc}") from exc

    async def read(self, file_id: ObjectId) -> bytes:
        try:
            doc = await self.files.find_one({"_id": file_id})
            if doc is None:
                raise RecordNotFoundError(f"no file found with id {file_id}")
            stream = await self.bucket().open_download_stream(doc[BLOB_FIELD])
            return await stream.read()
        except PyMongoError as exc:
            raise StorageError(str(exc)) from exc

    async def create(self, record: FileRecord, data: bytes) -> ObjectId:
        try:
            blob_id = await self.bucket().upload_from_stream(record.name, data)
            result = await self.files.insert_one(record.to_document(blob_id))
        except PyMongoError as exc:
            raise StorageError(str(exc)) from exc
        if result.inserted_id is None:
            raise StorageError("no file inserted")
        logger.debug("Stored blob %s for file %s", blob_id, result.inserted_id)
        return result.inserted_id

    async def delete(self, file_id: ObjectId) -> None:
        try:
            doc = await self.files.find_one_and_delete({"_id": file_id})
            if doc is None:
                raise RecordNotFoundError(f"no file found with id {file_id}")
            await self.bucket().delete(doc[BLOB_FIELD])
        except PyMongoError as exc:
            raise StorageError(str(exc)) from exc

    async def update_fields(self, file_id: ObjectId, fields: dict[str, Any]) -> None:
        try:
            if not fields:
                # $set rejects an empty document
                doc = await self.files.find_one({"_id": file_id}, projection={"_id": 1})
            else:
                doc = await self.files.find_one_and_update({"_id": file_id}, {"$set": dict(fields)})
        except PyMongoError as exc:
            raise StorageError(str(exc)) from exc
        if doc is None:
            raise RecordNotFoundError(f"no file found with id {file_id}")

    async def query(self, filters: dict[str, Any]) -> list[FileResponse]:
        try:
            docs = await self.files.find(filters).to_list(length=None)
        except PyMongoError as exc:
            raise StorageError(str(exc)) from exc
        return [FileResponse.model_validate(doc) for doc in docs]
