from __future__ import annotations

from .base import StorageHandler
from .handler import MongoStorageHandler, create_mongo_client
from .settings import MongoSettings, get_mongo_settings

__all__ = [
    "MongoSettings",
    "MongoStorageHandler",
    "StorageHandler",
    "create_mongo_client",
    "get_mongo_settings",
]
