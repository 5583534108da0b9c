from .nosql import MongoSettings, MongoStorageHandler, StorageHandler, create_mongo_client
from .testing import InMemoryStorageHandler

__all__ = [
    "InMemoryStorageHandler",
    "MongoSettings",
    "MongoStorageHandler",
    "StorageHandler",
    "create_mongo_client",
]
