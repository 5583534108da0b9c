from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MongoSettings(BaseSettings):
    """
    MongoDB settings.

    Env support:
      - MONGO_URL, MONGO_DATABASE, MONGO_FILE_COLLECTION, MONGO_BUCKET_NAME
      - MONGO_URI and DATABASE are accepted as fallbacks for url / database.
    """

    url: Optional[str] = Field(default=None)
    database: Optional[str] = Field(default=None)
    file_collection: str = Field(default="files")
    # GridFS keeps blobs in <bucket_name>.files / <bucket_name>.chunks
    bucket_name: str = Field(default="fs")
    server_selection_timeout_ms: int = Field(default=5000)

    model_config = SettingsConfigDict(
        env_prefix="MONGO_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    @property
    def resolved_url(self) -> str:
        url = self.url or os.getenv("MONGO_URI")
        if not url:
            raise ValueError("MONGO_URL or MONGO_URI must be set for database connectivity")
        return url

    @property
    def resolved_database(self) -> str:
        name = self.database or os.getenv("DATABASE")
        if not name:
            raise ValueError("MONGO_DATABASE or DATABASE must be set")
        return name


@lru_cache
def get_mongo_settings(**kwargs) -> MongoSettings:
    filtered = {k: v for k, v in kwargs.items() if v is not None}
    return MongoSettings(**filtered)
