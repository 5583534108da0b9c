from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from content_service.db.nosql.base import StorageHandler


def get_storage(request: Request) -> StorageHandler:
    return request.app.state.storage  # type: ignore[attr-defined]


StorageDep = Annotated[StorageHandler, Depends(get_storage)]
