from __future__ import annotations

import logging

from fastapi import APIRouter

from content_service.api.fastapi.dependencies.storage import StorageDep
from content_service.exceptions import StorageError
from content_service.models.responses import ErrorResponse, MessageResponse

from ..middleware.errors.handlers import error_response

logger = logging.getLogger(__name__)

ROUTER_TAG = "internal"

router = APIRouter()


@router.get("/health", response_model=MessageResponse, responses={500: {"model": ErrorResponse}})
async def check_health(storage: StorageDep):
    try:
        await storage.ping()
    except StorageError as exc:
        logger.error("Health check failed: %s", exc)
        return error_response(500, "API is running but unable to connect to database")
    return MessageResponse(message="API is running and connected to database")
