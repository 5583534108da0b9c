"""File endpoints: upload, download, delete, metadata update and listing.

Every endpoint validates the caller's bearer token before touching storage.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import APIRouter, Request
from fastapi.responses import Response
from pydantic import ValidationError
from starlette.datastructures import QueryParams, UploadFile
from starlette.formparsers import MultiPartException

from content_service.api.fastapi.dependencies import StorageDep, TokenDep
from content_service.exceptions import InvalidRequestError
from content_service.models.file import INT64_MAX, INT64_MIN, FileRecord, FileResponse, FileUpdate
from content_service.models.responses import ErrorResponse, MessageResponse, UploadResponse

logger = logging.getLogger(__name__)

ROUTER_TAG = "files"

# query parameters compared as integers; everything else is matched as a string
INT_FILTERS = frozenset({"size"})
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

router = APIRouter(
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


def parse_file_id(raw: str) -> ObjectId:
    try:
        return ObjectId(raw)
    except (InvalidId, TypeError) as exc:
        raise InvalidRequestError(f"invalid file id '{raw}': {exc}") from exc


def parse_int_filter(value: str) -> int | None:
    """Parse a decimal integer that fits in a BSON int64, or return None."""
    if not _INT_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


def build_filters(params: QueryParams) -> dict[str, Any]:
    """Turn query parameters into a store filter.

    The first value of a repeated key wins. An integer field that does not
    parse is dropped rather than failing the request. Keys naming a query
    operator are refused.
    """
    filters: dict[str, Any] = {}
    for key in params.keys():
        if key.startswith("$"):
            raise InvalidRequestError(f"invalid query parameter '{key}'")
        value = params.getlist(key)[0]
        if key in INT_FILTERS:
            number = parse_int_filter(value)
            if number is None:
                logger.warning("Error converting '%s' query parameter to int, skipping this parameter", key)
            else:
                filters[key] = number
            continue
        filters[key] = value
    return filters


@router.post("/upload", response_model=UploadResponse)
async def upload_file(request: Request, storage: StorageDep, _token: TokenDep):
    try:
        form = await request.form()
    except MultiPartException as exc:
        raise InvalidRequestError(f"unable to parse request form: {exc.message}") from exc

    upload = form.get("file")
    if not isinstance(upload, UploadFile):
        raise InvalidRequestError("request form has no 'file' field")
    try:
        data = await upload.read()
    finally:
        await upload.close()

    record = FileRecord.from_upload(upload.filename or "", len(data))
    file_id = await storage.create(record, data)

    logger.info("File uploaded successfully", extra={"file_id": file_id})
    return UploadResponse(message="File uploaded successfully", id=str(file_id))


@router.get("/file/{file_id}", response_class=Response)
async def download_file(file_id: str, storage: StorageDep, _token: TokenDep):
    oid = parse_file_id(file_id)
    data = await storage.read(oid)

    logger.info("File successfully retrieved", extra={"file_id": oid})
    return Response(content=data, media_type="application/octet-stream")


@router.delete("/file/{file_id}", response_model=MessageResponse)
async def delete_file(file_id: str, storage: StorageDep, _token: TokenDep):
    oid = parse_file_id(file_id)
    await storage.delete(oid)

    logger.info("File successfully deleted", extra={"file_id": oid})
    return MessageResponse(message="File successfully deleted")


@router.put("/file/{file_id}", response_model=MessageResponse)
async def update_file_info(file_id: str, request: Request, storage: StorageDep, _token: TokenDep):
    oid = parse_file_id(file_id)

    try:
        payload = await request.json()
    except ValueError as exc:
        raise InvalidRequestError(f"unable to decode request body: {exc}") from exc
    if not isinstance(payload, dict):
        raise InvalidRequestError("request body must be a JSON object")
    try:
        update = FileUpdate.model_validate(payload)
    except ValidationError as exc:
        err = exc.errors()[0]
        field = ".".join(str(p) for p in err["loc"])
        raise InvalidRequestError(f"invalid field '{field}': {err['msg']}") from exc

    await storage.update_fields(oid, update.fields())

    logger.info("File updated successfully", extra={"file_id": oid})
    return MessageResponse(message="File updated successfully")


@router.get("/files", response_model=list[FileResponse])
async def get_files(request: Request, storage: StorageDep, _token: TokenDep):
    results = await storage.query(build_filters(request.query_params))

    logger.info("Files retrieved successfully")
    return results
