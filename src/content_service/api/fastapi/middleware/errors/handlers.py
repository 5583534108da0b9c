from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from content_service.exceptions import ContentServiceError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _log(request: Request, status_code: int, message: str) -> None:
    extra = {"http_method": request.method, "path": request.url.path, "status_code": status_code}
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, message, extra=extra)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, message, extra=extra)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path"))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Render every failure as {"error": "<message>"} with the matching status."""

    @app.exception_handler(ContentServiceError)
    async def _content_service_error(request: Request, exc: ContentServiceError):
        _log(request, exc.status_code, exc.message)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        _log(request, 400, message)
        return error_response(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        _log(request, exc.status_code, message)
        return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))
