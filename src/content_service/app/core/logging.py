from __future__ import annotations

import json
import logging
import os
from logging.config import dictConfig
from traceback import format_exception

from content_service.app.core.env import IS_PROD

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
PLAIN_FORMAT = "%(asctime)s %(levelname)-5s [pid:%(process)d] %(name)s: %(message)s"

# record attribute -> key under "http" in the JSON payload
HTTP_FIELDS = {"http_method": "method", "path": "path", "status_code": "status"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with file and request context when the record carries it."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, object] = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "pid": record.process,
            "message": record.getMessage(),
        }
        file_id = getattr(record, "file_id", None)
        if file_id is not None:
            payload["file_id"] = str(file_id)
        http = {
            key: getattr(record, attr)
            for attr, key in HTTP_FIELDS.items()
            if getattr(record, attr, None) is not None
        }
        if http:
            payload["http"] = http
        if record.exc_info:
            payload["error"] = self._error(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

    @staticmethod
    def _error(exc_info) -> dict[str, object]:
        exc_type, exc, tb = exc_info
        err: dict[str, object] = {}
        if exc_type is not None:
            err["type"] = exc_type.__name__
        if exc is not None and str(exc):
            err["message"] = str(exc)
        stack = "".join(format_exception(exc_type, exc, tb))
        limit = int(os.getenv("LOG_STACK_LIMIT", "4000"))
        err["stack"] = stack if len(stack) <= limit else stack[:limit] + "...(truncated)"
        return err


def _read_level() -> str:
    return os.getenv("LOG_LEVEL") or ("INFO" if IS_PROD else "DEBUG")


def _read_format() -> str:
    return os.getenv("LOG_FORMAT") or ("json" if IS_PROD else "plain")


def setup_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure the root logger. Explicit arguments win over LOG_LEVEL / LOG_FORMAT."""
    level = (level or _read_level()).upper()
    formatter = "json" if (fmt or _read_format()).lower() == "json" else "plain"

    # library loggers hand their records to the root handler
    quiet = {"handlers": [], "propagate": True}
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "plain": {"format": PLAIN_FORMAT, "datefmt": DATE_FORMAT},
                "json": {"()": JsonFormatter, "datefmt": DATE_FORMAT},
            },
            "handlers": {
                "stream": {"class": "logging.StreamHandler", "level": level, "formatter": formatter},
            },
            "root": {"level": level, "handlers": ["stream"]},
            "loggers": {
                "uvicorn": {"level": "INFO", **quiet},
                "uvicorn.error": {"level": "INFO", **quiet},
                "uvicorn.access": {"level": "INFO", **quiet},
                "pymongo": {"level": "WARNING", **quiet},
                "httpx": {"level": "WARNING", **quiet},
            },
        }
    )
