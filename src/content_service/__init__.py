from . import api, app

from .api.fastapi import create_app
from .exceptions import ContentServiceError

__all__ = [
    "app",
    "api",
    "create_app",
    "ContentServiceError",
]
