from .settings import AuthSettings, get_auth_settings
from .validator import HttpTokenValidator, TokenValidator

__all__ = [
    "AuthSettings",
    "HttpTokenValidator",
    "TokenValidator",
    "get_auth_settings",
]
