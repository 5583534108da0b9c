from .auth import TokenDep, get_token_validator, parse_bearer_token, require_token
from .storage import StorageDep, get_storage

__all__ = [
    "StorageDep",
    "TokenDep",
    "get_storage",
    "get_token_validator",
    "parse_bearer_token",
    "require_token",
]
