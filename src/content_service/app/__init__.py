from .core.env import ENV, IS_DEV, IS_LOCAL, IS_PROD, IS_TEST, Env, get_env

CURRENT_ENVIRONMENT = ENV

__all__ = [
    "CURRENT_ENVIRONMENT",
    "ENV",
    "Env",
    "IS_DEV",
    "IS_LOCAL",
    "IS_PROD",
    "IS_TEST",
    "get_env",
]
