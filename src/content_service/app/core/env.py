from __future__ import annotations

import os
import warnings
from enum import StrEnum
from functools import cache


class Env(StrEnum):
    LOCAL = "local"
    DEV = "dev"
    TEST = "test"
    PROD = "prod"


# accepted APP_ENV spellings besides the canonical values
ALIASES: dict[str, Env] = {
    "development": Env.DEV,
    "testing": Env.TEST,
    "staging": Env.TEST,
    "production": Env.PROD,
}


def parse_env(raw: str | None) -> Env | None:
    value = (raw or "").strip().lower()
    if not value:
        return None
    try:
        return Env(value)
    except ValueError:
        return ALIASES.get(value)


@cache
def get_env() -> Env:
    """The deployment environment named by APP_ENV, LOCAL when unset or unknown."""
    raw = os.getenv("APP_ENV")
    env = parse_env(raw)
    if env is None and raw:
        warnings.warn(f"Unrecognized APP_ENV '{raw}', using 'local'.", RuntimeWarning, stacklevel=2)
    return env or Env.LOCAL


ENV: Env = get_env()
IS_LOCAL = ENV is Env.LOCAL
IS_DEV = ENV is Env.DEV
IS_TEST = ENV is Env.TEST
IS_PROD = ENV is Env.PROD
