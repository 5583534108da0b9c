from __future__ import annotations

import os
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    # GET <service_url> with the caller's bearer token; 2xx means valid
    service_url: Optional[str] = None
    timeout_seconds: float = 5.0

    model_config = SettingsConfigDict(env_prefix="AUTH_", env_file=".env", extra="ignore", frozen=True)

    @property
    def resolved_service_url(self) -> str:
        url = self.service_url or os.getenv("LOGIN_SERVICE_URL")
        if not url:
            raise ValueError("AUTH_SERVICE_URL or LOGIN_SERVICE_URL must be set")
        return url


_settings: AuthSettings | None = None


def get_auth_settings() -> AuthSettings:
    global _settings
    if _settings is None:
        _settings = AuthSettings()
    return _settings
