from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    # flat = easy env overrides
    name: str = "Content Service API"
    version: str = "0.1.0"
    host: str = "0.0.0.0"
    port: int = 8005
    shutdown_timeout: int = 5
    max_upload_bytes: int = 32 * 1024 * 1024
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    model_config = SettingsConfigDict(
        env_prefix="APP_",            # APP_NAME, APP_PORT, ...
        env_file=".env",
        extra="ignore",
        frozen=True,
    )


@lru_cache
def get_app_settings(**kwargs) -> AppSettings:
    # Only include kwargs that are not None, so defaults in AppSettings are used
    filtered_kwargs = {k: v for k, v in kwargs.items() if v is not None}
    return AppSettings(**filtered_kwargs)
