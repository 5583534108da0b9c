from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import httpx

from content_service.exceptions import AuthServiceError, UnauthorizedError

from .settings import AuthSettings

logger = logging.getLogger(__name__)


@runtime_checkable
class TokenValidator(Protocol):
    async def validate(self, token: str) -> None:
        """Return when the token is valid, raise UnauthorizedError when it is not."""
        ...


class HttpTokenValidator:
    """Asks the external login service whether a bearer token is valid."""

    def __init__(self, settings: AuthSettings, client: httpx.AsyncClient | None = None):
        self.settings = settings
        self.url = settings.resolved_service_url
        self.client = client or httpx.AsyncClient(timeout=settings.timeout_seconds)

    async def validate(self, token: str) -> None:
        try:
            resp = await self.client.get(self.url, headers={"Authorization": f"Bearer {token}"})
        except httpx.HTTPError as exc:
            logger.error("Authentication service request failed: %s", exc)
            raise AuthServiceError(f"unable to reach authentication service: {exc}") from exc
        if not resp.is_success:
            raise UnauthorizedError(f"token rejected by authentication service (status {resp.status_code})")

    async def aclose(self) -> None:
        await self.client.aclose()
