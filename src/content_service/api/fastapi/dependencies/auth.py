from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from content_service.auth.validator import TokenValidator
from content_service.exceptions import MissingCredentialsError


def parse_bearer_token(header: str | None) -> str:
    """Extract <token> from an ``Authorization: Bearer <token>`` header value."""
    if not header:
        raise MissingCredentialsError("no authorization header found")
    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise MissingCredentialsError("authorization header must be in format 'Bearer <token>'")
    return parts[1]


def get_token_validator(request: Request) -> TokenValidator:
    return request.app.state.token_validator  # type: ignore[attr-defined]


async def require_token(
    request: Request,
    validator: Annotated[TokenValidator, Depends(get_token_validator)],
) -> str:
    # header shape is checked before the validator is ever called
    token = parse_bearer_token(request.headers.get("Authorization"))
    await validator.validate(token)
    return token


TokenDep = Annotated[str, Depends(require_token)]
