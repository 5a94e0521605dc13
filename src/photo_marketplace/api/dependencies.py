"""Shared FastAPI dependencies: bearer auth and request body helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import Depends, Header, Request

from photo_marketplace.domain.models import UserRecord  # noqa: TC001
from photo_marketplace.errors import AuthenticationError, ValidationError
from photo_marketplace.services.money import MONEY_UNITS

if TYPE_CHECKING:
    from photo_marketplace.containers import AppContainer

MONEY_UNIT_FIELD = "moneyUnit"


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Extract the token from an `Authorization: Bearer ...` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_user(
    request: Request, token: str | None = Depends(bearer_token)
) -> UserRecord:
    """Resolve the requesting user or fail with 401."""
    container: AppContainer = request.app.state.container
    if token is None:
        raise AuthenticationError("Not authenticated")
    return container.auth_service.resolve_bearer(token)


async def optional_user(
    request: Request, token: str | None = Depends(bearer_token)
) -> UserRecord | None:
    """Resolve the requesting user, or None when unauthenticated."""
    container: AppContainer = request.app.state.container
    return container.auth_service.current_session(token)


def split_money_unit(body: dict[str, Any]) -> tuple[dict[str, Any], str | None]:
    """Separate the optional `moneyUnit` marker from a request body."""
    data = dict(body)
    unit = data.pop(MONEY_UNIT_FIELD, None)
    if unit is not None and unit not in MONEY_UNITS:
        raise ValidationError(
            f"Validation error: {MONEY_UNIT_FIELD}: must be one of "
            + ", ".join(sorted(MONEY_UNITS))
        )
    return data, unit
