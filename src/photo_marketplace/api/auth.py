"""Authentication endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Depends, Request, status

from photo_marketplace.api.dependencies import bearer_token, optional_user
from photo_marketplace.api.serializers import present_session_tokens, present_user
from photo_marketplace.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from photo_marketplace.containers import AppContainer
    from photo_marketplace.services.auth import AuthResult

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _present_result(result: AuthResult) -> dict[str, Any]:
    payload: dict[str, Any] = {"user": present_user(result.user)}
    if result.session is not None:
        payload["session"] = present_session_tokens(result.session)
    if result.message:
        payload["message"] = result.message
    return payload


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    request: Request, body: dict[str, Any] = Body(...)
) -> dict[str, Any]:
    """Create an account and sign in when the email is already confirmed."""
    container: AppContainer = request.app.state.container
    return _present_result(container.auth_service.register(body))


@router.post("/login")
async def login(request: Request, body: dict[str, Any] = Body(...)) -> dict[str, Any]:
    container: AppContainer = request.app.state.container
    return _present_result(container.auth_service.login(body))


@router.post("/confirm-email")
async def confirm_email(
    request: Request, body: dict[str, Any] = Body(...)
) -> dict[str, str]:
    """Confirm an email address by hand."""
    container: AppContainer = request.app.state.container
    return {"message": container.auth_service.confirm_email(body)}


@router.post("/resend-verification")
async def resend_verification(
    request: Request, body: dict[str, Any] = Body(...)
) -> dict[str, str]:
    container: AppContainer = request.app.state.container
    return {"message": container.auth_service.resend_verification(body)}


@router.post("/logout")
async def logout(
    request: Request, token: str | None = Depends(bearer_token)
) -> dict[str, str]:
    container: AppContainer = request.app.state.container
    container.auth_service.logout(token)
    return {"message": "Logged out"}


@router.get("/session")
async def current_session(
    user: UserRecord | None = Depends(optional_user),
) -> dict[str, Any]:
    """Return the signed-in user, or `{"user": null}`."""
    return {"user": present_user(user) if user else None}
