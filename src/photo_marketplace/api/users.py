"""Endpoints for the signed-in user and the client directory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Depends, Request, status

from photo_marketplace.adapters.field_mapping import USERS, to_columns
from photo_marketplace.api.dependencies import require_user
from photo_marketplace.api.serializers import (
    present_user,
    present_user_with_profile,
)
from photo_marketplace.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from photo_marketplace.containers import AppContainer

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/me")
async def get_me(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, Any]:
    """Return the requester with their photographer profile, if any."""
    container: AppContainer = request.app.state.container
    return present_user_with_profile(container.user_service.get_with_profile(user))


@router.patch("/me")
async def update_me(
    request: Request,
    body: dict[str, Any] = Body(...),
    user: UserRecord = Depends(require_user),
) -> dict[str, Any]:
    container: AppContainer = request.app.state.container
    patch = to_columns(USERS, body)
    if "password" in body:
        patch["password"] = body["password"]
    return present_user(container.user_service.update_me(user, patch))


@router.get("/clients")
async def list_clients(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, Any]]:
    container: AppContainer = request.app.state.container
    clients = container.user_service.list_clients(user)
    return [present_user(client) for client in clients]


@router.post("/clients", status_code=status.HTTP_201_CREATED)
async def create_client(
    request: Request,
    body: dict[str, Any] = Body(...),
    user: UserRecord = Depends(require_user),
) -> dict[str, Any]:
    """Register a client on behalf of the requesting photographer."""
    container: AppContainer = request.app.state.container
    created = container.user_service.create_client(user, to_columns(USERS, body))
    return present_user(created)
