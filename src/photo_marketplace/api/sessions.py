"""Session (booking) endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Depends, Request, Response, status

from photo_marketplace.adapters.field_mapping import SESSIONS, to_columns
from photo_marketplace.api.dependencies import require_user, split_money_unit
from photo_marketplace.api.serializers import present, present_many
from photo_marketplace.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from photo_marketplace.containers import AppContainer

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.get("")
async def list_sessions(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, Any]]:
    """Return the requester's sessions, newest first."""
    container: AppContainer = request.app.state.container
    return present_many(SESSIONS, container.session_service.list_sessions(user))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_session(
    request: Request,
    body: dict[str, Any] = Body(...),
    user: UserRecord = Depends(require_user),
) -> dict[str, Any]:
    container: AppContainer = request.app.state.container
    data, unit = split_money_unit(body)
    session = container.session_service.create_session(
        user, to_columns(SESSIONS, data), unit
    )
    return present(SESSIONS, session)


@router.get("/{session_id}")
async def get_session(
    session_id: int, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, Any]:
    container: AppContainer = request.app.state.container
    return present(SESSIONS, container.session_service.get_session(user, session_id))


@router.patch("/{session_id}")
async def update_session(
    session_id: int,
    request: Request,
    body: dict[str, Any] = Body(...),
    user: UserRecord = Depends(require_user),
) -> dict[str, Any]:
    """Apply a partial update; clients can only change payment fields."""
    container: AppContainer = request.app.state.container
    data, unit = split_money_unit(body)
    session = container.session_service.update_session(
        user, session_id, to_columns(SESSIONS, data), unit
    )
    return present(SESSIONS, session)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: int, request: Request, user: UserRecord = Depends(require_user)
) -> Response:
    container: AppContainer = request.app.state.container
    container.session_service.delete_session(user, session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
