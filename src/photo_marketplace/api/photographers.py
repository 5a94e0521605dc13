"""Photographer profile and service catalogue endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Depends, Request, Response, status

from photo_marketplace.adapters.field_mapping import (
    PHOTOGRAPHER_PROFILES,
    SERVICES,
    to_columns,
)
from photo_marketplace.api.dependencies import require_user, split_money_unit
from photo_marketplace.api.serializers import present, present_many
from photo_marketplace.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from photo_marketplace.containers import AppContainer

router = APIRouter(prefix="/api/photographers", tags=["photographers"])


@router.get("/profile")
async def get_profile(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, Any]:
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get_profile(user)
    return present(PHOTOGRAPHER_PROFILES, profile)


@router.patch("/profile")
async def update_profile(
    request: Request,
    body: dict[str, Any] = Body(...),
    user: UserRecord = Depends(require_user),
) -> dict[str, Any]:
    """Create or update the requester's profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.upsert_profile(
        user, to_columns(PHOTOGRAPHER_PROFILES, body)
    )
    return present(PHOTOGRAPHER_PROFILES, profile)


@router.get("/services")
async def list_own_services(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, Any]]:
    container: AppContainer = request.app.state.container
    return present_many(SERVICES, container.catalog_service.list_own(user))


@router.post("/services", status_code=status.HTTP_201_CREATED)
async def create_service(
    request: Request,
    body: dict[str, Any] = Body(...),
    user: UserRecord = Depends(require_user),
) -> dict[str, Any]:
    container: AppContainer = request.app.state.container
    data, unit = split_money_unit(body)
    service = container.catalog_service.create_service(
        user, to_columns(SERVICES, data), unit
    )
    return present(SERVICES, service)


@router.patch("/services/{service_id}")
async def update_service(
    service_id: int,
    request: Request,
    body: dict[str, Any] = Body(...),
    user: UserRecord = Depends(require_user),
) -> dict[str, Any]:
    container: AppContainer = request.app.state.container
    data, unit = split_money_unit(body)
    service = container.catalog_service.update_service(
        user, service_id, to_columns(SERVICES, data), unit
    )
    return present(SERVICES, service)


@router.delete("/services/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(
    service_id: int, request: Request, user: UserRecord = Depends(require_user)
) -> Response:
    container: AppContainer = request.app.state.container
    container.catalog_service.delete_service(user, service_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{photographer_id}/services")
async def list_public_services(
    photographer_id: int, request: Request
) -> list[dict[str, Any]]:
    """Return a photographer's active services."""
    container: AppContainer = request.app.state.container
    services = container.catalog_service.list_active_for_photographer(photographer_id)
    return present_many(SERVICES, services)
