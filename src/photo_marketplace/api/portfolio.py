"""Portfolio and service area endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Depends, Request, Response, status

from photo_marketplace.adapters.field_mapping import (
    PORTFOLIO_ITEMS,
    SERVICE_AREAS,
    to_columns,
)
from photo_marketplace.api.dependencies import require_user
from photo_marketplace.api.serializers import present, present_many
from photo_marketplace.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from photo_marketplace.containers import AppContainer

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])
areas_router = APIRouter(prefix="/api/service-areas", tags=["service-areas"])


@router.get("/{user_id}")
async def list_portfolio(user_id: int, request: Request) -> list[dict[str, Any]]:
    """Return a photographer's portfolio, featured items first."""
    container: AppContainer = request.app.state.container
    items = container.portfolio_service.list_items(user_id)
    return present_many(PORTFOLIO_ITEMS, items)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_portfolio_item(
    request: Request,
    body: dict[str, Any] = Body(...),
    user: UserRecord = Depends(require_user),
) -> dict[str, Any]:
    container: AppContainer = request.app.state.container
    item = container.portfolio_service.create_item(
        user, to_columns(PORTFOLIO_ITEMS, body)
    )
    return present(PORTFOLIO_ITEMS, item)


@router.patch("/{item_id}")
async def update_portfolio_item(
    item_id: int,
    request: Request,
    body: dict[str, Any] = Body(...),
    user: UserRecord = Depends(require_user),
) -> dict[str, Any]:
    container: AppContainer = request.app.state.container
    item = container.portfolio_service.update_item(
        user, item_id, to_columns(PORTFOLIO_ITEMS, body)
    )
    return present(PORTFOLIO_ITEMS, item)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_portfolio_item(
    item_id: int, request: Request, user: UserRecord = Depends(require_user)
) -> Response:
    container: AppContainer = request.app.state.container
    container.portfolio_service.delete_item(user, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@areas_router.get("/{user_id}")
async def list_service_areas(user_id: int, request: Request) -> list[dict[str, Any]]:
    container: AppContainer = request.app.state.container
    areas = container.service_area_service.list_areas(user_id)
    return present_many(SERVICE_AREAS, areas)


@areas_router.post("", status_code=status.HTTP_201_CREATED)
async def create_service_area(
    request: Request,
    body: dict[str, Any] = Body(...),
    user: UserRecord = Depends(require_user),
) -> dict[str, Any]:
    container: AppContainer = request.app.state.container
    area = container.service_area_service.create_area(
        user, to_columns(SERVICE_AREAS, body)
    )
    return present(SERVICE_AREAS, area)


@areas_router.delete("/{area_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service_area(
    area_id: int, request: Request, user: UserRecord = Depends(require_user)
) -> Response:
    container: AppContainer = request.app.state.container
    container.service_area_service.delete_area(user, area_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
