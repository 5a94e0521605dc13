"""Public photographer search."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request

from photo_marketplace.api.serializers import present_match

if TYPE_CHECKING:
    from photo_marketplace.containers import AppContainer

router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("/photographers")
async def search_photographers(
    request: Request,
    query: str | None = None,
    lat: float | None = None,
    lng: float | None = None,
    radius: float | None = None,
) -> list[dict[str, Any]]:
    """Find photographers by text, near a point when coordinates are given."""
    container: AppContainer = request.app.state.container
    matches = container.search_service.search(query, lat, lng, radius)
    return [present_match(match) for match in matches]
