"""Review endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Depends, Request, status

from photo_marketplace.adapters.field_mapping import REVIEWS, to_columns
from photo_marketplace.api.dependencies import require_user
from photo_marketplace.api.serializers import (
    present,
    present_many,
    present_rating_summary,
)
from photo_marketplace.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from photo_marketplace.containers import AppContainer

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_review(
    request: Request,
    body: dict[str, Any] = Body(...),
    user: UserRecord = Depends(require_user),
) -> dict[str, Any]:
    """Review a completed session as its client."""
    container: AppContainer = request.app.state.container
    review = container.review_service.create_review(user, to_columns(REVIEWS, body))
    return present(REVIEWS, review)


@router.get("/photographer/{photographer_id}")
async def list_photographer_reviews(
    photographer_id: int, request: Request
) -> list[dict[str, Any]]:
    container: AppContainer = request.app.state.container
    reviews = container.review_service.list_for_photographer(photographer_id)
    return present_many(REVIEWS, reviews)


@router.get("/photographer/{photographer_id}/summary")
async def photographer_rating_summary(
    photographer_id: int, request: Request
) -> dict[str, Any]:
    container: AppContainer = request.app.state.container
    summary = container.review_service.rating_summary(photographer_id)
    return present_rating_summary(summary)
