"""Financial report endpoints for photographers."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING, Any, Literal

from fastapi import APIRouter, Depends, Request

from photo_marketplace.api.dependencies import require_user
from photo_marketplace.api.serializers import (
    present_category,
    present_comparison,
    present_period,
    present_projection,
    present_summary,
)
from photo_marketplace.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from photo_marketplace.containers import AppContainer

router = APIRouter(prefix="/api/finances", tags=["finances"])


@router.get("/summary")
async def summary(
    request: Request,
    start: date | None = None,
    end: date | None = None,
    user: UserRecord = Depends(require_user),
) -> dict[str, Any]:
    """Return reconciled totals, optionally within an inclusive date range."""
    container: AppContainer = request.app.state.container
    return present_summary(container.finance_service.summary(user, start, end))


@router.get("/monthly")
async def monthly(
    request: Request,
    granularity: Literal["week", "month", "year"] = "month",
    user: UserRecord = Depends(require_user),
) -> list[dict[str, Any]]:
    """Return totals per calendar bucket (month by default)."""
    container: AppContainer = request.app.state.container
    periods = container.finance_service.periods(user, granularity)
    return [present_period(period) for period in periods]


@router.get("/comparison")
async def comparison(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, Any]]:
    """Compare this month with the previous one."""
    container: AppContainer = request.app.state.container
    metrics = container.finance_service.comparison(user)
    return [present_comparison(metric) for metric in metrics]


@router.get("/projection")
async def projection(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, Any]]:
    container: AppContainer = request.app.state.container
    months = container.finance_service.projection(user)
    return [present_projection(month) for month in months]


@router.get("/categories")
async def categories(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, Any]]:
    container: AppContainer = request.app.state.container
    totals = container.finance_service.categories(user)
    return [present_category(total) for total in totals]


@router.get("/chart")
async def chart(
    request: Request,
    period: Literal["week", "month", "year"] = "month",
    user: UserRecord = Depends(require_user),
) -> list[dict[str, Any]]:
    """Return chart points for the current week, month or year."""
    container: AppContainer = request.app.state.container
    points = container.finance_service.chart(user, period)
    return [present_period(point) for point in points]
