"""Conversion of domain objects to camelCase JSON payloads."""

from dataclasses import asdict
from typing import Any

from photo_marketplace.adapters.field_mapping import (
    PHOTOGRAPHER_PROFILES,
    USERS,
    from_columns,
)
from photo_marketplace.domain.finance import (
    CategoryTotal,
    FinancialSummary,
    MetricComparison,
    MonthProjection,
    PeriodTotals,
)
from photo_marketplace.domain.models import IdentitySession, UserRecord
from photo_marketplace.domain.reviews import RatingSummary
from photo_marketplace.services.search import PhotographerMatch
from photo_marketplace.services.users import UserWithProfile


def present(entity: str, record: Any) -> dict[str, Any]:
    """Render a stored record with API field names."""
    return from_columns(entity, asdict(record))


def present_many(entity: str, records: list[Any]) -> list[dict[str, Any]]:
    return [present(entity, record) for record in records]


def present_user(user: UserRecord) -> dict[str, Any]:
    return present(USERS, user)


def present_user_with_profile(result: UserWithProfile) -> dict[str, Any]:
    payload = present_user(result.user)
    payload["photographerProfile"] = (
        present(PHOTOGRAPHER_PROFILES, result.profile) if result.profile else None
    )
    return payload


def present_session_tokens(session: IdentitySession | None) -> dict[str, Any] | None:
    if session is None:
        return None
    return {
        "accessToken": session.access_token,
        "refreshToken": session.refresh_token,
        "expiresAt": session.expires_at,
    }


def present_summary(summary: FinancialSummary) -> dict[str, Any]:
    return {
        "income": summary.income,
        "expense": summary.expense,
        "profit": summary.profit,
        "sessionCount": summary.session_count,
        "clientCount": summary.client_count,
        "averageSessionValue": summary.average_session_value,
        "hoursWorked": summary.hours_worked,
    }


def present_period(totals: PeriodTotals) -> dict[str, Any]:
    return {
        "start": totals.start.isoformat(),
        "income": totals.income,
        "expense": totals.expense,
        "balance": totals.balance,
    }


def present_comparison(metric: MetricComparison) -> dict[str, Any]:
    return {
        "metric": metric.name,
        "current": metric.current,
        "previous": metric.previous,
        "percentChange": metric.percent_change,
    }


def present_projection(month: MonthProjection) -> dict[str, Any]:
    return {
        "month": month.month.isoformat(),
        "actualIncome": month.actual_income,
        "actualExpense": month.actual_expense,
        "actualProfit": month.actual_profit,
        "projectedIncome": month.projected_income,
        "projectedExpense": month.projected_expense,
        "projectedProfit": month.projected_profit,
    }


def present_category(total: CategoryTotal) -> dict[str, Any]:
    return {"category": total.category, "amount": total.amount}


def present_rating_summary(summary: RatingSummary) -> dict[str, Any]:
    return {
        "reviewCount": summary.review_count,
        "averageRating": summary.average_rating,
        "averageQualityRating": summary.average_quality_rating,
        "averageProfessionalismRating": summary.average_professionalism_rating,
    }


def present_match(match: PhotographerMatch) -> dict[str, Any]:
    payload = present_user(match.user)
    payload["photographerProfile"] = (
        present(PHOTOGRAPHER_PROFILES, match.profile) if match.profile else None
    )
    payload["distanceKm"] = match.distance_km
    return payload
