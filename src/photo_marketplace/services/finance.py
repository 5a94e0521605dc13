"""Financial aggregation over transactions and session payments.

Income has two sources: explicit income transactions, and the `amount_paid` of
sessions. A session's payment counts only when no income transaction already
references that session; `reconcile_income` is the single place that rule
lives, and every report below goes through it.
"""

import calendar
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Literal

from photo_marketplace.domain.finance import (
    CategoryTotal,
    FinancialSummary,
    MetricComparison,
    MonthProjection,
    PeriodTotals,
)
from photo_marketplace.domain.models import UserRecord
from photo_marketplace.domain.sessions import SessionRecord
from photo_marketplace.domain.transactions import (
    EXPENSE,
    INCOME,
    TransactionRecord,
)
from photo_marketplace.errors import PermissionDeniedError, ValidationError
from photo_marketplace.services.sessions import SessionRepository
from photo_marketplace.services.transactions import TransactionRepository

DECEMBER = 12
MONTHS_IN_YEAR = 12

ChartPeriod = Literal["week", "month", "year"]
Granularity = Literal["week", "month", "year"]


def income_session_ids(transactions: Iterable[TransactionRecord]) -> set[int]:
    """Return ids of sessions already represented by an income transaction."""
    return {
        transaction.session_id
        for transaction in transactions
        if transaction.type == INCOME and transaction.session_id is not None
    }


def reconcile_income(
    transactions: Iterable[TransactionRecord],
    sessions: Iterable[SessionRecord],
    counted_session_ids: set[int] | None = None,
) -> int:
    """Sum income transactions plus payments of sessions not yet counted.

    `counted_session_ids` lets a caller that has split transactions into
    buckets keep the guard computed over all of them.
    """
    transactions = list(transactions)
    guard = (
        income_session_ids(transactions)
        if counted_session_ids is None
        else counted_session_ids
    )
    income = sum(t.amount for t in transactions if t.type == INCOME)
    for session in sessions:
        if session.amount_paid > 0 and session.id not in guard:
            income += session.amount_paid
    return income


def total_expense(transactions: Iterable[TransactionRecord]) -> int:
    """Sum expense magnitudes; sessions never contribute to expense."""
    return sum(abs(t.amount) for t in transactions if t.type == EXPENSE)


def summarize(
    transactions: Sequence[TransactionRecord],
    sessions: Sequence[SessionRecord],
    counted_session_ids: set[int] | None = None,
) -> FinancialSummary:
    """Compute the headline figures for a set of records."""
    income = reconcile_income(transactions, sessions, counted_session_ids)
    expense = total_expense(transactions)
    session_count = len(sessions)
    return FinancialSummary(
        income=income,
        expense=expense,
        profit=income - expense,
        session_count=session_count,
        client_count=len({session.client_id for session in sessions}),
        average_session_value=(
            sum(session.total_price for session in sessions) / session_count
            if session_count
            else 0.0
        ),
        hours_worked=sum(session.duration or 0 for session in sessions) / 60,
    )


def percent_change(current: float, previous: float) -> float:
    """Return the change from `previous` to `current` in percent."""
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return (current - previous) / previous * 100


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def day_start(value: date | datetime) -> date:
    return _as_date(value)


def week_start(value: date | datetime) -> date:
    """Return the Sunday starting the week of `value`."""
    day = _as_date(value)
    return day - timedelta(days=(day.weekday() + 1) % 7)


def month_start(value: date | datetime) -> date:
    return _as_date(value).replace(day=1)


def year_start(value: date | datetime) -> date:
    return _as_date(value).replace(month=1, day=1)


def add_months(value: date, months: int) -> date:
    """Shift the first day of a month by a number of months."""
    index = value.year * 12 + (value.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


_BUCKET_KEYS: dict[str, Callable[[date | datetime], date]] = {
    "day": day_start,
    "week": week_start,
    "month": month_start,
    "year": year_start,
}


def bucket_totals(
    transactions: Sequence[TransactionRecord],
    sessions: Sequence[SessionRecord],
    granularity: str,
) -> list[PeriodTotals]:
    """Group records into calendar buckets and reconcile each bucket."""
    key = _BUCKET_KEYS[granularity]
    guard = income_session_ids(transactions)
    grouped_transactions: dict[date, list[TransactionRecord]] = {}
    grouped_sessions: dict[date, list[SessionRecord]] = {}
    for transaction in transactions:
        grouped_transactions.setdefault(key(transaction.date), []).append(transaction)
    for session in sessions:
        grouped_sessions.setdefault(key(session.date), []).append(session)
    starts = sorted(set(grouped_transactions) | set(grouped_sessions))
    return [
        _period_totals(
            start,
            grouped_transactions.get(start, []),
            grouped_sessions.get(start, []),
            guard,
        )
        for start in starts
    ]


def bucket_by_week(
    transactions: Sequence[TransactionRecord], sessions: Sequence[SessionRecord]
) -> list[PeriodTotals]:
    return bucket_totals(transactions, sessions, "week")


def bucket_by_month(
    transactions: Sequence[TransactionRecord], sessions: Sequence[SessionRecord]
) -> list[PeriodTotals]:
    return bucket_totals(transactions, sessions, "month")


def bucket_by_year(
    transactions: Sequence[TransactionRecord], sessions: Sequence[SessionRecord]
) -> list[PeriodTotals]:
    return bucket_totals(transactions, sessions, "year")


def _period_totals(
    start: date,
    transactions: Sequence[TransactionRecord],
    sessions: Sequence[SessionRecord],
    guard: set[int],
) -> PeriodTotals:
    return PeriodTotals(
        start=start,
        income=reconcile_income(transactions, sessions, guard),
        expense=total_expense(transactions),
    )


def _in_month(value: date | datetime, month: date) -> bool:
    return value.year == month.year and value.month == month.month


def compare_months(
    transactions: Sequence[TransactionRecord],
    sessions: Sequence[SessionRecord],
    today: date,
) -> list[MetricComparison]:
    """Compare the current calendar month with the previous one."""
    guard = income_session_ids(transactions)
    current_month = month_start(today)
    previous_month = add_months(current_month, -1)
    current = summarize(
        [t for t in transactions if _in_month(t.date, current_month)],
        [s for s in sessions if _in_month(s.date, current_month)],
        guard,
    )
    previous = summarize(
        [t for t in transactions if _in_month(t.date, previous_month)],
        [s for s in sessions if _in_month(s.date, previous_month)],
        guard,
    )
    metrics = (
        ("income", current.income, previous.income),
        ("expense", current.expense, previous.expense),
        ("profit", current.profit, previous.profit),
        ("sessions", current.session_count, previous.session_count),
        ("clients", current.client_count, previous.client_count),
        (
            "average_session_value",
            current.average_session_value,
            previous.average_session_value,
        ),
        ("hours_worked", current.hours_worked, previous.hours_worked),
    )
    return [
        MetricComparison(
            name=name,
            current=value,
            previous=before,
            percent_change=percent_change(value, before),
        )
        for name, value, before in metrics
    ]


def project_year(
    transactions: Sequence[TransactionRecord],
    sessions: Sequence[SessionRecord],
    today: date,
) -> list[MonthProjection]:
    """Return actual figures so far and a flat projection for later months."""
    year = today.year
    guard = income_session_ids(transactions)
    actual: list[PeriodTotals] = []
    for month in range(1, MONTHS_IN_YEAR + 1):
        start = date(year, month, 1)
        actual.append(
            _period_totals(
                start,
                [t for t in transactions if _in_month(t.date, start)],
                [s for s in sessions if _in_month(s.date, start)],
                guard,
            )
        )

    elapsed = actual[: today.month]
    with_data = [entry for entry in elapsed if entry.income > 0 or entry.expense > 0]
    months_with_data = len(with_data)
    average_income = (
        sum(entry.income for entry in with_data) / months_with_data
        if months_with_data
        else 0.0
    )
    average_expense = (
        sum(entry.expense for entry in with_data) / months_with_data
        if months_with_data
        else 0.0
    )

    projections = []
    for entry in actual:
        if entry.start.month <= today.month:
            projected_income = float(entry.income)
            projected_expense = float(entry.expense)
        else:
            projected_income = average_income
            projected_expense = average_expense
        projections.append(
            MonthProjection(
                month=entry.start,
                actual_income=float(entry.income),
                actual_expense=float(entry.expense),
                projected_income=projected_income,
                projected_expense=projected_expense,
            )
        )
    return projections


def expenses_by_category(
    transactions: Iterable[TransactionRecord],
) -> list[CategoryTotal]:
    """Total expenses per category, largest first."""
    totals: dict[str, int] = {}
    for transaction in transactions:
        if transaction.type != EXPENSE:
            continue
        totals[transaction.category] = totals.get(transaction.category, 0) + abs(
            transaction.amount
        )
    return [
        CategoryTotal(category=category, amount=amount)
        for category, amount in sorted(
            totals.items(), key=lambda item: item[1], reverse=True
        )
    ]


def chart_series(
    transactions: Sequence[TransactionRecord],
    sessions: Sequence[SessionRecord],
    period: ChartPeriod,
    today: date,
) -> list[PeriodTotals]:
    """Return chart points: days of this week or month, or months of this year."""
    if period == "week":
        first = week_start(today)
        starts = [first + timedelta(days=offset) for offset in range(7)]
        key = day_start
    elif period == "month":
        first = month_start(today)
        days = calendar.monthrange(first.year, first.month)[1]
        starts = [first + timedelta(days=offset) for offset in range(days)]
        key = day_start
    elif period == "year":
        starts = [date(today.year, month, 1) for month in range(1, DECEMBER + 1)]
        key = month_start
    else:
        raise ValidationError(f"Unknown chart period: {period}")

    guard = income_session_ids(transactions)
    return [
        _period_totals(
            start,
            [t for t in transactions if key(t.date) == start],
            [s for s in sessions if key(s.date) == start],
            guard,
        )
        for start in starts
    ]


def _within(value: date | datetime, start: date | None, end: date | None) -> bool:
    day = _as_date(value)
    if start is not None and day < start:
        return False
    return not (end is not None and day > end)


@dataclass
class FinanceService:
    """Financial reports for one photographer."""

    transactions: TransactionRepository
    sessions: SessionRepository

    def summary(
        self,
        requester: UserRecord,
        start: date | None = None,
        end: date | None = None,
    ) -> FinancialSummary:
        """Return totals, optionally restricted to an inclusive date range."""
        transactions, sessions = self._load(requester)
        guard = income_session_ids(transactions)
        return summarize(
            [t for t in transactions if _within(t.date, start, end)],
            [s for s in sessions if _within(s.date, start, end)],
            guard,
        )

    def periods(
        self, requester: UserRecord, granularity: Granularity = "month"
    ) -> list[PeriodTotals]:
        """Return per-week, per-month or per-year totals."""
        if granularity not in {"week", "month", "year"}:
            raise ValidationError(f"Unknown granularity: {granularity}")
        transactions, sessions = self._load(requester)
        return bucket_totals(transactions, sessions, granularity)

    def monthly(self, requester: UserRecord) -> list[PeriodTotals]:
        return self.periods(requester, "month")

    def comparison(
        self, requester: UserRecord, today: date | None = None
    ) -> list[MetricComparison]:
        """Compare this month with the previous one."""
        transactions, sessions = self._load(requester)
        return compare_months(transactions, sessions, today or date.today())

    def projection(
        self, requester: UserRecord, today: date | None = None
    ) -> list[MonthProjection]:
        """Project the rest of the current year from the months so far."""
        transactions, sessions = self._load(requester)
        return project_year(transactions, sessions, today or date.today())

    def categories(self, requester: UserRecord) -> list[CategoryTotal]:
        """Return expense totals per category."""
        transactions, _ = self._load(requester)
        return expenses_by_category(transactions)

    def chart(
        self,
        requester: UserRecord,
        period: ChartPeriod = "month",
        today: date | None = None,
    ) -> list[PeriodTotals]:
        """Return chart points for the current week, month or year."""
        transactions, sessions = self._load(requester)
        return chart_series(transactions, sessions, period, today or date.today())

    def _load(
        self, requester: UserRecord
    ) -> tuple[list[TransactionRecord], list[SessionRecord]]:
        if not requester.is_photographer:
            raise PermissionDeniedError("Only photographers can access finances")
        return (
            self.transactions.list_transactions(requester.id),
            self.sessions.list_sessions(requester.id, requester.user_type),
        )
