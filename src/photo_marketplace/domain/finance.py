"""Domain models for financial reports."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class FinancialSummary:
    """Totals for a set of transactions and sessions. Money is in cents."""

    income: int
    expense: int
    profit: int
    session_count: int
    client_count: int
    average_session_value: float
    hours_worked: float


@dataclass(frozen=True)
class PeriodTotals:
    """Income and expense for one calendar bucket."""

    start: date
    income: int
    expense: int

    @property
    def balance(self) -> int:
        return self.income - self.expense


@dataclass(frozen=True)
class MetricComparison:
    """One metric compared between two periods."""

    name: str
    current: float
    previous: float
    percent_change: float


@dataclass(frozen=True)
class MonthProjection:
    """Actual and projected figures for one month of a year."""

    month: date
    actual_income: float
    actual_expense: float
    projected_income: float
    projected_expense: float

    @property
    def actual_profit(self) -> float:
        return self.actual_income - self.actual_expense

    @property
    def projected_profit(self) -> float:
        return self.projected_income - self.projected_expense


@dataclass(frozen=True)
class CategoryTotal:
    """Expense total for a category."""

    category: str
    amount: int
