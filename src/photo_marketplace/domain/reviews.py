"""Domain models for client reviews."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ReviewRecord:
    """A client's rating of a completed session."""

    id: int
    session_id: int
    reviewer_id: int
    photographer_id: int
    rating: int
    quality_rating: int
    professionalism_rating: int
    comment: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class RatingSummary:
    """Average ratings for a photographer."""

    review_count: int
    average_rating: float
    average_quality_rating: float
    average_professionalism_rating: float
