"""Client reviews of completed sessions."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from photo_marketplace.adapters.field_mapping import REVIEWS
from photo_marketplace.domain.models import UserRecord
from photo_marketplace.domain.reviews import RatingSummary, ReviewRecord
from photo_marketplace.domain.sessions import COMPLETED, SessionRecord
from photo_marketplace.errors import (
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from photo_marketplace.services.validation import validate_payload

logger = logging.getLogger(__name__)


class ReviewRepository(Protocol):
    """Persistence interface for reviews."""

    def create_review(self, payload: dict[str, object]) -> ReviewRecord:
        """Insert a review row and return it."""

    def get_by_session(self, session_id: int) -> ReviewRecord | None:
        """Return the review of a session, if any."""

    def list_for_photographer(self, photographer_id: int) -> list[ReviewRecord]:
        """Return all reviews of a photographer."""


class SessionReader(Protocol):
    def get_session(self, session_id: int) -> SessionRecord | None:
        """Return a session by id, if present."""


class ReviewCreate(BaseModel):
    """Validated column payload for a new review."""

    model_config = ConfigDict(extra="ignore")

    session_id: int
    rating: int = Field(ge=1, le=5)
    quality_rating: int = Field(ge=1, le=5)
    professionalism_rating: int = Field(ge=1, le=5)
    comment: str | None = None


def summarize_ratings(reviews: list[ReviewRecord]) -> RatingSummary:
    """Average each rating axis; zeros when there are no reviews."""
    count = len(reviews)
    if not count:
        return RatingSummary(0, 0.0, 0.0, 0.0)
    return RatingSummary(
        review_count=count,
        average_rating=sum(review.rating for review in reviews) / count,
        average_quality_rating=sum(review.quality_rating for review in reviews)
        / count,
        average_professionalism_rating=sum(
            review.professionalism_rating for review in reviews
        )
        / count,
    )


@dataclass
class ReviewService:
    """Application service for reviews."""

    repository: ReviewRepository
    sessions: SessionReader

    def create_review(
        self, requester: UserRecord, payload: dict[str, object]
    ) -> ReviewRecord:
        """Create the single review a client may leave for a completed session."""
        if not requester.is_client:
            raise PermissionDeniedError("Only clients can leave reviews")
        validated = validate_payload(ReviewCreate, payload, REVIEWS)

        session = self.sessions.get_session(validated.session_id)
        if session is None:
            raise NotFoundError("Session not found")
        if session.client_id != requester.id:
            logger.warning(
                "Review attempt on foreign session",
                extra={"user_id": requester.id, "session_id": session.id},
            )
            raise PermissionDeniedError("You can only review your own sessions")
        if session.status != COMPLETED:
            raise ValidationError("Only completed sessions can be reviewed")
        if self.repository.get_by_session(session.id) is not None:
            raise ValidationError("This session has already been reviewed")

        columns = validated.model_dump()
        columns["reviewer_id"] = requester.id
        columns["photographer_id"] = session.photographer_id
        return self.repository.create_review(columns)

    def list_for_photographer(self, photographer_id: int) -> list[ReviewRecord]:
        """Return a photographer's reviews, newest first."""
        reviews = self.repository.list_for_photographer(photographer_id)
        return sorted(
            reviews,
            key=lambda review: (review.created_at is not None, review.created_at),
            reverse=True,
        )

    def rating_summary(self, photographer_id: int) -> RatingSummary:
        """Return the average ratings of a photographer."""
        return summarize_ratings(self.repository.list_for_photographer(photographer_id))
