"""Tests for client reviews."""

from datetime import UTC, datetime

import pytest

from photo_marketplace.domain.models import CLIENT, UserRecord
from photo_marketplace.errors import (
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from photo_marketplace.services.reviews import ReviewService
from tests.conftest import Backend


def _service(backend: Backend) -> ReviewService:
    return ReviewService(backend.reviews, backend.sessions)


def _ratings(session_id: int, **fields: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "session_id": session_id,
        "rating": 5,
        "quality_rating": 4,
        "professionalism_rating": 5,
        "comment": "Excelente",
    }
    payload.update(fields)
    return payload


def test_review_of_pending_session_is_rejected(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    session = backend.add_session(
        photographer_id=photographer.id, client_id=client_user.id, status="pending"
    )

    with pytest.raises(ValidationError):
        _service(backend).create_review(client_user, _ratings(session.id))

    assert backend.reviews.table.rows == {}


def test_review_of_completed_session(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    session = backend.add_session(
        photographer_id=photographer.id, client_id=client_user.id, status="completed"
    )

    review = _service(backend).create_review(
        client_user, _ratings(session.id, photographer_id=12345)
    )

    assert review.reviewer_id == client_user.id
    assert review.photographer_id == photographer.id
    assert review.rating == 5


def test_second_review_is_rejected(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    session = backend.add_session(
        photographer_id=photographer.id, client_id=client_user.id, status="completed"
    )
    service = _service(backend)
    service.create_review(client_user, _ratings(session.id))

    with pytest.raises(ValidationError):
        service.create_review(client_user, _ratings(session.id, rating=1))


def test_review_preconditions(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    stranger = backend.add_user("Davi Curioso", CLIENT)
    session = backend.add_session(
        photographer_id=photographer.id, client_id=client_user.id, status="completed"
    )
    service = _service(backend)

    with pytest.raises(PermissionDeniedError):
        service.create_review(photographer, _ratings(session.id))
    with pytest.raises(PermissionDeniedError):
        service.create_review(stranger, _ratings(session.id))
    with pytest.raises(NotFoundError):
        service.create_review(client_user, _ratings(999))
    with pytest.raises(ValidationError):
        service.create_review(client_user, _ratings(session.id, rating=6))


def test_rating_summary_and_listing(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    service = _service(backend)
    assert service.rating_summary(photographer.id).review_count == 0

    for day, rating in ((1, 5), (2, 3)):
        session = backend.add_session(
            photographer_id=photographer.id,
            client_id=client_user.id,
            status="completed",
        )
        backend.reviews.create_review(
            {
                "session_id": session.id,
                "reviewer_id": client_user.id,
                "photographer_id": photographer.id,
                "rating": rating,
                "quality_rating": 4,
                "professionalism_rating": rating,
                "created_at": datetime(2024, 5, day, tzinfo=UTC),
            }
        )

    summary = service.rating_summary(photographer.id)
    listed = service.list_for_photographer(photographer.id)

    assert summary.review_count == 2
    assert summary.average_rating == 4.0
    assert summary.average_quality_rating == 4.0
    assert [review.rating for review in listed] == [3, 5]
