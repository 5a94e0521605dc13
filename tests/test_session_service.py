"""Tests for the booking lifecycle."""

from datetime import UTC, datetime

import pytest

from photo_marketplace.domain.models import CLIENT, PHOTOGRAPHER, UserRecord
from photo_marketplace.errors import (
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from photo_marketplace.services.money import MAJOR
from photo_marketplace.services.sessions import SessionService, can_transition
from tests.conftest import Backend


def _service(backend: Backend) -> SessionService:
    return SessionService(
        repository=backend.sessions, users=backend.users, services=backend.services
    )


def _payload(**fields: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "title": "Ensaio de família",
        "date": datetime(2024, 6, 1, 10, 0, tzinfo=UTC),
        "duration": 90,
        "location": "Parque Ibirapuera",
        "total_price": 150.5,
        "photos_included": 30,
    }
    payload.update(fields)
    return payload


def test_client_booking_is_pending_and_bound_to_client(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    service = _service(backend)

    session = service.create_session(
        client_user,
        _payload(photographer_id=photographer.id, client_id=999, status="confirmed"),
    )

    assert session.status == "pending"
    assert session.client_id == client_user.id
    assert session.photographer_id == photographer.id
    assert session.total_price == 15050
    assert session.amount_paid == 0
    assert session.payment_status == "pending"


def test_client_booking_requires_photographer(
    backend: Backend, client_user: UserRecord
) -> None:
    with pytest.raises(ValidationError):
        _service(backend).create_session(client_user, _payload())


def test_photographer_booking_defaults_to_confirmed(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    session = _service(backend).create_session(
        photographer,
        _payload(client_id=client_user.id, total_price=150.0),
        money_unit=MAJOR,
    )

    assert session.status == "confirmed"
    assert session.photographer_id == photographer.id
    assert session.total_price == 15000


def test_photographer_cannot_book_for_another_photographer(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    other = backend.add_user("Carla Lente", PHOTOGRAPHER)

    with pytest.raises(PermissionDeniedError):
        _service(backend).create_session(
            photographer,
            _payload(photographer_id=other.id, client_id=client_user.id),
        )

    assert backend.sessions.table.rows == {}


def test_booking_unknown_client_is_not_found(
    backend: Backend, photographer: UserRecord
) -> None:
    with pytest.raises(NotFoundError):
        _service(backend).create_session(photographer, _payload(client_id=404))


def test_booking_rejects_short_title(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    with pytest.raises(ValidationError) as excinfo:
        _service(backend).create_session(
            photographer, _payload(client_id=client_user.id, title="x")
        )

    assert "title" in excinfo.value.message


def test_booking_rejects_service_of_other_photographer(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    other = backend.add_user("Carla Lente", PHOTOGRAPHER)
    foreign = backend.services.create_service(
        {"user_id": other.id, "name": "Casamento", "price": 100000, "duration": 240}
    )

    with pytest.raises(ValidationError):
        _service(backend).create_session(
            photographer,
            _payload(client_id=client_user.id, service_id=foreign.id),
        )


def test_client_patch_only_touches_payment_fields(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    session = backend.add_session(
        photographer_id=photographer.id, client_id=client_user.id
    )

    updated = _service(backend).update_session(
        client_user,
        session.id,
        {"title": "Renamed", "amount_paid": 5000, "payment_status": "partial"},
    )

    assert updated.title == "Ensaio"
    assert updated.amount_paid == 5000
    assert updated.payment_status == "partial"


def test_client_patch_with_only_forbidden_fields_is_noop(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    session = backend.add_session(
        photographer_id=photographer.id, client_id=client_user.id
    )

    updated = _service(backend).update_session(
        client_user, session.id, {"status": "completed", "total_price": 1}
    )

    assert updated == session


def test_photographer_status_transitions(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    service = _service(backend)
    session = backend.add_session(
        photographer_id=photographer.id, client_id=client_user.id
    )

    completed = service.update_session(
        photographer, session.id, {"status": "completed"}
    )
    assert completed.status == "completed"

    with pytest.raises(ValidationError):
        service.update_session(photographer, session.id, {"status": "pending"})


def test_transition_table() -> None:
    assert can_transition("pending", "confirmed")
    assert can_transition("confirmed", "canceled")
    assert can_transition("completed", "completed")
    assert not can_transition("canceled", "confirmed")
    assert not can_transition("confirmed", "pending")


def test_photographer_cannot_reassign_session(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    other = backend.add_user("Carla Lente", PHOTOGRAPHER)
    session = backend.add_session(
        photographer_id=photographer.id, client_id=client_user.id
    )

    with pytest.raises(PermissionDeniedError):
        _service(backend).update_session(
            photographer, session.id, {"photographer_id": other.id}
        )


def test_non_party_cannot_read_or_update(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    stranger = backend.add_user("Davi Curioso", CLIENT)
    session = backend.add_session(
        photographer_id=photographer.id, client_id=client_user.id
    )
    service = _service(backend)

    with pytest.raises(PermissionDeniedError):
        service.get_session(stranger, session.id)
    with pytest.raises(PermissionDeniedError):
        service.update_session(stranger, session.id, {"amount_paid": 1})


def test_missing_session_is_not_found(
    backend: Backend, photographer: UserRecord
) -> None:
    with pytest.raises(NotFoundError):
        _service(backend).get_session(photographer, 42)


def test_list_sessions_is_newest_first(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    older = backend.add_session(
        photographer_id=photographer.id,
        client_id=client_user.id,
        date=datetime(2024, 1, 1, tzinfo=UTC),
    )
    newer = backend.add_session(
        photographer_id=photographer.id,
        client_id=client_user.id,
        date=datetime(2024, 3, 1, tzinfo=UTC),
    )
    service = _service(backend)

    assert [s.id for s in service.list_sessions(photographer)] == [newer.id, older.id]
    assert [s.id for s in service.list_sessions(client_user)] == [newer.id, older.id]


def test_delete_session_rules(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    service = _service(backend)
    referenced = backend.add_session(
        photographer_id=photographer.id, client_id=client_user.id
    )
    backend.sessions.references[referenced.id] = 2
    free = backend.add_session(
        photographer_id=photographer.id, client_id=client_user.id
    )

    with pytest.raises(PermissionDeniedError):
        service.delete_session(client_user, free.id)
    with pytest.raises(ValidationError):
        service.delete_session(photographer, referenced.id)

    service.delete_session(photographer, free.id)

    assert list(backend.sessions.table.rows) == [referenced.id]


def test_photographer_cannot_be_booked_as_client(
    backend: Backend, photographer: UserRecord
) -> None:
    other = backend.add_user("Carla Lente", PHOTOGRAPHER)

    with pytest.raises(NotFoundError):
        _service(backend).create_session(photographer, _payload(client_id=other.id))

    assert backend.sessions.table.rows == {}


def test_patch_rights_follow_role_in_session(
    backend: Backend, photographer: UserRecord
) -> None:
    other = backend.add_user("Carla Lente", PHOTOGRAPHER)
    session = backend.add_session(photographer_id=photographer.id, client_id=other.id)

    updated = _service(backend).update_session(
        other,
        session.id,
        {"title": "Renamed", "total_price": 1, "status": "canceled"},
    )

    assert updated == session


def test_photographer_can_clear_optional_fields(
    backend: Backend, photographer: UserRecord, client_user: UserRecord
) -> None:
    offering = backend.services.create_service(
        {"user_id": photographer.id, "name": "Ensaio", "price": 20000, "duration": 60}
    )
    session = backend.add_session(
        photographer_id=photographer.id,
        client_id=client_user.id,
        service_id=offering.id,
        description="Levar figurino",
    )

    updated = _service(backend).update_session(
        photographer,
        session.id,
        {"service_id": None, "description": None, "title": None},
    )

    assert updated.service_id is None
    assert updated.description is None
    assert updated.title == "Ensaio"
