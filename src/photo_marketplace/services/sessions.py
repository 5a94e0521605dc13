"""Booking lifecycle: creation defaults, permissions and status moves."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field

from photo_marketplace.adapters.field_mapping import SESSIONS
from photo_marketplace.domain.catalog import ServiceOffering
from photo_marketplace.domain.models import UserRecord
from photo_marketplace.domain.sessions import (
    CANCELED,
    COMPLETED,
    CONFIRMED,
    PENDING,
    SessionRecord,
)
from photo_marketplace.errors import (
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from photo_marketplace.services.money import normalize_price_fields
from photo_marketplace.services.validation import validate_payload

logger = logging.getLogger(__name__)

SessionStatus = Literal["pending", "confirmed", "completed", "canceled"]
PaymentStatus = Literal["pending", "partial", "paid"]

CLIENT_EDITABLE_FIELDS = frozenset({"payment_status", "amount_paid"})
SESSION_MONEY_FIELDS = ("total_price", "additional_photo_price", "amount_paid")
NULLABLE_SESSION_FIELDS = frozenset(
    {
        "service_id",
        "description",
        "location_lat",
        "location_lng",
        "additional_photo_price",
    }
)

_TRANSITIONS: dict[str, frozenset[str]] = {
    PENDING: frozenset({CONFIRMED, COMPLETED, CANCELED}),
    CONFIRMED: frozenset({COMPLETED, CANCELED}),
    COMPLETED: frozenset(),
    CANCELED: frozenset(),
}


class SessionRepository(Protocol):
    """Persistence interface for sessions."""

    def create_session(self, payload: dict[str, object]) -> SessionRecord:
        """Insert a session row and return it."""

    def get_session(self, session_id: int) -> SessionRecord | None:
        """Return a session by id, if present."""

    def list_sessions(self, user_id: int, user_type: str) -> list[SessionRecord]:
        """Return sessions where the user is photographer or client."""

    def update_session(
        self, session_id: int, payload: dict[str, object]
    ) -> SessionRecord | None:
        """Apply a column patch and return the updated session."""

    def delete_session(self, session_id: int) -> None:
        """Delete a session row."""

    def count_references(self, session_id: int) -> int:
        """Return how many reviews and transactions point at the session."""


class UserLookup(Protocol):
    """Read access to users needed to check the counterparty."""

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id, if present."""


class ServiceLookup(Protocol):
    """Read access to catalogue services."""

    def get_service(self, service_id: int) -> ServiceOffering | None:
        """Return a service by id, if present."""


class SessionCreate(BaseModel):
    """Validated column payload for a new session."""

    model_config = ConfigDict(extra="ignore")

    photographer_id: int
    client_id: int
    service_id: int | None = None
    title: str = Field(min_length=3)
    description: str | None = None
    date: datetime
    duration: int = Field(ge=1)
    location: str = Field(min_length=3)
    location_lat: float | None = None
    location_lng: float | None = None
    status: SessionStatus = PENDING
    total_price: float = Field(ge=0)
    photos_included: int = Field(ge=0)
    photos_delivered: int = Field(default=0, ge=0)
    additional_photos: int = Field(default=0, ge=0)
    additional_photo_price: float | None = Field(default=0, ge=0)
    payment_status: PaymentStatus = "pending"
    amount_paid: float = Field(default=0, ge=0)


class SessionPatch(BaseModel):
    """Validated partial column payload for a session update."""

    model_config = ConfigDict(extra="ignore")

    photographer_id: int | None = None
    client_id: int | None = None
    service_id: int | None = None
    title: str | None = Field(default=None, min_length=3)
    description: str | None = None
    date: datetime | None = None
    duration: int | None = Field(default=None, ge=1)
    location: str | None = Field(default=None, min_length=3)
    location_lat: float | None = None
    location_lng: float | None = None
    status: SessionStatus | None = None
    total_price: float | None = Field(default=None, ge=0)
    photos_included: int | None = Field(default=None, ge=0)
    photos_delivered: int | None = Field(default=None, ge=0)
    additional_photos: int | None = Field(default=None, ge=0)
    additional_photo_price: float | None = Field(default=None, ge=0)
    payment_status: PaymentStatus | None = None
    amount_paid: float | None = Field(default=None, ge=0)


def can_transition(current: str, target: str) -> bool:
    """Return True when a photographer may move a session to `target`."""
    if current == target:
        return True
    return target in _TRANSITIONS.get(current, frozenset())


@dataclass
class SessionService:
    """Application service for the booking lifecycle."""

    repository: SessionRepository
    users: UserLookup
    services: ServiceLookup

    def create_session(
        self,
        requester: UserRecord,
        payload: dict[str, object],
        money_unit: str | None = None,
    ) -> SessionRecord:
        """Create a session with role-dependent defaults."""
        data = dict(payload)
        if requester.is_client:
            data["client_id"] = requester.id
            data["status"] = PENDING
            if data.get("photographer_id") is None:
                raise ValidationError("Validation error: photographerId: required")
        elif requester.is_photographer:
            requested = data.get("photographer_id")
            if requested is not None and _as_int(requested) != requester.id:
                logger.warning(
                    "Photographer tried to book for another photographer",
                    extra={"user_id": requester.id, "photographer_id": requested},
                )
                raise PermissionDeniedError(
                    "Photographers can only create their own sessions"
                )
            data["photographer_id"] = requester.id
            if data.get("status") is None:
                data["status"] = CONFIRMED
        else:
            raise PermissionDeniedError("User type not allowed to create sessions")

        validated = validate_payload(SessionCreate, data, SESSIONS)
        self._check_parties(validated.photographer_id, validated.client_id)
        if validated.service_id is not None:
            self._check_service(validated.service_id, validated.photographer_id)

        columns = validated.model_dump()
        normalize_price_fields(columns, money_unit, SESSION_MONEY_FIELDS)
        return self.repository.create_session(columns)

    def update_session(
        self,
        requester: UserRecord,
        session_id: int,
        patch: dict[str, object],
        money_unit: str | None = None,
    ) -> SessionRecord:
        """Apply a patch; clients may only touch payment fields."""
        session = self._get_for_party(requester, session_id)
        validated = validate_payload(SessionPatch, patch, SESSIONS)
        changes = validated.model_dump(exclude_unset=True)

        if requester.id == session.photographer_id:
            self._check_photographer_patch(session, changes)
        else:
            changes = {
                key: value
                for key, value in changes.items()
                if key in CLIENT_EDITABLE_FIELDS
            }

        changes = {
            key: value
            for key, value in changes.items()
            if value is not None or key in NULLABLE_SESSION_FIELDS
        }
        if not changes:
            return session
        normalize_price_fields(changes, money_unit, SESSION_MONEY_FIELDS)
        updated = self.repository.update_session(session_id, changes)
        if updated is None:
            raise NotFoundError("Session not found")
        return updated

    def list_sessions(self, requester: UserRecord) -> list[SessionRecord]:
        """Return the requester's sessions, newest first."""
        sessions = self.repository.list_sessions(requester.id, requester.user_type)
        return sorted(sessions, key=lambda session: session.date, reverse=True)

    def get_session(self, requester: UserRecord, session_id: int) -> SessionRecord:
        """Return a session the requester is a party to."""
        return self._get_for_party(requester, session_id)

    def delete_session(self, requester: UserRecord, session_id: int) -> None:
        """Delete a session owned by the requesting photographer."""
        session = self.repository.get_session(session_id)
        if session is None:
            raise NotFoundError("Session not found")
        if session.photographer_id != requester.id:
            raise PermissionDeniedError(
                "You don't have permission to delete this session"
            )
        if self.repository.count_references(session_id):
            raise ValidationError(
                "Session has reviews or transactions and cannot be deleted"
            )
        self.repository.delete_session(session_id)

    def _get_for_party(self, requester: UserRecord, session_id: int) -> SessionRecord:
        session = self.repository.get_session(session_id)
        if session is None:
            raise NotFoundError("Session not found")
        if requester.id not in {session.photographer_id, session.client_id}:
            logger.warning(
                "Session access denied",
                extra={"user_id": requester.id, "session_id": session_id},
            )
            raise PermissionDeniedError(
                "You don't have permission to access this session"
            )
        return session

    def _check_photographer_patch(
        self, session: SessionRecord, changes: dict[str, object]
    ) -> None:
        photographer_id = changes.get("photographer_id")
        if photographer_id is not None and photographer_id != session.photographer_id:
            raise PermissionDeniedError("Sessions cannot change photographer")
        status = changes.get("status")
        if status is not None and not can_transition(session.status, str(status)):
            raise ValidationError(
                f"Cannot change session status from {session.status} to {status}"
            )
        client_id = changes.get("client_id")
        if client_id is not None and client_id != session.client_id:
            self._check_parties(session.photographer_id, int(client_id))
        service_id = changes.get("service_id")
        if service_id is not None and service_id != session.service_id:
            self._check_service(int(service_id), session.photographer_id)

    def _check_parties(self, photographer_id: int, client_id: int) -> None:
        photographer = self.users.get_user(photographer_id)
        if photographer is None or not photographer.is_photographer:
            raise NotFoundError("Photographer not found")
        client = self.users.get_user(client_id)
        if client is None or not client.is_client:
            raise NotFoundError("Client not found")

    def _check_service(self, service_id: int, photographer_id: int) -> None:
        service = self.services.get_service(service_id)
        if service is None:
            raise NotFoundError("Service not found")
        if service.user_id != photographer_id:
            raise ValidationError("Service does not belong to this photographer")


def _as_int(value: object) -> int | None:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
