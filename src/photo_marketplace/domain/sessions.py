"""Domain models for booked photography sessions."""

from dataclasses import dataclass
from datetime import datetime

PENDING = "pending"
CONFIRMED = "confirmed"
COMPLETED = "completed"
CANCELED = "canceled"
SESSION_STATUSES = frozenset({PENDING, CONFIRMED, COMPLETED, CANCELED})
TERMINAL_STATUSES = frozenset({COMPLETED, CANCELED})

PAYMENT_PENDING = "pending"
PAYMENT_PARTIAL = "partial"
PAYMENT_PAID = "paid"
PAYMENT_STATUSES = frozenset({PAYMENT_PENDING, PAYMENT_PARTIAL, PAYMENT_PAID})


@dataclass(frozen=True)
class SessionRecord:
    """Represents a persisted booking. Money fields are in cents."""

    id: int
    photographer_id: int
    client_id: int
    title: str
    date: datetime
    duration: int
    status: str
    total_price: int
    photos_included: int
    service_id: int | None = None
    description: str | None = None
    location: str | None = None
    location_lat: float | None = None
    location_lng: float | None = None
    photos_delivered: int = 0
    additional_photos: int = 0
    additional_photo_price: int | None = None
    payment_status: str = PAYMENT_PENDING
    amount_paid: int = 0
    created_at: datetime | None = None
