"""Supabase repository for sessions (bookings)."""

from dataclasses import dataclass

from supabase import Client

from photo_marketplace.adapters.supabase_rows import (
    first_row,
    serialize,
    to_datetime,
    to_float,
    to_int,
)
from photo_marketplace.domain.models import PHOTOGRAPHER
from photo_marketplace.domain.sessions import PAYMENT_PENDING, PENDING, SessionRecord
from photo_marketplace.services.sessions import SessionRepository


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for session persistence."""

    client: Client

    def create_session(self, payload: dict[str, object]) -> SessionRecord:
        """Create a session row and return it."""
        response = self.client.table("sessions").insert(serialize(payload)).execute()
        return _parse_session(first_row(response.data, "create session"))

    def get_session(self, session_id: int) -> SessionRecord | None:
        """Return a session by id."""
        response = (
            self.client.table("sessions")
            .select("*")
            .eq("id", session_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_session(response.data[0])

    def list_sessions(self, user_id: int, user_type: str) -> list[SessionRecord]:
        """Return sessions where the user is the photographer or the client."""
        column = "photographer_id" if user_type == PHOTOGRAPHER else "client_id"
        response = (
            self.client.table("sessions")
            .select("*")
            .eq(column, user_id)
            .order("date", desc=True)
            .execute()
        )
        return [_parse_session(row) for row in response.data or []]

    def update_session(
        self, session_id: int, payload: dict[str, object]
    ) -> SessionRecord | None:
        response = (
            self.client.table("sessions")
            .update(serialize(payload))
            .eq("id", session_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_session(response.data[0])

    def delete_session(self, session_id: int) -> None:
        self.client.table("sessions").delete().eq("id", session_id).execute()

    def count_references(self, session_id: int) -> int:
        """Return how many reviews and transactions point at the session."""
        total = 0
        for table in ("reviews", "transactions"):
            response = (
                self.client.table(table)
                .select("id")
                .eq("session_id", session_id)
                .execute()
            )
            total += len(response.data or [])
        return total


def _parse_session(row: dict[str, object]) -> SessionRecord:
    return SessionRecord(
        id=to_int(row["id"]),
        photographer_id=to_int(row["photographer_id"]),
        client_id=to_int(row["client_id"]),
        title=str(row.get("title") or ""),
        date=to_datetime(row.get("date")),
        duration=to_int(row.get("duration")) or 0,
        status=str(row.get("status") or PENDING),
        total_price=to_int(row.get("total_price")) or 0,
        photos_included=to_int(row.get("photos_included")) or 0,
        service_id=to_int(row.get("service_id")),
        description=row.get("description"),
        location=row.get("location"),
        location_lat=to_float(row.get("location_lat")),
        location_lng=to_float(row.get("location_lng")),
        photos_delivered=to_int(row.get("photos_delivered")) or 0,
        additional_photos=to_int(row.get("additional_photos")) or 0,
        additional_photo_price=to_int(row.get("additional_photo_price")),
        payment_status=str(row.get("payment_status") or PAYMENT_PENDING),
        amount_paid=to_int(row.get("amount_paid")) or 0,
        created_at=to_datetime(row.get("created_at")),
    )
