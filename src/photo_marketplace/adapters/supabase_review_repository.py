"""Supabase repository for reviews."""

from dataclasses import dataclass

from supabase import Client

from photo_marketplace.adapters.supabase_rows import (
    first_row,
    serialize,
    to_datetime,
    to_int,
)
from photo_marketplace.domain.reviews import ReviewRecord
from photo_marketplace.services.reviews import ReviewRepository


@dataclass
class SupabaseReviewRepository(ReviewRepository):
    client: Client

    def create_review(self, payload: dict[str, object]) -> ReviewRecord:
        response = self.client.table("reviews").insert(serialize(payload)).execute()
        return _parse_review(first_row(response.data, "create review"))

    def get_by_session(self, session_id: int) -> ReviewRecord | None:
        """Return the review of a session, if any."""
        response = (
            self.client.table("reviews")
            .select("*")
            .eq("session_id", session_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_review(response.data[0])

    def list_for_photographer(self, photographer_id: int) -> list[ReviewRecord]:
        response = (
            self.client.table("reviews")
            .select("*")
            .eq("photographer_id", photographer_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_review(row) for row in response.data or []]


def _parse_review(row: dict[str, object]) -> ReviewRecord:
    return ReviewRecord(
        id=to_int(row["id"]),
        session_id=to_int(row["session_id"]),
        reviewer_id=to_int(row["reviewer_id"]),
        photographer_id=to_int(row["photographer_id"]),
        rating=to_int(row.get("rating")) or 0,
        quality_rating=to_int(row.get("quality_rating")) or 0,
        professionalism_rating=to_int(row.get("professionalism_rating")) or 0,
        comment=row.get("comment"),
        created_at=to_datetime(row.get("created_at")),
    )
