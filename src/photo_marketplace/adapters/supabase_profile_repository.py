"""Supabase repository for photographer profiles."""

from dataclasses import dataclass

from supabase import Client

from photo_marketplace.adapters.supabase_rows import first_row, serialize, to_int
from photo_marketplace.domain.models import PhotographerProfile
from photo_marketplace.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    client: Client

    def get_profile(self, user_id: int) -> PhotographerProfile | None:
        """Return the profile of a photographer, if present."""
        response = (
            self.client.table("photographer_profiles")
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def create_profile(self, payload: dict[str, object]) -> PhotographerProfile:
        response = (
            self.client.table("photographer_profiles")
            .insert(serialize(payload))
            .execute()
        )
        return _parse_profile(first_row(response.data, "create profile"))

    def update_profile(
        self, user_id: int, payload: dict[str, object]
    ) -> PhotographerProfile | None:
        response = (
            self.client.table("photographer_profiles")
            .update(serialize(payload))
            .eq("user_id", user_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> PhotographerProfile:
    return PhotographerProfile(
        id=to_int(row["id"]),
        user_id=to_int(row["user_id"]),
        instagram_username=row.get("instagram_username"),
        specialties=list(row.get("specialties") or []),
        years_of_experience=to_int(row.get("years_of_experience")),
        equipment_description=row.get("equipment_description"),
        portfolio_images=list(row.get("portfolio_images") or []),
        available_times=dict(row.get("available_times") or {}),
    )
