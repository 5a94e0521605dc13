"""Supabase-backed user repository."""

from dataclasses import dataclass

from supabase import Client

from photo_marketplace.adapters.supabase_rows import (
    first_row,
    serialize,
    to_datetime,
    to_float,
    to_int,
)
from photo_marketplace.domain.models import CLIENT, PHOTOGRAPHER, UserRecord
from photo_marketplace.services.users import UserRepository

USER_COLUMNS = (
    "id, auth_id, email, name, user_type, phone, avatar, bio, location, "
    "latitude, longitude, created_at"
)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id, if present."""
        response = (
            self.client.table("users")
            .select(USER_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return a user by email, if present."""
        response = (
            self.client.table("users")
            .select(USER_COLUMNS)
            .eq("email", email.lower())
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create a new user row and return it."""
        response = self.client.table("users").insert(serialize(payload)).execute()
        return _parse_user(first_row(response.data, "create user"))

    def update_user(
        self, user_id: int, payload: dict[str, object]
    ) -> UserRecord | None:
        response = (
            self.client.table("users")
            .update(serialize(payload))
            .eq("id", user_id)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def delete_user(self, user_id: int) -> None:
        self.client.table("users").delete().eq("id", user_id).execute()

    def list_clients(self) -> list[UserRecord]:
        return self._list_by_type(CLIENT)

    def list_photographers(self) -> list[UserRecord]:
        return self._list_by_type(PHOTOGRAPHER)

    def _list_by_type(self, user_type: str) -> list[UserRecord]:
        response = (
            self.client.table("users")
            .select(USER_COLUMNS)
            .eq("user_type", user_type)
            .order("name", desc=False)
            .execute()
        )
        return [_parse_user(row) for row in response.data or []]


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=to_int(row["id"]),
        email=str(row.get("email") or ""),
        name=str(row.get("name") or ""),
        user_type=str(row.get("user_type") or CLIENT),
        auth_id=row.get("auth_id"),
        phone=row.get("phone"),
        avatar=row.get("avatar"),
        bio=row.get("bio"),
        location=row.get("location"),
        latitude=to_float(row.get("latitude")),
        longitude=to_float(row.get("longitude")),
        created_at=to_datetime(row.get("created_at")),
    )
