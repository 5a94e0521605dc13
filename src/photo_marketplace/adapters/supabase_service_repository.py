"""Supabase repository for catalogue services."""

from dataclasses import dataclass

from supabase import Client

from photo_marketplace.adapters.supabase_rows import first_row, serialize, to_int
from photo_marketplace.domain.catalog import ServiceOffering
from photo_marketplace.services.catalog import ServiceRepository


@dataclass
class SupabaseServiceRepository(ServiceRepository):
    """Supabase implementation for the service catalogue."""

    client: Client

    def list_services(
        self, user_id: int, active_only: bool = False
    ) -> list[ServiceOffering]:
        """Return services of a photographer, cheapest first."""
        query = self.client.table("services").select("*").eq("user_id", user_id)
        if active_only:
            query = query.eq("active", True)
        response = query.order("price", desc=False).execute()
        return [_parse_service(row) for row in response.data or []]

    def get_service(self, service_id: int) -> ServiceOffering | None:
        response = (
            self.client.table("services")
            .select("*")
            .eq("id", service_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_service(response.data[0])

    def create_service(self, payload: dict[str, object]) -> ServiceOffering:
        response = self.client.table("services").insert(serialize(payload)).execute()
        return _parse_service(first_row(response.data, "create service"))

    def update_service(
        self, service_id: int, payload: dict[str, object]
    ) -> ServiceOffering | None:
        response = (
            self.client.table("services")
            .update(serialize(payload))
            .eq("id", service_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_service(response.data[0])

    def delete_service(self, service_id: int) -> None:
        self.client.table("services").delete().eq("id", service_id).execute()

    def count_sessions(self, service_id: int) -> int:
        """Return how many sessions reference the service."""
        response = (
            self.client.table("sessions")
            .select("id")
            .eq("service_id", service_id)
            .execute()
        )
        return len(response.data or [])


def _parse_service(row: dict[str, object]) -> ServiceOffering:
    return ServiceOffering(
        id=to_int(row["id"]),
        user_id=to_int(row["user_id"]),
        name=str(row.get("name") or ""),
        price=to_int(row.get("price")) or 0,
        duration=to_int(row.get("duration")) or 0,
        description=row.get("description"),
        max_photos=to_int(row.get("max_photos")),
        additional_photo_price=to_int(row.get("additional_photo_price")),
        active=bool(row.get("active", True)),
    )
