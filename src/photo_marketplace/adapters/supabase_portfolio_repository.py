"""Supabase repositories for portfolio items and service areas."""

from dataclasses import dataclass

from supabase import Client

from photo_marketplace.adapters.supabase_rows import (
    first_row,
    serialize,
    to_datetime,
    to_float,
    to_int,
)
from photo_marketplace.domain.portfolio import PortfolioItem, ServiceArea
from photo_marketplace.services.portfolio import PortfolioRepository
from photo_marketplace.services.service_areas import ServiceAreaRepository


@dataclass
class SupabasePortfolioRepository(PortfolioRepository):
    """Supabase implementation for portfolio items."""

    client: Client

    def list_items(self, user_id: int) -> list[PortfolioItem]:
        response = (
            self.client.table("portfolio_items")
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def get_item(self, item_id: int) -> PortfolioItem | None:
        response = (
            self.client.table("portfolio_items")
            .select("*")
            .eq("id", item_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def create_item(self, payload: dict[str, object]) -> PortfolioItem:
        response = (
            self.client.table("portfolio_items").insert(serialize(payload)).execute()
        )
        return _parse_item(first_row(response.data, "create portfolio item"))

    def update_item(
        self, item_id: int, payload: dict[str, object]
    ) -> PortfolioItem | None:
        response = (
            self.client.table("portfolio_items")
            .update(serialize(payload))
            .eq("id", item_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def delete_item(self, item_id: int) -> None:
        self.client.table("portfolio_items").delete().eq("id", item_id).execute()


@dataclass
class SupabaseServiceAreaRepository(ServiceAreaRepository):
    """Supabase implementation for photographer service areas."""

    client: Client

    def list_areas(self, user_id: int) -> list[ServiceArea]:
        response = (
            self.client.table("photographer_service_areas")
            .select("*")
            .eq("user_id", user_id)
            .execute()
        )
        return [_parse_area(row) for row in response.data or []]

    def list_all_areas(self) -> list[ServiceArea]:
        response = (
            self.client.table("photographer_service_areas").select("*").execute()
        )
        return [_parse_area(row) for row in response.data or []]

    def get_area(self, area_id: int) -> ServiceArea | None:
        response = (
            self.client.table("photographer_service_areas")
            .select("*")
            .eq("id", area_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_area(response.data[0])

    def create_area(self, payload: dict[str, object]) -> ServiceArea:
        response = (
            self.client.table("photographer_service_areas")
            .insert(serialize(payload))
            .execute()
        )
        return _parse_area(first_row(response.data, "create service area"))

    def delete_area(self, area_id: int) -> None:
        self.client.table("photographer_service_areas").delete().eq(
            "id", area_id
        ).execute()


def _parse_item(row: dict[str, object]) -> PortfolioItem:
    return PortfolioItem(
        id=to_int(row["id"]),
        user_id=to_int(row["user_id"]),
        image_url=str(row.get("image_url") or ""),
        title=row.get("title"),
        category=row.get("category"),
        featured=bool(row.get("featured", False)),
        created_at=to_datetime(row.get("created_at")),
    )


def _parse_area(row: dict[str, object]) -> ServiceArea:
    return ServiceArea(
        id=to_int(row["id"]),
        user_id=to_int(row["user_id"]),
        city=str(row.get("city") or ""),
        state=row.get("state"),
        country=row.get("country"),
        latitude=to_float(row.get("latitude")),
        longitude=to_float(row.get("longitude")),
        radius_km=to_float(row.get("radius_km")),
        created_at=to_datetime(row.get("created_at")),
    )
