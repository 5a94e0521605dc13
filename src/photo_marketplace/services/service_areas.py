"""Regions photographers work in, and distance checks against them."""

import math
from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from photo_marketplace.adapters.field_mapping import SERVICE_AREAS
from photo_marketplace.domain.models import UserRecord
from photo_marketplace.domain.portfolio import ServiceArea
from photo_marketplace.errors import NotFoundError, PermissionDeniedError
from photo_marketplace.services.validation import validate_payload

EARTH_RADIUS_KM = 6371.0


class ServiceAreaRepository(Protocol):
    """Persistence interface for service areas."""

    def list_areas(self, user_id: int) -> list[ServiceArea]:
        """Return the service areas of a photographer."""

    def list_all_areas(self) -> list[ServiceArea]:
        """Return every service area."""

    def get_area(self, area_id: int) -> ServiceArea | None:
        """Return an area by id, if present."""

    def create_area(self, payload: dict[str, object]) -> ServiceArea:
        """Insert an area and return it."""

    def delete_area(self, area_id: int) -> None:
        """Delete an area."""


class ServiceAreaCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    city: str = Field(min_length=1)
    state: str | None = None
    country: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    radius_km: float | None = Field(default=None, gt=0)


def distance_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points (haversine)."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lng2 - lng1)
    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


def covers(area: ServiceArea, lat: float, lng: float) -> bool:
    """Return True when the point lies within the area's radius."""
    if area.latitude is None or area.longitude is None or not area.radius_km:
        return False
    return distance_km(area.latitude, area.longitude, lat, lng) <= area.radius_km


@dataclass
class ServiceAreaService:
    repository: ServiceAreaRepository

    def list_areas(self, user_id: int) -> list[ServiceArea]:
        return self.repository.list_areas(user_id)

    def create_area(
        self, requester: UserRecord, payload: dict[str, object]
    ) -> ServiceArea:
        if not requester.is_photographer:
            raise PermissionDeniedError("Only photographers have service areas")
        validated = validate_payload(ServiceAreaCreate, payload, SERVICE_AREAS)
        return self.repository.create_area(
            {**validated.model_dump(), "user_id": requester.id}
        )

    def delete_area(self, requester: UserRecord, area_id: int) -> None:
        area = self.repository.get_area(area_id)
        if area is None:
            raise NotFoundError("Service area not found")
        if area.user_id != requester.id:
            raise PermissionDeniedError(
                "You don't have permission to delete this service area"
            )
        self.repository.delete_area(area_id)
