"""Photographer service catalogue."""

from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from photo_marketplace.adapters.field_mapping import SERVICES
from photo_marketplace.domain.catalog import ServiceOffering
from photo_marketplace.domain.models import UserRecord
from photo_marketplace.errors import (
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from photo_marketplace.services.money import normalize_price_fields
from photo_marketplace.services.validation import validate_payload

SERVICE_MONEY_FIELDS = ("price", "additional_photo_price")
NULLABLE_SERVICE_FIELDS = frozenset(
    {"description", "max_photos", "additional_photo_price"}
)


class ServiceRepository(Protocol):
    """Persistence interface for catalogue services."""

    def list_services(
        self, user_id: int, active_only: bool = False
    ) -> list[ServiceOffering]:
        """Return services of a photographer."""

    def get_service(self, service_id: int) -> ServiceOffering | None:
        """Return a service by id, if present."""

    def create_service(self, payload: dict[str, object]) -> ServiceOffering:
        """Insert a service row and return it."""

    def update_service(
        self, service_id: int, payload: dict[str, object]
    ) -> ServiceOffering | None:
        """Apply a column patch and return the updated row."""

    def delete_service(self, service_id: int) -> None:
        """Delete a service row."""

    def count_sessions(self, service_id: int) -> int:
        """Return how many sessions reference the service."""


class UserLookup(Protocol):
    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id, if present."""


class ServiceCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    description: str | None = None
    price: float = Field(ge=0)
    duration: int = Field(ge=1)
    max_photos: int | None = Field(default=None, ge=0)
    additional_photo_price: float | None = Field(default=None, ge=0)
    active: bool = True


class ServicePatch(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    duration: int | None = Field(default=None, ge=1)
    max_photos: int | None = Field(default=None, ge=0)
    additional_photo_price: float | None = Field(default=None, ge=0)
    active: bool | None = None


@dataclass
class ServiceCatalogService:
    """Application service for the offerings a photographer sells."""

    repository: ServiceRepository
    users: UserLookup

    def list_own(self, requester: UserRecord) -> list[ServiceOffering]:
        self._require_photographer(requester)
        return self.repository.list_services(requester.id)

    def list_active_for_photographer(
        self, photographer_id: int
    ) -> list[ServiceOffering]:
        """Return the active services of a photographer for public browsing."""
        photographer = self.users.get_user(photographer_id)
        if photographer is None or not photographer.is_photographer:
            raise NotFoundError("Photographer not found")
        return self.repository.list_services(photographer_id, active_only=True)

    def create_service(
        self,
        requester: UserRecord,
        payload: dict[str, object],
        money_unit: str | None = None,
    ) -> ServiceOffering:
        self._require_photographer(requester)
        validated = validate_payload(ServiceCreate, payload, SERVICES)
        columns = validated.model_dump()
        normalize_price_fields(columns, money_unit, SERVICE_MONEY_FIELDS)
        columns["user_id"] = requester.id
        return self.repository.create_service(columns)

    def update_service(
        self,
        requester: UserRecord,
        service_id: int,
        patch: dict[str, object],
        money_unit: str | None = None,
    ) -> ServiceOffering:
        existing = self._get_owned(requester, service_id)
        validated = validate_payload(ServicePatch, patch, SERVICES)
        changes = {
            key: value
            for key, value in validated.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_SERVICE_FIELDS
        }
        if not changes:
            return existing
        normalize_price_fields(changes, money_unit, SERVICE_MONEY_FIELDS)
        updated = self.repository.update_service(service_id, changes)
        if updated is None:
            raise NotFoundError("Service not found")
        return updated

    def delete_service(self, requester: UserRecord, service_id: int) -> None:
        """Delete a service that no session references."""
        self._get_owned(requester, service_id)
        if self.repository.count_sessions(service_id):
            raise ValidationError("Service is used by sessions and cannot be deleted")
        self.repository.delete_service(service_id)

    def _get_owned(self, requester: UserRecord, service_id: int) -> ServiceOffering:
        self._require_photographer(requester)
        service = self.repository.get_service(service_id)
        if service is None:
            raise NotFoundError("Service not found")
        if service.user_id != requester.id:
            raise PermissionDeniedError(
                "You don't have permission to modify this service"
            )
        return service

    @staticmethod
    def _require_photographer(requester: UserRecord) -> None:
        if not requester.is_photographer:
            raise PermissionDeniedError("Only photographers can manage services")
