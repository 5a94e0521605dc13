"""Photographer profile read and upsert."""

from dataclasses import dataclass
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

from photo_marketplace.adapters.field_mapping import PHOTOGRAPHER_PROFILES
from photo_marketplace.domain.models import PhotographerProfile, UserRecord
from photo_marketplace.errors import NotFoundError, PermissionDeniedError
from photo_marketplace.services.validation import validate_payload


class ProfileRepository(Protocol):
    """Persistence interface for photographer profiles."""

    def get_profile(self, user_id: int) -> PhotographerProfile | None:
        """Return the profile of a photographer, if present."""

    def create_profile(self, payload: dict[str, object]) -> PhotographerProfile:
        """Insert a profile row and return it."""

    def update_profile(
        self, user_id: int, payload: dict[str, object]
    ) -> PhotographerProfile | None:
        """Apply a column patch to a photographer's profile."""


class ProfilePatch(BaseModel):
    model_config = ConfigDict(extra="ignore")

    instagram_username: str | None = None
    specialties: list[str] | None = None
    years_of_experience: int | None = Field(default=None, ge=0)
    equipment_description: str | None = None
    portfolio_images: list[str] | None = None
    available_times: dict[str, Any] | None = None


@dataclass
class ProfileService:
    """Application service for photographer profiles."""

    repository: ProfileRepository

    def get_profile(self, requester: UserRecord) -> PhotographerProfile:
        self._require_photographer(requester)
        profile = self.repository.get_profile(requester.id)
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile

    def upsert_profile(
        self, requester: UserRecord, patch: dict[str, object]
    ) -> PhotographerProfile:
        """Create the profile when missing, otherwise update it."""
        self._require_photographer(requester)
        validated = validate_payload(ProfilePatch, patch, PHOTOGRAPHER_PROFILES)
        changes = validated.model_dump(exclude_unset=True)

        existing = self.repository.get_profile(requester.id)
        if existing is None:
            return self.repository.create_profile({**changes, "user_id": requester.id})
        if not changes:
            return existing
        updated = self.repository.update_profile(requester.id, changes)
        if updated is None:
            raise NotFoundError("Profile not found")
        return updated

    @staticmethod
    def _require_photographer(requester: UserRecord) -> None:
        if not requester.is_photographer:
            raise PermissionDeniedError("Only photographers have a profile")
