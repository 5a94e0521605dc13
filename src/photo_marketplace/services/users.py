"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from photo_marketplace.adapters.field_mapping import USERS
from photo_marketplace.domain.models import (
    CLIENT,
    PhotographerProfile,
    UserRecord,
)
from photo_marketplace.errors import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from photo_marketplace.services.profiles import ProfileRepository
from photo_marketplace.services.validation import validate_payload

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class UserRepository(Protocol):
    """Persistence interface for user rows."""

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id, if present."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return a user by email, if present."""

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Insert a user row and return it."""

    def update_user(
        self, user_id: int, payload: dict[str, object]
    ) -> UserRecord | None:
        """Apply a column patch and return the updated user."""

    def delete_user(self, user_id: int) -> None:
        """Delete a user row."""

    def list_clients(self) -> list[UserRecord]:
        """Return every client user."""

    def list_photographers(self) -> list[UserRecord]:
        """Return every photographer user."""


class PasswordStore(Protocol):
    def update_password(self, auth_id: str, password: str) -> None:
        """Set a new password for an identity user."""


class UserPatch(BaseModel):
    """Fields a user may change on their own row."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, min_length=1)
    phone: str | None = None
    avatar: str | None = None
    bio: str | None = None
    location: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    password: str | None = Field(default=None, min_length=MIN_PASSWORD_LENGTH)


class ClientCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    email: EmailStr
    phone: str | None = None


@dataclass(frozen=True)
class UserWithProfile:
    user: UserRecord
    profile: PhotographerProfile | None = None


@dataclass
class UserService:
    """Application service for user rows."""

    repository: UserRepository
    profiles: ProfileRepository
    passwords: PasswordStore

    def get_with_profile(self, user: UserRecord) -> UserWithProfile:
        """Return the user with their photographer profile, when they have one."""
        profile = self.profiles.get_profile(user.id) if user.is_photographer else None
        return UserWithProfile(user=user, profile=profile)

    def update_me(self, user: UserRecord, patch: dict[str, object]) -> UserRecord:
        """Update the requester's own row; passwords go to the identity provider."""
        validated = validate_payload(UserPatch, patch, USERS)
        changes = {
            key: value
            for key, value in validated.model_dump(exclude_unset=True).items()
            if value is not None
        }
        password = changes.pop("password", None)
        if password is not None:
            if not user.auth_id:
                raise ValidationError("This account has no login to update")
            self.passwords.update_password(user.auth_id, str(password))
            logger.info("Password updated", extra={"user_id": user.id})
        if not changes:
            return user
        updated = self.repository.update_user(user.id, changes)
        if updated is None:
            raise NotFoundError("User not found")
        return updated

    def list_clients(self, requester: UserRecord) -> list[UserRecord]:
        self._require_photographer(requester)
        return sorted(self.repository.list_clients(), key=lambda user: user.name)

    def create_client(
        self, requester: UserRecord, payload: dict[str, object]
    ) -> UserRecord:
        """Register a client row on behalf of a photographer."""
        self._require_photographer(requester)
        validated = validate_payload(ClientCreate, payload, USERS)
        email = validated.email.lower()
        if self.repository.get_by_email(email) is not None:
            raise ConflictError("A user with this email already exists")
        created = self.repository.create_user(
            {
                "name": validated.name,
                "email": email,
                "phone": validated.phone or "",
                "user_type": CLIENT,
            }
        )
        logger.info(
            "Client created by photographer",
            extra={"user_id": requester.id, "client_id": created.id},
        )
        return created

    @staticmethod
    def _require_photographer(requester: UserRecord) -> None:
        if not requester.is_photographer:
            raise PermissionDeniedError("Only photographers can manage clients")
