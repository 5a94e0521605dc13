"""Domain models for marketplace users."""

from dataclasses import dataclass, field
from datetime import datetime

PHOTOGRAPHER = "photographer"
CLIENT = "client"
USER_TYPES = frozenset({PHOTOGRAPHER, CLIENT})


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: int
    email: str
    name: str
    user_type: str
    auth_id: str | None = None
    phone: str | None = None
    avatar: str | None = None
    bio: str | None = None
    location: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    created_at: datetime | None = None

    @property
    def is_photographer(self) -> bool:
        return self.user_type == PHOTOGRAPHER

    @property
    def is_client(self) -> bool:
        return self.user_type == CLIENT


@dataclass(frozen=True)
class PhotographerProfile:
    """Photographer-specific profile, 1:1 with a photographer user."""

    id: int
    user_id: int
    instagram_username: str | None = None
    specialties: list[str] = field(default_factory=list)
    years_of_experience: int | None = None
    equipment_description: str | None = None
    portfolio_images: list[str] = field(default_factory=list)
    available_times: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class IdentityUser:
    """User as known by the identity provider."""

    id: str
    email: str | None
    email_confirmed_at: datetime | None = None
    metadata: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class IdentitySession:
    """Tokens issued by the identity provider after sign-in."""

    access_token: str
    refresh_token: str | None = None
    expires_at: int | None = None
