"""Domain models for portfolio items and service areas."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PortfolioItem:
    """An image in a photographer's portfolio."""

    id: int
    user_id: int
    image_url: str
    title: str | None = None
    category: str | None = None
    featured: bool = False
    created_at: datetime | None = None


@dataclass(frozen=True)
class ServiceArea:
    """A region a photographer works in."""

    id: int
    user_id: int
    city: str
    state: str | None = None
    country: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    radius_km: float | None = None
    created_at: datetime | None = None
