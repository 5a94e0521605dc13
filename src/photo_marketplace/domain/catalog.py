"""Domain models for the photographer service catalogue."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceOffering:
    """A priced offering owned by one photographer. Prices are in cents."""

    id: int
    user_id: int
    name: str
    price: int
    duration: int
    description: str | None = None
    max_photos: int | None = None
    additional_photo_price: int | None = None
    active: bool = True
