"""Public photographer search by text and location."""

from dataclasses import dataclass

from photo_marketplace.domain.models import PhotographerProfile, UserRecord
from photo_marketplace.errors import ValidationError
from photo_marketplace.services.profiles import ProfileRepository
from photo_marketplace.services.service_areas import (
    ServiceAreaRepository,
    covers,
    distance_km,
)
from photo_marketplace.services.users import UserRepository


@dataclass(frozen=True)
class PhotographerMatch:
    user: UserRecord
    profile: PhotographerProfile | None = None
    distance_km: float | None = None


def matches_query(user: UserRecord, query: str | None) -> bool:
    """Case-insensitive substring match on name, bio and location."""
    if not query:
        return True
    needle = query.strip().lower()
    fields = (user.name, user.bio, user.location)
    return any(needle in (value or "").lower() for value in fields)


@dataclass
class PhotographerSearchService:
    users: UserRepository
    profiles: ProfileRepository
    areas: ServiceAreaRepository
    default_radius_km: float = 50.0

    def search(
        self,
        query: str | None = None,
        lat: float | None = None,
        lng: float | None = None,
        radius_km: float | None = None,
    ) -> list[PhotographerMatch]:
        """Return photographers matching the text, near the point when given.

        A photographer is near when their own coordinates are within the radius
        or one of their service areas covers the point. Results with a known
        distance come first, closest first.
        """
        if (lat is None) != (lng is None):
            raise ValidationError("lat and lng must be given together")
        radius = radius_km or self.default_radius_km
        candidates = [
            user
            for user in self.users.list_photographers()
            if matches_query(user, query)
        ]

        areas_by_user: dict[int, list] = {}
        if lat is not None:
            for area in self.areas.list_all_areas():
                areas_by_user.setdefault(area.user_id, []).append(area)

        matches = []
        for user in candidates:
            distance = None
            if lat is not None and lng is not None:
                if user.latitude is not None and user.longitude is not None:
                    distance = distance_km(user.latitude, user.longitude, lat, lng)
                near = distance is not None and distance <= radius
                if not near and not any(
                    covers(area, lat, lng) for area in areas_by_user.get(user.id, [])
                ):
                    continue
            matches.append(
                PhotographerMatch(
                    user=user,
                    profile=self.profiles.get_profile(user.id),
                    distance_km=distance,
                )
            )
        return sorted(
            matches,
            key=lambda match: (
                match.distance_km is None,
                match.distance_km or 0.0,
                match.user.name,
            ),
        )
