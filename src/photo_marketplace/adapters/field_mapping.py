"""Static camelCase <-> snake_case field tables for every stored entity.

API payloads use camelCase names; Supabase columns use snake_case. The tables
below are written out by hand per entity so a renamed column is a one-line
change here, and `from_columns` is always the exact inverse of `to_columns`.
"""

from collections.abc import Mapping

USERS = "users"
PHOTOGRAPHER_PROFILES = "photographer_profiles"
SERVICES = "services"
SESSIONS = "sessions"
TRANSACTIONS = "transactions"
REVIEWS = "reviews"
PORTFOLIO_ITEMS = "portfolio_items"
SERVICE_AREAS = "photographer_service_areas"

FIELD_MAPS: dict[str, dict[str, str]] = {
    USERS: {
        "id": "id",
        "authId": "auth_id",
        "email": "email",
        "name": "name",
        "userType": "user_type",
        "phone": "phone",
        "avatar": "avatar",
        "bio": "bio",
        "location": "location",
        "latitude": "latitude",
        "longitude": "longitude",
        "createdAt": "created_at",
    },
    PHOTOGRAPHER_PROFILES: {
        "id": "id",
        "userId": "user_id",
        "instagramUsername": "instagram_username",
        "specialties": "specialties",
        "yearsOfExperience": "years_of_experience",
        "equipmentDescription": "equipment_description",
        "portfolioImages": "portfolio_images",
        "availableTimes": "available_times",
    },
    SERVICES: {
        "id": "id",
        "userId": "user_id",
        "name": "name",
        "description": "description",
        "price": "price",
        "duration": "duration",
        "maxPhotos": "max_photos",
        "additionalPhotoPrice": "additional_photo_price",
        "active": "active",
    },
    SESSIONS: {
        "id": "id",
        "photographerId": "photographer_id",
        "clientId": "client_id",
        "serviceId": "service_id",
        "title": "title",
        "description": "description",
        "date": "date",
        "duration": "duration",
        "location": "location",
        "locationLat": "location_lat",
        "locationLng": "location_lng",
        "status": "status",
        "totalPrice": "total_price",
        "photosIncluded": "photos_included",
        "photosDelivered": "photos_delivered",
        "additionalPhotos": "additional_photos",
        "additionalPhotoPrice": "additional_photo_price",
        "paymentStatus": "payment_status",
        "amountPaid": "amount_paid",
        "createdAt": "created_at",
    },
    TRANSACTIONS: {
        "id": "id",
        "userId": "user_id",
        "sessionId": "session_id",
        "amount": "amount",
        "description": "description",
        "category": "category",
        "date": "date",
        "type": "type",
    },
    REVIEWS: {
        "id": "id",
        "sessionId": "session_id",
        "reviewerId": "reviewer_id",
        "photographerId": "photographer_id",
        "rating": "rating",
        "qualityRating": "quality_rating",
        "professionalismRating": "professionalism_rating",
        "comment": "comment",
        "createdAt": "created_at",
    },
    PORTFOLIO_ITEMS: {
        "id": "id",
        "userId": "user_id",
        "imageUrl": "image_url",
        "title": "title",
        "category": "category",
        "featured": "featured",
        "createdAt": "created_at",
    },
    SERVICE_AREAS: {
        "id": "id",
        "userId": "user_id",
        "city": "city",
        "state": "state",
        "country": "country",
        "latitude": "latitude",
        "longitude": "longitude",
        "radiusKm": "radius_km",
        "createdAt": "created_at",
    },
}

COLUMN_MAPS: dict[str, dict[str, str]] = {
    entity: {column: name for name, column in fields.items()}
    for entity, fields in FIELD_MAPS.items()
}


def to_columns(entity: str, payload: Mapping[str, object]) -> dict[str, object]:
    """Translate API field names to store columns, dropping unknown keys."""
    fields = FIELD_MAPS[entity]
    return {fields[key]: value for key, value in payload.items() if key in fields}


def from_columns(entity: str, row: Mapping[str, object]) -> dict[str, object]:
    """Translate store columns to API field names, dropping unknown keys."""
    columns = COLUMN_MAPS[entity]
    return {columns[key]: value for key, value in row.items() if key in columns}


def api_name(entity: str, column: str) -> str:
    """Return the API field name for a column."""
    return COLUMN_MAPS[entity][column]

