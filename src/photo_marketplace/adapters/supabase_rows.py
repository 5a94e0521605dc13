"""Row conversion helpers shared by the Supabase repositories."""

from collections.abc import Mapping
from datetime import date, datetime

from photo_marketplace.errors import UpstreamError


def to_int(value: object) -> int | None:
    """Normalise an id column to int; None stays None."""
    if value is None or value == "":
        return None
    return int(value)  # type: ignore[arg-type]


def to_float(value: object) -> float | None:
    if value is None or value == "":
        return None
    return float(value)  # type: ignore[arg-type]


def to_datetime(value: object) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None


def serialize(payload: Mapping[str, object]) -> dict[str, object]:
    """Return a copy of a column payload with dates as ISO strings."""
    return {
        key: value.isoformat() if isinstance(value, date) else value
        for key, value in payload.items()
    }


def first_row(data: object, action: str) -> dict[str, object]:
    """Return the first row of a write response, or raise."""
    if not data:
        raise UpstreamError(f"Failed to {action} in Supabase")
    return data[0]  # type: ignore[index]
