"""Normalisation of price-like values to integer cents."""

import math
from collections.abc import Iterable, MutableMapping

MAJOR = "major"
MINOR = "minor"
MONEY_UNITS = frozenset({MAJOR, MINOR})

PRICE_FIELDS = ("price", "additional_photo_price", "total_price", "amount_paid")

# Values below this with a fractional part are read as reais, not cents.
_HEURISTIC_CEILING = 1000


def normalize_minor_units(
    value: float | int | None, unit: str | None = None
) -> int | None:
    """Return `value` as integer cents.

    With an explicit `unit` the conversion is exact. Without one, the legacy
    inference applies: a value under 1000 with a fractional part is taken to be
    in major units and multiplied by 100; anything else is already cents.
    """
    if value is None:
        return None
    if unit == MAJOR:
        return _round_half_up(value * 100)
    if unit == MINOR:
        return _round_half_up(value)
    if unit is not None:
        raise ValueError(f"Unknown money unit: {unit}")
    if value < _HEURISTIC_CEILING and value % 1 != 0:
        return _round_half_up(value * 100)
    return _round_half_up(value)


def normalize_price_fields(
    payload: MutableMapping[str, object],
    unit: str | None = None,
    fields: Iterable[str] = PRICE_FIELDS,
) -> MutableMapping[str, object]:
    """Normalise every present price field of a column payload in place."""
    for name in fields:
        if name in payload and payload[name] is not None:
            payload[name] = normalize_minor_units(payload[name], unit)
    return payload


def _round_half_up(value: float) -> int:
    # Halves round towards positive infinity.
    return math.floor(value + 0.5)
