"""Tests for money normalisation."""

import pytest

from photo_marketplace.services.money import (
    MAJOR,
    MINOR,
    normalize_minor_units,
    normalize_price_fields,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (150.5, 15050),
        (99.99, 9999),
        (0.5, 50),
        (150, 150),
        (150.0, 150),
        (15000, 15000),
        (1000.5, 1001),
        (0.125, 13),
        (2500.75, 2501),
    ],
)
def test_heuristic_without_unit(value: float, expected: int) -> None:
    assert normalize_minor_units(value) == expected


def test_explicit_major_unit_always_multiplies() -> None:
    assert normalize_minor_units(150.00, MAJOR) == 15000
    assert normalize_minor_units(1500, MAJOR) == 150000


def test_explicit_minor_unit_only_rounds() -> None:
    assert normalize_minor_units(150.5, MINOR) == 151
    assert normalize_minor_units(15000, MINOR) == 15000


def test_none_passes_through() -> None:
    assert normalize_minor_units(None) is None
    assert normalize_minor_units(None, MAJOR) is None


def test_unknown_unit_is_rejected() -> None:
    with pytest.raises(ValueError):
        normalize_minor_units(10, "dollars")


def test_normalised_cents_stay_stable() -> None:
    once = normalize_minor_units(0.5)
    assert once == 50
    assert normalize_minor_units(once) == 50
    assert normalize_minor_units(12.34) == 1234
    assert normalize_minor_units(1234) == 1234


def test_normalize_price_fields_only_touches_present_fields() -> None:
    payload = {"price": 99.9, "additional_photo_price": None, "title": "x"}

    normalize_price_fields(payload)

    assert payload == {"price": 9990, "additional_photo_price": None, "title": "x"}


def test_halves_round_up() -> None:
    assert normalize_minor_units(2.5, MINOR) == 3
    assert normalize_minor_units(12.5, MINOR) == 13
    assert normalize_minor_units(-2.5, MINOR) == -2
