"""Tests for the camelCase <-> column tables."""

import pytest

from photo_marketplace.adapters.field_mapping import (
    COLUMN_MAPS,
    FIELD_MAPS,
    SESSIONS,
    TRANSACTIONS,
    USERS,
    api_name,
    from_columns,
    to_columns,
)


@pytest.mark.parametrize("entity", sorted(FIELD_MAPS))
def test_tables_are_inverse(entity: str) -> None:
    fields = FIELD_MAPS[entity]
    assert len(set(fields.values())) == len(fields)
    payload = {name: index for index, name in enumerate(fields)}

    row = {column: index for index, column in enumerate(COLUMN_MAPS[entity])}

    assert from_columns(entity, to_columns(entity, payload)) == payload
    assert to_columns(entity, from_columns(entity, row)) == row


def test_session_fields_translate() -> None:
    columns = to_columns(
        SESSIONS,
        {"photographerId": 1, "totalPrice": 15000, "amountPaid": 0, "title": "x"},
    )

    assert columns == {
        "photographer_id": 1,
        "total_price": 15000,
        "amount_paid": 0,
        "title": "x",
    }


def test_unknown_keys_are_dropped_both_ways() -> None:
    assert to_columns(USERS, {"name": "Ana", "isAdmin": True}) == {"name": "Ana"}
    assert from_columns(TRANSACTIONS, {"amount": 10, "secret": "x"}) == {"amount": 10}


def test_api_name() -> None:
    assert api_name(SESSIONS, "payment_status") == "paymentStatus"
    assert api_name(USERS, "user_type") == "userType"
