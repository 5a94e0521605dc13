"""Bookkeeping transaction endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Depends, Request, Response, status

from photo_marketplace.adapters.field_mapping import TRANSACTIONS, to_columns
from photo_marketplace.api.dependencies import require_user, split_money_unit
from photo_marketplace.api.serializers import present, present_many
from photo_marketplace.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from photo_marketplace.containers import AppContainer

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


@router.get("")
async def list_transactions(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, Any]]:
    container: AppContainer = request.app.state.container
    transactions = container.transaction_service.list_transactions(user)
    return present_many(TRANSACTIONS, transactions)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_transaction(
    request: Request,
    body: dict[str, Any] = Body(...),
    user: UserRecord = Depends(require_user),
) -> dict[str, Any]:
    container: AppContainer = request.app.state.container
    data, unit = split_money_unit(body)
    transaction = container.transaction_service.create_transaction(
        user, to_columns(TRANSACTIONS, data), unit
    )
    return present(TRANSACTIONS, transaction)


@router.patch("/{transaction_id}")
async def update_transaction(
    transaction_id: int,
    request: Request,
    body: dict[str, Any] = Body(...),
    user: UserRecord = Depends(require_user),
) -> dict[str, Any]:
    container: AppContainer = request.app.state.container
    data, unit = split_money_unit(body)
    transaction = container.transaction_service.update_transaction(
        user, transaction_id, to_columns(TRANSACTIONS, data), unit
    )
    return present(TRANSACTIONS, transaction)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: int, request: Request, user: UserRecord = Depends(require_user)
) -> Response:
    container: AppContainer = request.app.state.container
    container.transaction_service.delete_transaction(user, transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
