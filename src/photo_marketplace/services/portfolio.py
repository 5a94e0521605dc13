"""Portfolio images shown on a photographer's public page."""

from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from photo_marketplace.adapters.field_mapping import PORTFOLIO_ITEMS
from photo_marketplace.domain.models import UserRecord
from photo_marketplace.domain.portfolio import PortfolioItem
from photo_marketplace.errors import NotFoundError, PermissionDeniedError
from photo_marketplace.services.validation import validate_payload


class PortfolioRepository(Protocol):
    """Persistence interface for portfolio items."""

    def list_items(self, user_id: int) -> list[PortfolioItem]:
        """Return the portfolio of a photographer."""

    def get_item(self, item_id: int) -> PortfolioItem | None:
        """Return an item by id, if present."""

    def create_item(self, payload: dict[str, object]) -> PortfolioItem:
        """Insert an item and return it."""

    def update_item(
        self, item_id: int, payload: dict[str, object]
    ) -> PortfolioItem | None:
        """Apply a column patch and return the updated item."""

    def delete_item(self, item_id: int) -> None:
        """Delete an item."""


class PortfolioItemCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    image_url: str = Field(min_length=1)
    title: str | None = None
    category: str | None = None
    featured: bool = False


class PortfolioItemPatch(BaseModel):
    model_config = ConfigDict(extra="ignore")

    image_url: str | None = Field(default=None, min_length=1)
    title: str | None = None
    category: str | None = None
    featured: bool | None = None


@dataclass
class PortfolioService:
    repository: PortfolioRepository

    def list_items(self, user_id: int) -> list[PortfolioItem]:
        """Return featured items first, then the rest."""
        items = self.repository.list_items(user_id)
        return sorted(items, key=lambda item: not item.featured)

    def create_item(
        self, requester: UserRecord, payload: dict[str, object]
    ) -> PortfolioItem:
        if not requester.is_photographer:
            raise PermissionDeniedError("Only photographers have a portfolio")
        validated = validate_payload(PortfolioItemCreate, payload, PORTFOLIO_ITEMS)
        return self.repository.create_item(
            {**validated.model_dump(), "user_id": requester.id}
        )

    def update_item(
        self, requester: UserRecord, item_id: int, patch: dict[str, object]
    ) -> PortfolioItem:
        existing = self._get_owned(requester, item_id)
        validated = validate_payload(PortfolioItemPatch, patch, PORTFOLIO_ITEMS)
        changes = {
            key: value
            for key, value in validated.model_dump(exclude_unset=True).items()
            if value is not None
        }
        if not changes:
            return existing
        updated = self.repository.update_item(item_id, changes)
        if updated is None:
            raise NotFoundError("Portfolio item not found")
        return updated

    def delete_item(self, requester: UserRecord, item_id: int) -> None:
        self._get_owned(requester, item_id)
        self.repository.delete_item(item_id)

    def _get_owned(self, requester: UserRecord, item_id: int) -> PortfolioItem:
        item = self.repository.get_item(item_id)
        if item is None:
            raise NotFoundError("Portfolio item not found")
        if item.user_id != requester.id:
            raise PermissionDeniedError(
                "You don't have permission to modify this portfolio item"
            )
        return item
