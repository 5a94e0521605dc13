"""Tests for container wiring."""

from photo_marketplace.adapters.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from photo_marketplace.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from photo_marketplace.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert isinstance(container.session_service.repository, SupabaseSessionRepository)
    assert isinstance(container.auth_service.identity, SupabaseIdentityProvider)
    assert container.finance_service.sessions is container.session_service.repository
    assert container.search_service.default_radius_km == settings.search_radius_km
