"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from photo_marketplace.adapters.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from photo_marketplace.adapters.supabase_portfolio_repository import (
    SupabasePortfolioRepository,
    SupabaseServiceAreaRepository,
)
from photo_marketplace.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from photo_marketplace.adapters.supabase_review_repository import (
    SupabaseReviewRepository,
)
from photo_marketplace.adapters.supabase_service_repository import (
    SupabaseServiceRepository,
)
from photo_marketplace.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from photo_marketplace.adapters.supabase_transaction_repository import (
    SupabaseTransactionRepository,
)
from photo_marketplace.adapters.supabase_user_repository import SupabaseUserRepository
from photo_marketplace.config import Settings
from photo_marketplace.services.auth import AuthService
from photo_marketplace.services.catalog import ServiceCatalogService
from photo_marketplace.services.finance import FinanceService
from photo_marketplace.services.portfolio import PortfolioService
from photo_marketplace.services.profiles import ProfileService
from photo_marketplace.services.reviews import ReviewService
from photo_marketplace.services.search import PhotographerSearchService
from photo_marketplace.services.service_areas import ServiceAreaService
from photo_marketplace.services.sessions import SessionService
from photo_marketplace.services.transactions import TransactionService
from photo_marketplace.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    user_service: UserService
    profile_service: ProfileService
    catalog_service: ServiceCatalogService
    session_service: SessionService
    transaction_service: TransactionService
    finance_service: FinanceService
    review_service: ReviewService
    portfolio_service: PortfolioService
    service_area_service: ServiceAreaService
    search_service: PhotographerSearchService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    auth_client = create_client(
        resolved_settings.supabase_url, resolved_settings.auth_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    profile_repository = SupabaseProfileRepository(supabase_client)
    service_repository = SupabaseServiceRepository(supabase_client)
    session_repository = SupabaseSessionRepository(supabase_client)
    transaction_repository = SupabaseTransactionRepository(supabase_client)
    review_repository = SupabaseReviewRepository(supabase_client)
    portfolio_repository = SupabasePortfolioRepository(supabase_client)
    area_repository = SupabaseServiceAreaRepository(supabase_client)
    identity_provider = SupabaseIdentityProvider(
        client=auth_client, admin_client=supabase_client
    )

    return AppContainer(
        settings=resolved_settings,
        auth_service=AuthService(
            identity=identity_provider,
            users=user_repository,
            profiles=profile_repository,
            auto_confirm_email=resolved_settings.auto_confirm_email,
        ),
        user_service=UserService(
            repository=user_repository,
            profiles=profile_repository,
            passwords=identity_provider,
        ),
        profile_service=ProfileService(profile_repository),
        catalog_service=ServiceCatalogService(service_repository, user_repository),
        session_service=SessionService(
            repository=session_repository,
            users=user_repository,
            services=service_repository,
        ),
        transaction_service=TransactionService(
            transaction_repository, session_repository
        ),
        finance_service=FinanceService(transaction_repository, session_repository),
        review_service=ReviewService(review_repository, session_repository),
        portfolio_service=PortfolioService(portfolio_repository),
        service_area_service=ServiceAreaService(area_repository),
        search_service=PhotographerSearchService(
            users=user_repository,
            profiles=profile_repository,
            areas=area_repository,
            default_radius_km=resolved_settings.search_radius_km,
        ),
    )
