"""Supabase Auth implementation of the identity provider."""

import logging
from dataclasses import dataclass
from typing import Any

from supabase import AuthError, Client

from photo_marketplace.domain.models import IdentitySession, IdentityUser
from photo_marketplace.errors import IdentityError
from photo_marketplace.services.auth import IdentityProvider

logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Identity calls against Supabase Auth.

    `client` signs users in and therefore holds their session; `admin_client`
    uses the service key for admin endpoints. They are kept apart so a sign-in
    never changes the credentials used for data access.
    """

    client: Client
    admin_client: Client

    def sign_up(
        self, email: str, password: str, metadata: dict[str, object]
    ) -> IdentityUser:
        try:
            response = self.client.auth.sign_up(
                {"email": email, "password": password, "options": {"data": metadata}}
            )
        except AuthError as exc:
            raise IdentityError(exc.message, error_code=_code(exc)) from exc
        if response.user is None:
            raise IdentityError("Sign-up returned no user")
        return _to_identity_user(response.user)

    def sign_in_with_password(
        self, email: str, password: str
    ) -> tuple[IdentityUser, IdentitySession]:
        try:
            response = self.client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as exc:
            raise IdentityError(exc.message, error_code=_code(exc)) from exc
        if response.user is None or response.session is None:
            raise IdentityError("Authentication failed")
        session = response.session
        return _to_identity_user(response.user), IdentitySession(
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            expires_at=session.expires_at,
        )

    def get_user(self, access_token: str) -> IdentityUser:
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            raise IdentityError(exc.message, error_code=_code(exc)) from exc
        if response is None or response.user is None:
            raise IdentityError("Invalid token")
        return _to_identity_user(response.user)

    def confirm_email(self, auth_id: str) -> None:
        self._admin_update(auth_id, {"email_confirm": True})

    def update_password(self, auth_id: str, password: str) -> None:
        self._admin_update(auth_id, {"password": password})

    def resend_signup(self, email: str) -> None:
        try:
            self.client.auth.resend({"type": "signup", "email": email})
        except AuthError as exc:
            raise IdentityError(exc.message, error_code=_code(exc)) from exc

    def find_by_email(self, email: str) -> IdentityUser | None:
        """Scan the admin user list for an email (case-insensitive)."""
        try:
            users = self.admin_client.auth.admin.list_users()
        except AuthError as exc:
            raise IdentityError(exc.message, error_code=_code(exc)) from exc
        wanted = email.lower()
        for user in users:
            if (user.email or "").lower() == wanted:
                return _to_identity_user(user)
        return None

    def delete_user(self, auth_id: str) -> None:
        try:
            self.admin_client.auth.admin.delete_user(auth_id)
        except AuthError as exc:
            logger.error(
                "Failed to delete identity user",
                extra={"auth_id": auth_id, "reason": exc.message},
            )
            raise IdentityError(exc.message, error_code=_code(exc)) from exc

    def sign_out(self, access_token: str) -> None:
        try:
            self.admin_client.auth.admin.sign_out(access_token)
        except AuthError as exc:
            raise IdentityError(exc.message, error_code=_code(exc)) from exc

    def _admin_update(self, auth_id: str, attributes: dict[str, Any]) -> None:
        try:
            self.admin_client.auth.admin.update_user_by_id(auth_id, attributes)
        except AuthError as exc:
            raise IdentityError(exc.message, error_code=_code(exc)) from exc


def _code(exc: AuthError) -> str | None:
    return getattr(exc, "code", None)


def _to_identity_user(user: Any) -> IdentityUser:
    return IdentityUser(
        id=str(user.id),
        email=user.email,
        email_confirmed_at=user.email_confirmed_at,
        metadata=dict(user.user_metadata or {}),
    )
