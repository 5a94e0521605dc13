"""Registration, sign-in and bearer-token resolution.

Passwords live only in the identity provider. The `users` table row is matched
to the identity user by email; `auth_id` records the identity user's id.
"""

import logging
from dataclasses import dataclass
from typing import Literal, Protocol

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel

from photo_marketplace.domain.models import (
    CLIENT,
    PHOTOGRAPHER,
    IdentitySession,
    IdentityUser,
    UserRecord,
)
from photo_marketplace.errors import (
    AuthenticationError,
    IdentityError,
    NotFoundError,
    ValidationError,
)
from photo_marketplace.services.profiles import ProfileRepository
from photo_marketplace.services.users import MIN_PASSWORD_LENGTH, UserRepository
from photo_marketplace.services.validation import validate_payload

logger = logging.getLogger(__name__)

EMAIL_NOT_CONFIRMED = "EMAIL_NOT_CONFIRMED"
INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
USER_NOT_FOUND = "USER_NOT_FOUND"
AUTH_FAILED = "AUTH_FAILED"

VERIFICATION_SENT_MESSAGE = (
    "Verification email has been sent. "
    "Please check your email to confirm your account."
)
NO_SESSION_MESSAGE = (
    "Account created but session could not be established. Please try logging in."
)


class IdentityProvider(Protocol):
    """Interface to the hosted identity service."""

    def sign_up(
        self, email: str, password: str, metadata: dict[str, object]
    ) -> IdentityUser:
        """Create an identity user."""

    def sign_in_with_password(
        self, email: str, password: str
    ) -> tuple[IdentityUser, IdentitySession]:
        """Exchange credentials for a session."""

    def get_user(self, access_token: str) -> IdentityUser:
        """Return the identity user a token belongs to."""

    def confirm_email(self, auth_id: str) -> None:
        """Mark the user's email as confirmed."""

    def update_password(self, auth_id: str, password: str) -> None:
        """Set a new password."""

    def resend_signup(self, email: str) -> None:
        """Send the signup verification email again."""

    def find_by_email(self, email: str) -> IdentityUser | None:
        """Return the identity user with this email, if any."""

    def delete_user(self, auth_id: str) -> None:
        """Remove an identity user."""

    def sign_out(self, access_token: str) -> None:
        """Revoke a session."""


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class RegisterRequest(_CamelModel):
    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    confirm_password: str
    name: str = Field(min_length=1)
    user_type: Literal["photographer", "client"]
    phone: str | None = None

    @model_validator(mode="after")
    def passwords_match(self) -> "RegisterRequest":
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class LoginRequest(_CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class EmailRequest(_CamelModel):
    email: EmailStr


@dataclass(frozen=True)
class AuthResult:
    """User row plus the session, when one could be established."""

    user: UserRecord
    session: IdentitySession | None = None
    message: str | None = None


def classify_sign_in_error(message: str) -> str:
    """Map an identity provider failure message to an error code."""
    lowered = message.lower()
    if "not confirmed" in lowered or "email confirmation" in lowered:
        return EMAIL_NOT_CONFIRMED
    if "invalid login credentials" in lowered or "incorrect email" in lowered:
        return INVALID_CREDENTIALS
    if "user not found" in lowered:
        return USER_NOT_FOUND
    return AUTH_FAILED


@dataclass
class AuthService:
    """Application service for authentication flows."""

    identity: IdentityProvider
    users: UserRepository
    profiles: ProfileRepository
    auto_confirm_email: bool = False

    def register(self, payload: dict[str, object]) -> AuthResult:
        """Create the identity user, the user row and, for photographers, a profile."""
        request = validate_payload(RegisterRequest, payload)
        email = request.email.lower()
        if self.users.get_by_email(email) is not None:
            raise ValidationError("Email already in use")

        try:
            identity_user = self.identity.sign_up(
                email,
                request.password,
                {"name": request.name, "user_type": request.user_type},
            )
        except IdentityError as exc:
            if "already registered" in exc.message.lower():
                raise ValidationError("Email already in use") from exc
            raise

        try:
            if self.auto_confirm_email:
                self.identity.confirm_email(identity_user.id)
            user = self.users.create_user(
                {
                    "auth_id": identity_user.id,
                    "email": email,
                    "name": request.name,
                    "user_type": request.user_type,
                    "phone": request.phone,
                }
            )
        except Exception:
            logger.exception(
                "Registration failed, removing identity user",
                extra={"email": email},
            )
            self.identity.delete_user(identity_user.id)
            raise

        if user.is_photographer:
            try:
                self.profiles.create_profile(
                    {
                        "user_id": user.id,
                        "specialties": [],
                        "portfolio_images": [],
                        "available_times": {},
                    }
                )
            except Exception:
                logger.exception(
                    "Profile insert failed, rolling back registration",
                    extra={"email": email, "user_id": user.id},
                )
                self.users.delete_user(user.id)
                self.identity.delete_user(identity_user.id)
                raise

        logger.info(
            "User registered", extra={"user_id": user.id, "user_type": user.user_type}
        )
        try:
            _, session = self.identity.sign_in_with_password(email, request.password)
        except IdentityError as exc:
            if classify_sign_in_error(exc.message) == EMAIL_NOT_CONFIRMED:
                return AuthResult(user=user, message=VERIFICATION_SENT_MESSAGE)
            logger.warning(
                "Sign-in after registration failed",
                extra={"user_id": user.id, "reason": exc.message},
            )
            return AuthResult(user=user, message=NO_SESSION_MESSAGE)
        return AuthResult(user=user, session=session)

    def login(self, payload: dict[str, object]) -> AuthResult:
        """Sign in and return the matching user row."""
        request = validate_payload(LoginRequest, payload)
        email = request.email.lower()
        try:
            identity_user, session = self.identity.sign_in_with_password(
                email, request.password
            )
        except IdentityError as exc:
            code = classify_sign_in_error(exc.message)
            logger.info("Login failed", extra={"email": email, "error_code": code})
            raise _login_error(code, email, exc.message) from exc

        user = self.users.get_by_email(email)
        if user is None:
            logger.warning(
                "Identity user without a user row, creating it",
                extra={"email": email},
            )
            user = self.users.create_user(_row_from_identity(identity_user, email))
        logger.info("Login succeeded", extra={"user_id": user.id})
        return AuthResult(user=user, session=session)

    def confirm_email(self, payload: dict[str, object]) -> str:
        """Confirm a user's email by hand; returns a status message."""
        email = validate_payload(EmailRequest, payload).email.lower()
        if self.users.get_by_email(email) is None:
            raise NotFoundError("User not found in database")
        identity_user = self.identity.find_by_email(email)
        if identity_user is None:
            raise NotFoundError("User not found in authentication system")
        if identity_user.email_confirmed_at is not None:
            return "Email already confirmed"
        self.identity.confirm_email(identity_user.id)
        logger.info("Email confirmed manually", extra={"email": email})
        return "Email confirmed successfully"

    def resend_verification(self, payload: dict[str, object]) -> str:
        email = validate_payload(EmailRequest, payload).email.lower()
        self.identity.resend_signup(email)
        return "Verification email sent"

    def logout(self, access_token: str | None) -> None:
        """Revoke the session; an already invalid token is only logged."""
        if not access_token:
            return
        try:
            self.identity.sign_out(access_token)
        except IdentityError as exc:
            logger.warning("Sign-out rejected", extra={"reason": exc.message})

    def resolve_bearer(self, access_token: str) -> UserRecord:
        """Return the user row a bearer token belongs to, or raise 401."""
        try:
            identity_user = self.identity.get_user(access_token)
        except IdentityError as exc:
            raise AuthenticationError("Invalid or expired token") from exc
        if not identity_user.email:
            raise AuthenticationError("Invalid or expired token")
        user = self.users.get_by_email(identity_user.email.lower())
        if user is None:
            raise AuthenticationError("User not found")
        return user

    def current_session(self, access_token: str | None) -> UserRecord | None:
        """Like `resolve_bearer`, but None instead of an error."""
        if not access_token:
            return None
        try:
            return self.resolve_bearer(access_token)
        except AuthenticationError:
            return None


def _login_error(code: str, email: str, reason: str) -> AuthenticationError:
    if code == EMAIL_NOT_CONFIRMED:
        return AuthenticationError(
            "Email not confirmed. Please check your inbox for the verification email.",
            error_code=code,
            extra={"email": email},
        )
    if code == INVALID_CREDENTIALS:
        return AuthenticationError("Incorrect email or password", error_code=code)
    if code == USER_NOT_FOUND:
        return AuthenticationError("User not found", error_code=code)
    return AuthenticationError(reason or "Authentication failed", error_code=code)


def _row_from_identity(identity_user: IdentityUser, email: str) -> dict[str, object]:
    metadata = identity_user.metadata
    user_type = metadata.get("user_type")
    return {
        "auth_id": identity_user.id,
        "email": (identity_user.email or email).lower(),
        "name": metadata.get("name") or email.split("@")[0],
        "user_type": user_type if user_type in {PHOTOGRAPHER, CLIENT} else CLIENT,
    }
