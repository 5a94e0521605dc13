"""Error taxonomy shared by services and the HTTP layer."""


class MarketplaceError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        extra: dict[str, object] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.extra = extra or {}


class ValidationError(MarketplaceError):
    """Malformed or missing input."""

    status_code = 400


class AuthenticationError(MarketplaceError):
    """Missing or invalid bearer token, or failed sign-in."""

    status_code = 401


class PermissionDeniedError(MarketplaceError):
    """Authenticated, but not allowed to touch the resource."""

    status_code = 403


class NotFoundError(MarketplaceError):
    """Referenced entity does not exist."""

    status_code = 404


class ConflictError(MarketplaceError):
    """Entity already exists."""

    status_code = 409


class UpstreamError(MarketplaceError):
    """Identity provider or store failure."""

    status_code = 500


class IdentityError(UpstreamError):
    """The identity provider rejected a call."""
