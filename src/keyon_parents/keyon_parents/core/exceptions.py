class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class FetchFailure(DomainError):
    """Raised when an upstream read (network, auth, query) fails.

    Metrics computed from a failed read are unavailable, never zero-filled.
    """


class StorageError(DomainError):
    """Raised when a write (notification, push registration) fails."""
