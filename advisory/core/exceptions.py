"""Custom exceptions for the advisory application."""


class AdvisoryException(Exception):
    """Base exception for the advisory application."""

    pass


class ValidationError(AdvisoryException):
    """Raised when validation fails."""

    pass


class NotFoundError(AdvisoryException):
    """Raised when a resource is not found."""

    pass


class DatabaseError(AdvisoryException):
    """Raised when a database operation fails."""

    pass


class ConfigurationError(AdvisoryException):
    """Raised when configuration is invalid."""

    pass


class AuthenticationError(AdvisoryException):
    """Raised when authentication fails."""

    pass


class AuthorizationError(AdvisoryException):
    """Raised when an authenticated caller lacks access."""

    pass
