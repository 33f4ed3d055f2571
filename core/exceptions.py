"""Application-wide exception classes."""

from __future__ import annotations


class ApplicationError(Exception):
    """Base exception for all application errors."""
    pass


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""
    pass


class ServiceError(ApplicationError):
    """Base exception for service-level errors."""
    pass


class TemplateRenderError(ServiceError):
    """Raised when a message template cannot be rendered."""
    pass


class DrawError(ServiceError):
    """Base exception for lucky draw operations.

    ``reason`` is the short text shown to the chat user.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidDrawInputError(DrawError):
    """Raised when the draw-start text cannot be parsed."""
    pass


class DrawAuthorizationError(DrawError):
    """Raised when the sender may not start a draw here."""
    pass


class DrawAlreadyRunningError(DrawError):
    """Raised when a chat already has a draw that is not closed."""
    pass


class DrawNotStartedError(DrawError):
    """Raised when joining a chat that has no draw."""
    pass


class DrawClosedError(DrawError):
    """Raised when joining a draw that no longer accepts members."""
    pass


class PoolExhaustedError(DrawError):
    """Raised when no eligible participant is left to draw."""

    def __init__(self, reason: str = "no eligible participants left") -> None:
        super().__init__(reason)
