"""
Domain exceptions shared across the service.

ValidationError is the only failure that reaches callers as a 4xx: provider
problems are absorbed by the dispatcher.
"""


class CallAgentError(Exception):
    """Base exception for call agent errors."""


class ValidationError(CallAgentError):
    """Malformed or missing call event field."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
