from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when required settings are missing or malformed."""


class ValidationError(ValueError):
    """Raised when a user-supplied run-date specifier cannot be parsed."""


class UpstreamError(RuntimeError):
    """Non-success response from Toggl or the Discord webhook."""

    def __init__(self, service: str, status: int, body: str) -> None:
        super().__init__(f"{service} request failed {status}: {body}")
        self.service = service
        self.status = status
        self.body = body
