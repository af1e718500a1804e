"""Exception hierarchy for contentform."""

from __future__ import annotations


class ContentformError(Exception):
    """Base exception for all contentform errors."""


class ConfigError(ContentformError):
    """Configuration loading or validation failure."""


class ResourceLoadError(ContentformError):
    """Declared resource document loading/parsing failure."""


class ProviderError(ContentformError):
    """Base Contentful API operation failure."""

    def __init__(self, message: str, *, detail: str = "") -> None:
        super().__init__(message)
        self.detail = detail


class NotFoundError(ProviderError):
    """Resource is absent remotely."""


class ConflictError(ProviderError):
    """Version mismatch on upsert; the remote changed since it was fetched."""


class PayloadValidationError(ProviderError):
    """Server rejected the payload as malformed or invalid."""


class TransportError(ProviderError):
    """Network-level or server-side failure reported by the API client."""


class AuthenticationError(TransportError):
    """Authentication/authorization failure."""
