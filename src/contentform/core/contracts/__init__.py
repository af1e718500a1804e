"""Core contracts-domain exports."""

from contentform.core.contracts.client import (
    ContentfulClient,
    ContentTypeClient,
    EntryClient,
    EnvironmentClient,
    WebhookClient,
)
from contentform.core.contracts.config import ContentformConfig
from contentform.core.contracts.desired import (
    ContentTypeField,
    DesiredContentType,
    DesiredEntry,
    DesiredResource,
    DesiredWebhook,
    EntryField,
    FieldItems,
    ResourceKind,
)
from contentform.core.contracts.diagnostics import Diagnostic, Severity
from contentform.core.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    ConflictError,
    ContentformError,
    NotFoundError,
    PayloadValidationError,
    ProviderError,
    ResourceLoadError,
    TransportError,
)
from contentform.core.contracts.remote import (
    Environment,
    Link,
    RemoteContentType,
    RemoteEntry,
    RemoteWebhook,
    Sys,
    WebhookHeader,
)
from contentform.core.contracts.result import ApplyResult
from contentform.core.contracts.state import StoredContentType, StoredEntry, StoredState, StoredWebhook

__all__ = [
    "ApplyResult",
    "AuthenticationError",
    "ConfigError",
    "ConflictError",
    "ContentTypeClient",
    "ContentTypeField",
    "ContentfulClient",
    "ContentformConfig",
    "ContentformError",
    "DesiredContentType",
    "DesiredEntry",
    "DesiredResource",
    "DesiredWebhook",
    "Diagnostic",
    "EntryClient",
    "EntryField",
    "Environment",
    "EnvironmentClient",
    "FieldItems",
    "Link",
    "NotFoundError",
    "PayloadValidationError",
    "ProviderError",
    "RemoteContentType",
    "RemoteEntry",
    "RemoteWebhook",
    "ResourceKind",
    "ResourceLoadError",
    "Severity",
    "StoredContentType",
    "StoredEntry",
    "StoredState",
    "StoredWebhook",
    "Sys",
    "TransportError",
    "WebhookClient",
    "WebhookHeader",
]
