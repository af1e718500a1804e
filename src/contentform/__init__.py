"""Public API surface for contentform."""

__version__ = "0.1.0"

from contentform.core.coerce import FieldValue, coerce_content, render_scalar
from contentform.core.config import load_config, load_resources
from contentform.core.contracts import (
    ApplyResult,
    AuthenticationError,
    ConfigError,
    ConflictError,
    ContentformConfig,
    ContentformError,
    ContentTypeField,
    DesiredContentType,
    DesiredEntry,
    DesiredResource,
    DesiredWebhook,
    Diagnostic,
    EntryField,
    NotFoundError,
    PayloadValidationError,
    ProviderError,
    ResourceKind,
    ResourceLoadError,
    Severity,
    StoredContentType,
    StoredEntry,
    StoredWebhook,
    TransportError,
)
from contentform.core.engine import ReconcileContext, handlers_for
from contentform.core.providers import DryRunContentfulClient, HttpContentfulClient, create_client
from contentform.sdk import Contentform

__all__ = [
    "ApplyResult",
    "AuthenticationError",
    "ConfigError",
    "ConflictError",
    "ContentTypeField",
    "Contentform",
    "ContentformConfig",
    "ContentformError",
    "DesiredContentType",
    "DesiredEntry",
    "DesiredResource",
    "DesiredWebhook",
    "Diagnostic",
    "DryRunContentfulClient",
    "EntryField",
    "FieldValue",
    "HttpContentfulClient",
    "NotFoundError",
    "PayloadValidationError",
    "ProviderError",
    "ReconcileContext",
    "ResourceKind",
    "ResourceLoadError",
    "Severity",
    "StoredContentType",
    "StoredEntry",
    "StoredWebhook",
    "TransportError",
    "__version__",
    "coerce_content",
    "create_client",
    "handlers_for",
    "load_config",
    "load_resources",
    "render_scalar",
]
