"""Capability interfaces the reconciliation core needs from a Contentful client.

Lifecycle calls return the updated remote object: each transition bumps the
server version, so callers chain the returned object into the next call.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from contentform.core.contracts.remote import Environment, RemoteContentType, RemoteEntry, RemoteWebhook


class EnvironmentClient(ABC):
    @abstractmethod
    async def get(self, space_id: str, env_id: str) -> Environment: ...  # pragma: no cover


class EntryClient(ABC):
    @abstractmethod
    async def get(self, env: Environment, entry_id: str) -> RemoteEntry: ...  # pragma: no cover

    @abstractmethod
    async def upsert(self, env: Environment, content_type_id: str, entry: RemoteEntry) -> RemoteEntry:
        """Create ``entry`` (no ``sys.version``) or update it at ``sys.version``."""

    @abstractmethod
    async def delete(self, env: Environment, entry_id: str) -> None: ...  # pragma: no cover

    @abstractmethod
    async def publish(self, env: Environment, entry: RemoteEntry) -> RemoteEntry: ...  # pragma: no cover

    @abstractmethod
    async def unpublish(self, env: Environment, entry: RemoteEntry) -> RemoteEntry: ...  # pragma: no cover

    @abstractmethod
    async def archive(self, env: Environment, entry: RemoteEntry) -> RemoteEntry: ...  # pragma: no cover

    @abstractmethod
    async def unarchive(self, env: Environment, entry: RemoteEntry) -> RemoteEntry: ...  # pragma: no cover


class ContentTypeClient(ABC):
    @abstractmethod
    async def get(self, env: Environment, content_type_id: str) -> RemoteContentType: ...  # pragma: no cover

    @abstractmethod
    async def upsert(self, env: Environment, content_type: RemoteContentType) -> RemoteContentType:
        """Create ``content_type`` (no ``sys.version``) or update it at ``sys.version``."""

    @abstractmethod
    async def delete(self, env: Environment, content_type_id: str) -> None: ...  # pragma: no cover

    @abstractmethod
    async def activate(
        self, env: Environment, content_type: RemoteContentType
    ) -> RemoteContentType: ...  # pragma: no cover

    @abstractmethod
    async def deactivate(
        self, env: Environment, content_type: RemoteContentType
    ) -> RemoteContentType: ...  # pragma: no cover


class WebhookClient(ABC):
    @abstractmethod
    async def get(self, space_id: str, webhook_id: str) -> RemoteWebhook: ...  # pragma: no cover

    @abstractmethod
    async def upsert(self, space_id: str, webhook: RemoteWebhook) -> RemoteWebhook:
        """Create ``webhook`` (no ``sys.id``) or update it at ``sys.version``."""

    @abstractmethod
    async def delete(self, space_id: str, webhook: RemoteWebhook) -> None: ...  # pragma: no cover


class ContentfulClient(ABC):
    """Aggregate of the per-kind capabilities, owning the underlying transport."""

    environments: EnvironmentClient
    entries: EntryClient
    content_types: ContentTypeClient
    webhooks: WebhookClient

    @abstractmethod
    async def __aenter__(self) -> ContentfulClient: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover
