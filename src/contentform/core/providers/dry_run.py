"""In-memory Contentful client.

Behaves like the Content Management API where reconciliation depends on it:
versions increase on every write, stale versions conflict, missing resources
raise :class:`NotFoundError`, and published resources must be unpublished
before they can be archived or deleted. Every call is recorded in a
deterministic operation log.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import TracebackType
from typing import Any

from contentform.core.contracts.client import (
    ContentfulClient,
    ContentTypeClient,
    EntryClient,
    EnvironmentClient,
    WebhookClient,
)
from contentform.core.contracts.exceptions import ConflictError, NotFoundError, PayloadValidationError
from contentform.core.contracts.remote import (
    Environment,
    Link,
    RemoteContentType,
    RemoteEntry,
    RemoteWebhook,
    Sys,
)


@dataclass(frozen=True)
class DryRunOperation:
    """Deterministic dry-run operation log entry."""

    sequence: int
    name: str
    resource_id: str | None
    payload: dict[str, Any] = field(default_factory=dict)


def _now() -> str:
    return datetime.now(UTC).isoformat()


def _check_version(kind: str, stored: Sys, incoming: Sys) -> None:
    if incoming.version != stored.version:
        raise ConflictError(
            f"{kind} {stored.id} version mismatch",
            detail=f"expected version {stored.version}, got {incoming.version}",
        )


class _Store:
    def __init__(self) -> None:
        self.entries: dict[tuple[str, str, str], RemoteEntry] = {}
        self.content_types: dict[tuple[str, str, str], RemoteContentType] = {}
        self.webhooks: dict[tuple[str, str], RemoteWebhook] = {}
        self.operations: list[DryRunOperation] = []
        self._ids = itertools.count(1)

    def next_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._ids)}"

    def record(self, name: str, resource_id: str | None, payload: dict[str, Any] | None = None) -> None:
        self.operations.append(
            DryRunOperation(
                sequence=len(self.operations) + 1,
                name=name,
                resource_id=resource_id,
                payload=payload or {},
            )
        )


class DryRunEnvironmentClient(EnvironmentClient):
    def __init__(self, store: _Store) -> None:
        self._store = store

    async def get(self, space_id: str, env_id: str) -> Environment:
        self._store.record("environments.get", env_id, {"space_id": space_id})
        return Environment(
            sys=Sys(id=env_id, type="Environment", space=Link.to("Space", space_id)),
            name=env_id,
        )


class DryRunEntryClient(EntryClient):
    def __init__(self, store: _Store) -> None:
        self._store = store

    def _require(self, env: Environment, entry_id: str) -> RemoteEntry:
        entry = self._store.entries.get((env.space_id, env.id, entry_id))
        if entry is None:
            raise NotFoundError(f"Entry not found: {entry_id}")
        return entry

    def _save(self, env: Environment, entry: RemoteEntry) -> RemoteEntry:
        self._store.entries[(env.space_id, env.id, entry.sys.id)] = entry
        return entry.model_copy(deep=True)

    async def get(self, env: Environment, entry_id: str) -> RemoteEntry:
        self._store.record("entries.get", entry_id)
        return self._require(env, entry_id).model_copy(deep=True)

    async def upsert(self, env: Environment, content_type_id: str, entry: RemoteEntry) -> RemoteEntry:
        entry_id = entry.sys.id or self._store.next_id("entry")
        self._store.record("entries.upsert", entry_id, {"content_type_id": content_type_id, "fields": entry.fields})
        stored = self._store.entries.get((env.space_id, env.id, entry_id))
        if stored is None:
            if entry.sys.version is not None:
                raise NotFoundError(f"Entry not found: {entry_id}")
            sys = Sys(
                id=entry_id,
                type="Entry",
                version=1,
                space=Link.to("Space", env.space_id),
                environment=Link.to("Environment", env.id),
                content_type=Link.to("ContentType", content_type_id),
            )
        else:
            _check_version("Entry", stored.sys, entry.sys)
            sys = stored.sys.model_copy(update={"version": (stored.sys.version or 0) + 1})
        return self._save(env, RemoteEntry(sys=sys, fields=entry.fields))

    async def delete(self, env: Environment, entry_id: str) -> None:
        self._store.record("entries.delete", entry_id)
        stored = self._require(env, entry_id)
        if stored.sys.published:
            raise PayloadValidationError(f"Entry {entry_id} is published; unpublish it before deleting")
        del self._store.entries[(env.space_id, env.id, entry_id)]

    async def _transition(self, name: str, env: Environment, entry: RemoteEntry, **sys_update: Any) -> RemoteEntry:
        self._store.record(f"entries.{name}", entry.sys.id)
        stored = self._require(env, entry.sys.id)
        _check_version("Entry", stored.sys, entry.sys)
        sys_update["version"] = (stored.sys.version or 0) + 1
        return self._save(env, stored.model_copy(update={"sys": stored.sys.model_copy(update=sys_update)}))

    async def publish(self, env: Environment, entry: RemoteEntry) -> RemoteEntry:
        stored = self._require(env, entry.sys.id)
        if stored.sys.archived:
            raise PayloadValidationError(f"Entry {entry.sys.id} is archived; unarchive it before publishing")
        return await self._transition(
            "publish", env, entry, published_at=_now(), published_version=stored.sys.version
        )

    async def unpublish(self, env: Environment, entry: RemoteEntry) -> RemoteEntry:
        return await self._transition("unpublish", env, entry, published_at=None, published_version=None)

    async def archive(self, env: Environment, entry: RemoteEntry) -> RemoteEntry:
        stored = self._require(env, entry.sys.id)
        if stored.sys.published:
            raise PayloadValidationError(f"Entry {entry.sys.id} is published; unpublish it before archiving")
        return await self._transition("archive", env, entry, archived_at=_now())

    async def unarchive(self, env: Environment, entry: RemoteEntry) -> RemoteEntry:
        return await self._transition("unarchive", env, entry, archived_at=None)


class DryRunContentTypeClient(ContentTypeClient):
    def __init__(self, store: _Store) -> None:
        self._store = store

    def _require(self, env: Environment, content_type_id: str) -> RemoteContentType:
        content_type = self._store.content_types.get((env.space_id, env.id, content_type_id))
        if content_type is None:
            raise NotFoundError(f"Content type not found: {content_type_id}")
        return content_type

    def _save(self, env: Environment, content_type: RemoteContentType) -> RemoteContentType:
        self._store.content_types[(env.space_id, env.id, content_type.sys.id)] = content_type
        return content_type.model_copy(deep=True)

    async def get(self, env: Environment, content_type_id: str) -> RemoteContentType:
        self._store.record("content_types.get", content_type_id)
        return self._require(env, content_type_id).model_copy(deep=True)

    async def upsert(self, env: Environment, content_type: RemoteContentType) -> RemoteContentType:
        content_type_id = content_type.sys.id or self._store.next_id("content-type")
        self._store.record(
            "content_types.upsert", content_type_id, {"fields": [field.id for field in content_type.fields]}
        )
        stored = self._store.content_types.get((env.space_id, env.id, content_type_id))
        if stored is None:
            if content_type.sys.version is not None:
                raise NotFoundError(f"Content type not found: {content_type_id}")
            sys = Sys(
                id=content_type_id,
                type="ContentType",
                version=1,
                space=Link.to("Space", env.space_id),
                environment=Link.to("Environment", env.id),
            )
        else:
            _check_version("Content type", stored.sys, content_type.sys)
            removed = {field.id for field in stored.fields} - {field.id for field in content_type.fields}
            not_omitted = sorted(field.id for field in stored.fields if field.id in removed and not field.omitted)
            if not_omitted:
                raise PayloadValidationError(
                    f"Content type {content_type_id}: fields must be omitted before removal: {', '.join(not_omitted)}"
                )
            sys = stored.sys.model_copy(update={"version": (stored.sys.version or 0) + 1})
        return self._save(env, content_type.model_copy(update={"sys": sys}, deep=True))

    async def delete(self, env: Environment, content_type_id: str) -> None:
        self._store.record("content_types.delete", content_type_id)
        stored = self._require(env, content_type_id)
        if stored.sys.published:
            raise PayloadValidationError(f"Content type {content_type_id} is active; deactivate it before deleting")
        del self._store.content_types[(env.space_id, env.id, content_type_id)]

    async def _transition(
        self, name: str, env: Environment, content_type: RemoteContentType, **sys_update: Any
    ) -> RemoteContentType:
        self._store.record(f"content_types.{name}", content_type.sys.id)
        stored = self._require(env, content_type.sys.id)
        _check_version("Content type", stored.sys, content_type.sys)
        sys_update["version"] = (stored.sys.version or 0) + 1
        return self._save(env, stored.model_copy(update={"sys": stored.sys.model_copy(update=sys_update)}))

    async def activate(self, env: Environment, content_type: RemoteContentType) -> RemoteContentType:
        return await self._transition(
            "activate", env, content_type, published_at=_now(), published_version=content_type.sys.version
        )

    async def deactivate(self, env: Environment, content_type: RemoteContentType) -> RemoteContentType:
        return await self._transition("deactivate", env, content_type, published_at=None, published_version=None)


class DryRunWebhookClient(WebhookClient):
    def __init__(self, store: _Store) -> None:
        self._store = store

    def _require(self, space_id: str, webhook_id: str) -> RemoteWebhook:
        webhook = self._store.webhooks.get((space_id, webhook_id))
        if webhook is None:
            raise NotFoundError(f"Webhook not found: {webhook_id}")
        return webhook

    @staticmethod
    def _public(webhook: RemoteWebhook) -> RemoteWebhook:
        return webhook.model_copy(update={"http_basic_password": None}, deep=True)

    async def get(self, space_id: str, webhook_id: str) -> RemoteWebhook:
        self._store.record("webhooks.get", webhook_id)
        return self._public(self._require(space_id, webhook_id))

    async def upsert(self, space_id: str, webhook: RemoteWebhook) -> RemoteWebhook:
        webhook_id = webhook.sys.id or self._store.next_id("webhook")
        self._store.record("webhooks.upsert", webhook_id, {"name": webhook.name, "url": webhook.url})
        if not webhook.sys.id:
            sys = Sys(id=webhook_id, type="WebhookDefinition", version=1, space=Link.to("Space", space_id))
        else:
            stored = self._require(space_id, webhook_id)
            _check_version("Webhook", stored.sys, webhook.sys)
            sys = stored.sys.model_copy(update={"version": (stored.sys.version or 0) + 1})
        saved = webhook.model_copy(update={"sys": sys}, deep=True)
        self._store.webhooks[(space_id, webhook_id)] = saved
        return self._public(saved)

    async def delete(self, space_id: str, webhook: RemoteWebhook) -> None:
        self._store.record("webhooks.delete", webhook.sys.id)
        self._require(space_id, webhook.sys.id)
        del self._store.webhooks[(space_id, webhook.sys.id)]


class DryRunContentfulClient(ContentfulClient):
    """Client that keeps every resource in memory and never touches the network."""

    def __init__(self) -> None:
        self._store = _Store()
        self.environments = DryRunEnvironmentClient(self._store)
        self.entries = DryRunEntryClient(self._store)
        self.content_types = DryRunContentTypeClient(self._store)
        self.webhooks = DryRunWebhookClient(self._store)

    @property
    def operations(self) -> tuple[DryRunOperation, ...]:
        return tuple(self._store.operations)

    def operation_names(self) -> list[str]:
        return [operation.name for operation in self._store.operations]

    async def __aenter__(self) -> DryRunContentfulClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        return None
