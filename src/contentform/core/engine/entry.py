"""Reconciliation of Contentful entries."""

from __future__ import annotations

import logging

from contentform.core.contracts.client import ContentfulClient, EntryClient
from contentform.core.contracts.desired import DesiredEntry, ResourceKind
from contentform.core.contracts.diagnostics import has_errors
from contentform.core.contracts.exceptions import NotFoundError, ProviderError
from contentform.core.contracts.remote import Environment, RemoteEntry
from contentform.core.contracts.result import ApplyResult
from contentform.core.engine.base import ResourceHandlers, environment_scoped
from contentform.core.engine.lifecycle import LifecycleFlags, synchronize
from contentform.core.mapper import entry as entry_mapper

_LOG = logging.getLogger(__name__)


async def _applied(
    env: Environment,
    remote: RemoteEntry,
    desired: DesiredEntry,
    client: EntryClient,
) -> ApplyResult:
    result = ApplyResult(resource_id=remote.sys.id, state=entry_mapper.from_remote_resource(remote))
    outcome = await synchronize(
        env, remote, LifecycleFlags(published=desired.published, archived=desired.archived), client
    )
    result.diagnostics.extend(outcome.diagnostics)
    result.partial = has_errors(outcome.diagnostics)
    return result


async def create_entry(
    env: Environment, desired: DesiredEntry, resource_id: str | None, client: EntryClient
) -> ApplyResult:
    payload = entry_mapper.to_remote_payload(desired)
    try:
        remote = await client.upsert(env, desired.contenttype_id, payload)
    except ProviderError as exc:
        return ApplyResult.failed(exc)
    _LOG.info("Created entry %s (version %s)", remote.sys.id, remote.sys.version)
    return await _applied(env, remote, desired, client)


async def read_entry(
    env: Environment, desired: DesiredEntry, resource_id: str | None, client: EntryClient
) -> ApplyResult:
    entry_id = resource_id or desired.entry_id
    try:
        remote = await client.get(env, entry_id)
    except NotFoundError:
        _LOG.info("Entry %s no longer exists", entry_id)
        return ApplyResult()
    except ProviderError as exc:
        return ApplyResult.failed(exc, resource_id=entry_id)
    return ApplyResult(resource_id=remote.sys.id, state=entry_mapper.from_remote_resource(remote))


async def update_entry(
    env: Environment, desired: DesiredEntry, resource_id: str | None, client: EntryClient
) -> ApplyResult:
    entry_id = resource_id or desired.entry_id
    try:
        remote = await client.get(env, entry_id)
        if entry_mapper.has_drift(desired, remote):
            remote = await client.upsert(env, desired.contenttype_id, entry_mapper.to_remote_payload(desired, remote))
            _LOG.info("Updated entry %s (version %s)", remote.sys.id, remote.sys.version)
        else:
            _LOG.debug("Entry %s fields already match", entry_id)
    except ProviderError as exc:
        return ApplyResult.failed(exc, resource_id=entry_id, partial=True)
    return await _applied(env, remote, desired, client)


async def delete_entry(
    env: Environment, desired: DesiredEntry, resource_id: str | None, client: EntryClient
) -> ApplyResult:
    entry_id = resource_id or desired.entry_id
    try:
        remote = await client.get(env, entry_id)
        if remote.sys.published:
            await client.unpublish(env, remote)
        await client.delete(env, entry_id)
    except NotFoundError:
        _LOG.info("Entry %s already deleted", entry_id)
        return ApplyResult()
    except ProviderError as exc:
        return ApplyResult.failed(exc, resource_id=entry_id)
    _LOG.info("Deleted entry %s", entry_id)
    return ApplyResult()


def _entries(client: ContentfulClient) -> EntryClient:
    return client.entries


ENTRY_HANDLERS = ResourceHandlers(
    kind=ResourceKind.ENTRY,
    create=environment_scoped(create_entry, _entries),
    read=environment_scoped(read_entry, _entries),
    update=environment_scoped(update_entry, _entries),
    delete=environment_scoped(delete_entry, _entries),
)
