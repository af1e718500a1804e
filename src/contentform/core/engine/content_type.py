"""Reconciliation of Contentful content types.

Content types are activated after every write so the schema becomes usable
for entries. Fields dropped from a declaration are first marked omitted and
activated, then removed, which is the only removal path Contentful accepts.
"""

from __future__ import annotations

import logging

from contentform.core.contracts.client import ContentfulClient, ContentTypeClient
from contentform.core.contracts.desired import DesiredContentType, ResourceKind
from contentform.core.contracts.diagnostics import diagnostic_from_error
from contentform.core.contracts.exceptions import NotFoundError, ProviderError
from contentform.core.contracts.remote import Environment, RemoteContentType
from contentform.core.contracts.result import ApplyResult
from contentform.core.engine.base import ResourceHandlers, environment_scoped
from contentform.core.mapper import content_type as content_type_mapper

_LOG = logging.getLogger(__name__)


def _result(remote: RemoteContentType) -> ApplyResult:
    return ApplyResult(resource_id=remote.sys.id, state=content_type_mapper.from_remote_resource(remote))


async def create_content_type(
    env: Environment, desired: DesiredContentType, resource_id: str | None, client: ContentTypeClient
) -> ApplyResult:
    try:
        remote = await client.upsert(env, content_type_mapper.to_remote_payload(desired))
    except ProviderError as exc:
        return ApplyResult.failed(exc)
    _LOG.info("Created content type %s", remote.sys.id)

    try:
        remote = await client.activate(env, remote)
    except ProviderError as exc:
        result = _result(remote)
        result.diagnostics.append(diagnostic_from_error(exc))
        result.partial = True
        return result
    return _result(remote)


async def read_content_type(
    env: Environment, desired: DesiredContentType, resource_id: str | None, client: ContentTypeClient
) -> ApplyResult:
    content_type_id = resource_id or desired.content_type_id
    if not content_type_id:
        return ApplyResult()
    try:
        remote = await client.get(env, content_type_id)
    except NotFoundError:
        _LOG.info("Content type %s no longer exists", content_type_id)
        return ApplyResult()
    except ProviderError as exc:
        return ApplyResult.failed(exc, resource_id=content_type_id)
    return _result(remote)


async def _retire_fields(
    env: Environment, desired: DesiredContentType, current: RemoteContentType, client: ContentTypeClient
) -> RemoteContentType:
    to_omit = {field.id for field in content_type_mapper.retired_fields(desired, current) if not field.omitted}
    if not to_omit:
        return current
    _LOG.info("Content type %s: omitting fields %s", current.sys.id, ", ".join(sorted(to_omit)))
    current = await client.upsert(env, content_type_mapper.with_fields_omitted(current, to_omit))
    return await client.activate(env, current)


async def update_content_type(
    env: Environment, desired: DesiredContentType, resource_id: str | None, client: ContentTypeClient
) -> ApplyResult:
    content_type_id = resource_id or desired.content_type_id
    if not content_type_id:
        return await create_content_type(env, desired, None, client)
    try:
        remote = await client.get(env, content_type_id)
        remote = await _retire_fields(env, desired, remote, client)
        if content_type_mapper.has_drift(desired, remote):
            remote = await client.upsert(env, content_type_mapper.to_remote_payload(desired, remote))
            remote = await client.activate(env, remote)
            _LOG.info("Updated content type %s (version %s)", remote.sys.id, remote.sys.version)
        elif content_type_mapper.needs_activation(remote):
            remote = await client.activate(env, remote)
            _LOG.info("Activated pending changes of content type %s", remote.sys.id)
        else:
            _LOG.debug("Content type %s already matches", content_type_id)
    except ProviderError as exc:
        return ApplyResult.failed(exc, resource_id=content_type_id, partial=True)
    return _result(remote)


async def delete_content_type(
    env: Environment, desired: DesiredContentType, resource_id: str | None, client: ContentTypeClient
) -> ApplyResult:
    content_type_id = resource_id or desired.content_type_id
    if not content_type_id:
        return ApplyResult()
    try:
        remote = await client.get(env, content_type_id)
        if remote.sys.published:
            await client.deactivate(env, remote)
        await client.delete(env, content_type_id)
    except NotFoundError:
        _LOG.info("Content type %s already deleted", content_type_id)
        return ApplyResult()
    except ProviderError as exc:
        return ApplyResult.failed(exc, resource_id=content_type_id)
    _LOG.info("Deleted content type %s", content_type_id)
    return ApplyResult()


def _content_types(client: ContentfulClient) -> ContentTypeClient:
    return client.content_types


CONTENT_TYPE_HANDLERS = ResourceHandlers(
    kind=ResourceKind.CONTENT_TYPE,
    create=environment_scoped(create_content_type, _content_types),
    read=environment_scoped(read_content_type, _content_types),
    update=environment_scoped(update_content_type, _content_types),
    delete=environment_scoped(delete_content_type, _content_types),
)
