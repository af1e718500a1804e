"""Reconciliation of Contentful webhooks (space-scoped, no environment)."""

from __future__ import annotations

import logging

from contentform.core.contracts.client import ContentfulClient, WebhookClient
from contentform.core.contracts.desired import DesiredWebhook, ResourceKind
from contentform.core.contracts.exceptions import NotFoundError, ProviderError
from contentform.core.contracts.result import ApplyResult
from contentform.core.engine.base import ResourceHandlers, space_scoped
from contentform.core.mapper import webhook as webhook_mapper

_LOG = logging.getLogger(__name__)


async def create_webhook(
    space_id: str, desired: DesiredWebhook, resource_id: str | None, client: WebhookClient
) -> ApplyResult:
    try:
        remote = await client.upsert(space_id, webhook_mapper.to_remote_payload(desired))
    except ProviderError as exc:
        return ApplyResult.failed(exc)
    _LOG.info("Created webhook %s", remote.sys.id)
    return ApplyResult(resource_id=remote.sys.id, state=webhook_mapper.from_remote_resource(remote))


async def read_webhook(
    space_id: str, desired: DesiredWebhook, resource_id: str | None, client: WebhookClient
) -> ApplyResult:
    if not resource_id:
        return ApplyResult()
    try:
        remote = await client.get(space_id, resource_id)
    except NotFoundError:
        _LOG.info("Webhook %s no longer exists", resource_id)
        return ApplyResult()
    except ProviderError as exc:
        return ApplyResult.failed(exc, resource_id=resource_id)
    return ApplyResult(resource_id=remote.sys.id, state=webhook_mapper.from_remote_resource(remote))


async def update_webhook(
    space_id: str, desired: DesiredWebhook, resource_id: str | None, client: WebhookClient
) -> ApplyResult:
    if not resource_id:
        return await create_webhook(space_id, desired, None, client)
    try:
        current = await client.get(space_id, resource_id)
        remote = await client.upsert(space_id, webhook_mapper.to_remote_payload(desired, current))
    except ProviderError as exc:
        return ApplyResult.failed(exc, resource_id=resource_id, partial=True)
    _LOG.info("Updated webhook %s (version %s)", remote.sys.id, remote.sys.version)
    return ApplyResult(resource_id=remote.sys.id, state=webhook_mapper.from_remote_resource(remote))


async def delete_webhook(
    space_id: str, desired: DesiredWebhook, resource_id: str | None, client: WebhookClient
) -> ApplyResult:
    if not resource_id:
        return ApplyResult()
    try:
        remote = await client.get(space_id, resource_id)
        await client.delete(space_id, remote)
    except NotFoundError:
        _LOG.info("Webhook %s already deleted", resource_id)
        return ApplyResult()
    except ProviderError as exc:
        return ApplyResult.failed(exc, resource_id=resource_id)
    _LOG.info("Deleted webhook %s", resource_id)
    return ApplyResult()


def _webhooks(client: ContentfulClient) -> WebhookClient:
    return client.webhooks


WEBHOOK_HANDLERS = ResourceHandlers(
    kind=ResourceKind.WEBHOOK,
    create=space_scoped(create_webhook, _webhooks),
    read=space_scoped(read_webhook, _webhooks),
    update=space_scoped(update_webhook, _webhooks),
    delete=space_scoped(delete_webhook, _webhooks),
)
