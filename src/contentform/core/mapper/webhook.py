"""Webhook mapping between declarations and the remote representation."""

from __future__ import annotations

from contentform.core.contracts.desired import DesiredWebhook
from contentform.core.contracts.remote import RemoteWebhook, Sys, WebhookHeader
from contentform.core.contracts.state import StoredWebhook


def build_headers(headers: dict[str, str]) -> list[WebhookHeader]:
    # Sorted so repeated applies produce identical payloads.
    return [WebhookHeader(key=key, value=headers[key]) for key in sorted(headers)]


def to_remote_payload(desired: DesiredWebhook, current: RemoteWebhook | None = None) -> RemoteWebhook:
    return RemoteWebhook(
        sys=current.sys if current is not None else Sys(),
        name=desired.name,
        url=desired.url,
        topics=list(desired.topics),
        headers=build_headers(desired.headers),
        http_basic_username=desired.http_basic_auth_username,
        http_basic_password=desired.http_basic_auth_password,
    )


def from_remote_resource(remote: RemoteWebhook) -> StoredWebhook:
    # The password is write-only and is never read back.
    return StoredWebhook(
        space_id=remote.sys.space_id,
        version=remote.sys.version,
        name=remote.name,
        url=remote.url,
        http_basic_auth_username=remote.http_basic_username or "",
        headers={header.key: header.value or "" for header in remote.headers},
        topics=list(remote.topics),
    )
