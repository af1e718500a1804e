"""Factory for Contentful client instances."""

from __future__ import annotations

import httpx

from contentform.core.config.loader import resolve_token
from contentform.core.contracts.client import ContentfulClient
from contentform.core.contracts.config import ContentformConfig
from contentform.core.providers.contentful.client import HttpContentfulClient
from contentform.core.providers.dry_run import DryRunContentfulClient


def create_client(
    config: ContentformConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ContentfulClient:
    """Create the client selected by ``config``.

    The returned client is an async context manager::

        async with create_client(config) as client:
            env = await client.environments.get("space", "master")
    """
    if config.dry_run:
        return DryRunContentfulClient()
    return HttpContentfulClient(
        token=resolve_token(config),
        base_url=config.base_url,
        timeout=config.timeout,
        transport=transport,
    )
