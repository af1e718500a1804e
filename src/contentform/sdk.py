"""SDK composition root for contentform."""

from __future__ import annotations

import logging
from types import TracebackType

from contentform.core.contracts.client import ContentfulClient
from contentform.core.contracts.config import ContentformConfig
from contentform.core.contracts.desired import DesiredResource
from contentform.core.contracts.exceptions import ContentformError
from contentform.core.contracts.result import ApplyResult
from contentform.core.engine import ReconcileContext, handlers_for
from contentform.core.providers import create_client

_LOG = logging.getLogger(__name__)


class Contentform:
    """Reconciles declared Contentful resources against a space.

    Use as an async context manager; the client (and its HTTP connection
    pool) lives for the duration of the ``async with`` block::

        async with Contentform(config) as cf:
            result = await cf.apply(desired)
    """

    def __init__(self, config: ContentformConfig, *, client: ContentfulClient | None = None) -> None:
        self._config = config
        self._client = client
        self._context: ReconcileContext | None = None

    async def __aenter__(self) -> Contentform:
        if self._client is None:
            self._client = create_client(self._config)
        await self._client.__aenter__()
        self._context = ReconcileContext(client=self._client)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._context = None
        if self._client is not None:
            await self._client.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def context(self) -> ReconcileContext:
        if self._context is None:
            raise ContentformError("Contentform is not open. Use 'async with'.")
        return self._context

    async def create(self, desired: DesiredResource) -> ApplyResult:
        return await handlers_for(desired.kind).create(self.context, desired, None)

    async def read(self, desired: DesiredResource, resource_id: str | None) -> ApplyResult:
        return await handlers_for(desired.kind).read(self.context, desired, resource_id)

    async def update(self, desired: DesiredResource, resource_id: str | None) -> ApplyResult:
        return await handlers_for(desired.kind).update(self.context, desired, resource_id)

    async def delete(self, desired: DesiredResource, resource_id: str | None) -> ApplyResult:
        return await handlers_for(desired.kind).delete(self.context, desired, resource_id)

    async def apply(self, desired: DesiredResource, resource_id: str | None = None) -> ApplyResult:
        """Create the resource, or update it when it is known to exist.

        A known ``resource_id`` is read first; if the resource has vanished
        remotely it is recreated.
        """
        if resource_id is None:
            return await self.create(desired)
        current = await self.read(desired, resource_id)
        if not current.ok:
            return current
        if current.resource_id is None:
            _LOG.info("%s %s is gone remotely; recreating", desired.kind, resource_id)
            return await self.create(desired)
        return await self.update(desired, current.resource_id)
