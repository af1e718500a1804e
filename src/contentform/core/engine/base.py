"""Boundary adapters between host lifecycle hooks and the core operations.

Core operations take an already-resolved scope (an :class:`Environment` or a
space id) and the narrow capability client for their resource kind. The
adapters here resolve that scope once per call and translate scope lookup
failures into diagnostics.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from contentform.core.contracts.client import ContentfulClient
from contentform.core.contracts.desired import ResourceKind
from contentform.core.contracts.exceptions import ProviderError
from contentform.core.contracts.remote import Environment
from contentform.core.contracts.result import ApplyResult
from contentform.core.engine.context import ReconcileContext

_LOG = logging.getLogger(__name__)

C = TypeVar("C")

HostOperation = Callable[[ReconcileContext, Any, str | None], Awaitable[ApplyResult]]


def environment_scoped(
    operation: Callable[[Environment, Any, str | None, C], Awaitable[ApplyResult]],
    capability: Callable[[ContentfulClient], C],
) -> HostOperation:
    @functools.wraps(operation)
    async def adapted(context: ReconcileContext, desired: Any, resource_id: str | None = None) -> ApplyResult:
        try:
            env = await context.client.environments.get(desired.space_id, desired.env_id)
        except ProviderError as exc:
            _LOG.warning("Could not resolve environment %s/%s: %s", desired.space_id, desired.env_id, exc)
            return ApplyResult.failed(exc, resource_id=resource_id)
        return await operation(env, desired, resource_id, capability(context.client))

    return adapted


def space_scoped(
    operation: Callable[[str, Any, str | None, C], Awaitable[ApplyResult]],
    capability: Callable[[ContentfulClient], C],
) -> HostOperation:
    @functools.wraps(operation)
    async def adapted(context: ReconcileContext, desired: Any, resource_id: str | None = None) -> ApplyResult:
        return await operation(desired.space_id, desired, resource_id, capability(context.client))

    return adapted


@dataclass(frozen=True)
class ResourceHandlers:
    """Host-facing create/read/update/delete hooks for one resource kind."""

    kind: ResourceKind
    create: HostOperation
    read: HostOperation
    update: HostOperation
    delete: HostOperation
