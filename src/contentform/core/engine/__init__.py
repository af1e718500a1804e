"""Reconciliation driver: host-facing handlers per resource kind."""

from contentform.core.contracts.desired import ResourceKind
from contentform.core.engine.base import ResourceHandlers, environment_scoped, space_scoped
from contentform.core.engine.content_type import CONTENT_TYPE_HANDLERS
from contentform.core.engine.context import ReconcileContext
from contentform.core.engine.entry import ENTRY_HANDLERS
from contentform.core.engine.lifecycle import LifecycleFlags, Transition, plan_transitions, synchronize
from contentform.core.engine.webhook import WEBHOOK_HANDLERS

_HANDLERS = {
    ResourceKind.CONTENT_TYPE: CONTENT_TYPE_HANDLERS,
    ResourceKind.ENTRY: ENTRY_HANDLERS,
    ResourceKind.WEBHOOK: WEBHOOK_HANDLERS,
}


def handlers_for(kind: ResourceKind | str) -> ResourceHandlers:
    return _HANDLERS[ResourceKind(kind)]


__all__ = [
    "LifecycleFlags",
    "ReconcileContext",
    "ResourceHandlers",
    "Transition",
    "environment_scoped",
    "handlers_for",
    "plan_transitions",
    "space_scoped",
    "synchronize",
]
