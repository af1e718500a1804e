"""Reconciliation context shared by every operation."""

from __future__ import annotations

from dataclasses import dataclass

from contentform.core.contracts.client import ContentfulClient


@dataclass(frozen=True)
class ReconcileContext:
    """Explicit dependencies of the reconciliation core.

    Built once per process by the composition root and passed by reference
    into each operation.
    """

    client: ContentfulClient
