"""Outcome of one reconciliation operation, as reported to the host."""

from __future__ import annotations

from pydantic import BaseModel, Field

from contentform.core.contracts.diagnostics import Diagnostic, diagnostic_from_error, has_errors
from contentform.core.contracts.exceptions import ProviderError
from contentform.core.contracts.state import StoredState


class ApplyResult(BaseModel):
    """Applied state plus diagnostics.

    ``resource_id`` is ``None`` when the resource is absent (read found
    nothing, or delete succeeded). ``partial`` tells the host that some remote
    calls succeeded before a later one failed.
    """

    resource_id: str | None = None
    state: StoredState | None = None
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    partial: bool = False

    @property
    def ok(self) -> bool:
        return not has_errors(self.diagnostics)

    @classmethod
    def failed(cls, exc: ProviderError, *, resource_id: str | None = None, partial: bool = False) -> ApplyResult:
        return cls(resource_id=resource_id, diagnostics=[diagnostic_from_error(exc)], partial=partial)
