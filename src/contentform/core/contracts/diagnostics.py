"""Diagnostics returned to the host in place of raised provider errors."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel

from contentform.core.contracts.exceptions import ProviderError


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


class Diagnostic(BaseModel):
    severity: Severity
    summary: str
    detail: str = ""

    model_config = {"frozen": True}


def diagnostic_from_error(exc: ProviderError) -> Diagnostic:
    """Translate a provider failure into exactly one error diagnostic."""
    return Diagnostic(severity=Severity.ERROR, summary=str(exc), detail=exc.detail)


def warning(summary: str, detail: str = "") -> Diagnostic:
    return Diagnostic(severity=Severity.WARNING, summary=summary, detail=detail)


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(diagnostic.severity is Severity.ERROR for diagnostic in diagnostics)
