"""Entry mapping between declarations and the remote representation."""

from __future__ import annotations

from typing import Any

from contentform.core.coerce import FieldValue, coerce_content
from contentform.core.contracts.desired import DesiredEntry
from contentform.core.contracts.remote import RemoteEntry, Sys
from contentform.core.contracts.state import StoredEntry


def field_values(desired: DesiredEntry) -> list[FieldValue]:
    return [
        FieldValue(id=field.id, locale=desired.locale_of(field), value=coerce_content(field.content))
        for field in desired.fields
    ]


def build_fields(values: list[FieldValue]) -> dict[str, dict[str, Any]]:
    """Nest values as ``{field_id: {locale: value}}``."""
    fields: dict[str, dict[str, Any]] = {}
    for value in values:
        fields.setdefault(value.id, {})[value.locale] = value.value
    return fields


def to_remote_payload(desired: DesiredEntry, current: RemoteEntry | None = None) -> RemoteEntry:
    """Build the outbound entry.

    With ``current`` the declared fields replace the remote ones while the
    ``sys`` envelope (and its version) is kept; otherwise a fresh entry keyed
    by the declared entry id is produced.
    """
    fields = build_fields(field_values(desired))
    if current is None:
        return RemoteEntry(sys=Sys(id=desired.entry_id), fields=fields)
    return current.model_copy(update={"fields": fields})


def from_remote_resource(remote: RemoteEntry) -> StoredEntry:
    return StoredEntry(
        space_id=remote.sys.space_id,
        version=remote.sys.version,
        contenttype_id=remote.sys.content_type_id,
    )


def has_drift(desired: DesiredEntry, remote: RemoteEntry) -> bool:
    if remote.sys.content_type_id and remote.sys.content_type_id != desired.contenttype_id:
        return True
    return build_fields(field_values(desired)) != remote.fields
