"""Content type mapping between declarations and the remote representation.

Field definitions, validations included, are passed through as declared;
this layer never merges or interprets validation rules.
"""

from __future__ import annotations

from contentform.core.contracts.desired import ContentTypeField, DesiredContentType
from contentform.core.contracts.remote import RemoteContentType, Sys
from contentform.core.contracts.state import StoredContentType


def to_remote_payload(desired: DesiredContentType, current: RemoteContentType | None = None) -> RemoteContentType:
    if current is not None:
        sys = current.sys
    else:
        sys = Sys(id=desired.content_type_id or "")
    return RemoteContentType(
        sys=sys,
        name=desired.name,
        description=desired.description,
        display_field=desired.display_field,
        fields=[field.model_copy(deep=True) for field in desired.fields],
    )


def from_remote_resource(remote: RemoteContentType) -> StoredContentType:
    return StoredContentType(
        space_id=remote.sys.space_id,
        env_id=remote.sys.environment_id,
        version=remote.sys.version,
        name=remote.name,
        description=remote.description or "",
        display_field=remote.display_field or "",
        fields=[field.model_copy(deep=True) for field in remote.fields],
    )


def retired_fields(desired: DesiredContentType, current: RemoteContentType) -> list[ContentTypeField]:
    """Fields present remotely but no longer declared."""
    declared = {field.id for field in desired.fields}
    return [field for field in current.fields if field.id not in declared]


def with_fields_omitted(current: RemoteContentType, field_ids: set[str]) -> RemoteContentType:
    """Mark ``field_ids`` as omitted, the step Contentful requires before removal."""
    fields = [
        field.model_copy(update={"omitted": True}) if field.id in field_ids else field for field in current.fields
    ]
    return current.model_copy(update={"fields": fields})


def has_drift(desired: DesiredContentType, remote: RemoteContentType) -> bool:
    payload = to_remote_payload(desired, remote)
    return (
        payload.name != remote.name
        or payload.description != (remote.description or "")
        or payload.display_field != remote.display_field
        or payload.fields != remote.fields
    )


def needs_activation(remote: RemoteContentType) -> bool:
    """Inactive, or carrying a saved schema that was never activated."""
    return not remote.sys.published or remote.sys.has_pending_changes
