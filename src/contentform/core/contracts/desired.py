"""Declared (desired-state) resource contracts."""

from __future__ import annotations

import json
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class ResourceKind(StrEnum):
    CONTENT_TYPE = "contenttype"
    ENTRY = "entry"
    WEBHOOK = "webhook"


class EntryField(BaseModel):
    id: str
    content: str
    locale: str = ""


class DesiredEntry(BaseModel):
    """Declared entry. ``locale`` is the default for fields that name none."""

    kind: Literal["entry"] = "entry"
    entry_id: str
    space_id: str
    env_id: str
    contenttype_id: str
    locale: str
    fields: list[EntryField]
    published: bool = False
    archived: bool = False

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_unique_field_locales(self) -> DesiredEntry:
        seen: set[tuple[str, str]] = set()
        for field in self.fields:
            key = (field.id, self.locale_of(field))
            if key in seen:
                raise ValueError(f"duplicate field {field.id!r} for locale {key[1]!r}")
            seen.add(key)
        return self

    def locale_of(self, field: EntryField) -> str:
        return field.locale or self.locale


class DesiredWebhook(BaseModel):
    kind: Literal["webhook"] = "webhook"
    space_id: str
    name: str
    url: str
    http_basic_auth_username: str = ""
    http_basic_auth_password: str = Field(default="", repr=False)
    headers: dict[str, str] = Field(default_factory=dict)
    topics: list[str] = Field(min_length=1)

    model_config = {"frozen": True}


def _decode_validations(value: Any) -> Any:
    if not isinstance(value, list):
        return value
    decoded: list[Any] = []
    for raw in value:
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError as exc:
                raise ValueError(f"validation is not valid JSON: {raw!r}") from exc
        decoded.append(raw)
    return decoded


class FieldItems(BaseModel):
    """Element schema of an ``Array`` field."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: str
    link_type: str | None = None
    validations: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator("validations", mode="before")
    @classmethod
    def decode_validations(cls, value: Any) -> Any:
        return _decode_validations(value)


class ContentTypeField(BaseModel):
    """Field definition, shared verbatim between declarations and the wire format."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    type: str
    link_type: str | None = None
    items: FieldItems | None = None
    required: bool = False
    localized: bool = False
    disabled: bool = False
    omitted: bool = False
    validations: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator("validations", mode="before")
    @classmethod
    def decode_validations(cls, value: Any) -> Any:
        return _decode_validations(value)


class DesiredContentType(BaseModel):
    kind: Literal["contenttype"] = "contenttype"
    space_id: str
    env_id: str
    content_type_id: str | None = None
    name: str
    description: str = ""
    display_field: str
    fields: list[ContentTypeField]

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_fields(self) -> DesiredContentType:
        ids = [field.id for field in self.fields]
        duplicates = sorted({field_id for field_id in ids if ids.count(field_id) > 1})
        if duplicates:
            raise ValueError(f"duplicate field ids: {', '.join(duplicates)}")
        if self.display_field not in ids:
            raise ValueError(f"display_field {self.display_field!r} is not a declared field")
        return self


DesiredResource = Annotated[
    DesiredEntry | DesiredWebhook | DesiredContentType,
    Field(discriminator="kind"),
]
