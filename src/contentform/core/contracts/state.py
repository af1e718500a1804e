"""Attributes persisted by the host after a successful reconciliation."""

from __future__ import annotations

from pydantic import BaseModel, Field

from contentform.core.contracts.desired import ContentTypeField


class StoredEntry(BaseModel):
    space_id: str
    version: int | None
    contenttype_id: str

    model_config = {"frozen": True}


class StoredWebhook(BaseModel):
    space_id: str
    version: int | None
    name: str
    url: str
    http_basic_auth_username: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    topics: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class StoredContentType(BaseModel):
    space_id: str
    env_id: str
    version: int | None
    name: str
    description: str = ""
    display_field: str = ""
    fields: list[ContentTypeField] = Field(default_factory=list)

    model_config = {"frozen": True}


StoredState = StoredEntry | StoredWebhook | StoredContentType
