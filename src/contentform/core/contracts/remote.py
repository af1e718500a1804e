"""Server-side resource representations (Content Management API wire shape)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from contentform.core.contracts.desired import ContentTypeField


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class LinkSys(_WireModel):
    id: str
    type: str = "Link"
    link_type: str = ""


class Link(_WireModel):
    sys: LinkSys

    @classmethod
    def to(cls, link_type: str, id: str) -> Link:
        return cls(sys=LinkSys(id=id, link_type=link_type))


class Sys(_WireModel):
    """Metadata envelope carried by every remote object."""

    id: str = ""
    type: str = ""
    version: int | None = None
    space: Link | None = None
    environment: Link | None = None
    content_type: Link | None = None
    published_at: str | None = None
    archived_at: str | None = None
    published_version: int | None = None

    @property
    def published(self) -> bool:
        return bool(self.published_at)

    @property
    def archived(self) -> bool:
        return bool(self.archived_at)

    @property
    def has_pending_changes(self) -> bool:
        """Published, but the draft is ahead of the published snapshot.

        Publishing bumps the version once, so an up-to-date resource has
        ``version == published_version + 1``.
        """
        if not self.published or self.version is None or self.published_version is None:
            return False
        return self.version > self.published_version + 1

    @property
    def space_id(self) -> str:
        return self.space.sys.id if self.space is not None else ""

    @property
    def environment_id(self) -> str:
        return self.environment.sys.id if self.environment is not None else ""

    @property
    def content_type_id(self) -> str:
        return self.content_type.sys.id if self.content_type is not None else ""


class Environment(_WireModel):
    sys: Sys
    name: str = ""

    @property
    def space_id(self) -> str:
        return self.sys.space_id

    @property
    def id(self) -> str:
        return self.sys.id


class RemoteEntry(_WireModel):
    sys: Sys = Field(default_factory=Sys)
    fields: dict[str, dict[str, Any]] = Field(default_factory=dict)


class WebhookHeader(_WireModel):
    """Custom request header; the API never returns the value of a secret header."""

    key: str
    value: str | None = None
    secret: bool = False


class RemoteWebhook(_WireModel):
    sys: Sys = Field(default_factory=Sys)
    name: str
    url: str
    topics: list[str] = Field(default_factory=list)
    headers: list[WebhookHeader] = Field(default_factory=list)
    http_basic_username: str | None = None
    http_basic_password: str | None = Field(default=None, repr=False)


class RemoteContentType(_WireModel):
    sys: Sys = Field(default_factory=Sys)
    name: str
    description: str | None = None
    display_field: str | None = None
    fields: list[ContentTypeField] = Field(default_factory=list)
