"""Shared test fixtures for contentform tests."""

from __future__ import annotations

import pytest

from contentform.core.contracts.desired import (
    ContentTypeField,
    DesiredContentType,
    DesiredEntry,
    DesiredWebhook,
    EntryField,
)
from contentform.core.contracts.remote import Environment, Link, Sys
from contentform.core.engine.context import ReconcileContext
from tests.fakes.contentful import FakeContentful


@pytest.fixture
def fake() -> FakeContentful:
    return FakeContentful()


@pytest.fixture
def context(fake: FakeContentful) -> ReconcileContext:
    return ReconcileContext(client=fake)


@pytest.fixture
def env() -> Environment:
    return Environment(sys=Sys(id="master", type="Environment", space=Link.to("Space", "space-1")), name="master")


@pytest.fixture
def desired_entry() -> DesiredEntry:
    return DesiredEntry(
        entry_id="entry-1",
        space_id="space-1",
        env_id="master",
        contenttype_id="article",
        locale="en-US",
        fields=[
            EntryField(id="field1", content="hello", locale="en-US"),
            EntryField(id="field2", content="42", locale="en-US"),
        ],
        published=False,
        archived=False,
    )


@pytest.fixture
def desired_webhook() -> DesiredWebhook:
    return DesiredWebhook(
        space_id="space-1",
        name="build hook",
        url="https://ci.example.com/hooks/contentful",
        http_basic_auth_username="ci",
        http_basic_auth_password="s3cret",
        headers={"X-Trace": "on", "Authorization-Scope": "builds"},
        topics=["Entry.publish", "Entry.unpublish"],
    )


@pytest.fixture
def desired_content_type() -> DesiredContentType:
    return DesiredContentType(
        space_id="space-1",
        env_id="master",
        content_type_id="tf_test1",
        name="tf_test1",
        description="Terraform Acc Test Content Type",
        display_field="field1",
        fields=[
            ContentTypeField(id="field1", name="Field 1", type="Text", required=True),
            ContentTypeField(id="field2", name="Field 2", type="Integer"),
        ],
    )
