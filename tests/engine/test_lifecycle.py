import logging

import pytest

from contentform.core.contracts.diagnostics import Severity
from contentform.core.contracts.exceptions import ConflictError, PayloadValidationError
from contentform.core.contracts.remote import Environment, RemoteEntry, Sys
from contentform.core.engine.lifecycle import LifecycleFlags, Transition, plan_transitions, synchronize
from tests.fakes.contentful import FakeContentful

UNPUBLISHED = LifecycleFlags()
PUBLISHED = LifecycleFlags(published=True)
ARCHIVED = LifecycleFlags(archived=True)
BOTH = LifecycleFlags(published=True, archived=True)


@pytest.mark.parametrize(
    ("current", "desired", "expected"),
    [
        (UNPUBLISHED, UNPUBLISHED, []),
        (UNPUBLISHED, PUBLISHED, [Transition.PUBLISH]),
        (PUBLISHED, UNPUBLISHED, [Transition.UNPUBLISH]),
        (UNPUBLISHED, ARCHIVED, [Transition.ARCHIVE]),
        (ARCHIVED, UNPUBLISHED, [Transition.UNARCHIVE]),
        (ARCHIVED, PUBLISHED, [Transition.UNARCHIVE, Transition.PUBLISH]),
        (PUBLISHED, ARCHIVED, [Transition.UNPUBLISH, Transition.ARCHIVE]),
        (PUBLISHED, BOTH, [Transition.UNPUBLISH, Transition.ARCHIVE]),
        (ARCHIVED, BOTH, []),
        (PUBLISHED, PUBLISHED, []),
    ],
)
def test_plan_transitions(current: LifecycleFlags, desired: LifecycleFlags, expected: list[Transition]) -> None:
    assert plan_transitions(current, desired) == expected


def test_flags_derive_from_sys_timestamps() -> None:
    sys = Sys(id="e", published_at="2024-01-01T00:00:00Z")

    assert LifecycleFlags.of(sys) == PUBLISHED
    assert LifecycleFlags.of(Sys(id="e", archived_at="2024-01-01T00:00:00Z")) == ARCHIVED


async def _stored_entry(fake: FakeContentful, env: Environment) -> RemoteEntry:
    entry = await fake.entries.upsert(env, "article", RemoteEntry(sys=Sys(id="entry-1"), fields={}))
    fake.reset_calls()
    return entry


@pytest.mark.asyncio
async def test_synchronize_publishes_and_returns_latest_entry(fake: FakeContentful, env: Environment) -> None:
    entry = await _stored_entry(fake, env)

    outcome = await synchronize(env, entry, PUBLISHED, fake.entries)

    assert outcome.applied == [Transition.PUBLISH]
    assert outcome.diagnostics == []
    assert outcome.entry.sys.published
    assert outcome.entry.sys.version == 2
    assert fake.call_names() == ["entries.publish"]


@pytest.mark.asyncio
async def test_synchronize_is_a_no_op_when_flags_match(fake: FakeContentful, env: Environment) -> None:
    entry = await _stored_entry(fake, env)

    outcome = await synchronize(env, entry, UNPUBLISHED, fake.entries)

    assert outcome.applied == []
    assert fake.calls == []


@pytest.mark.asyncio
async def test_synchronize_unpublishes_before_archiving(fake: FakeContentful, env: Environment) -> None:
    entry = await _stored_entry(fake, env)
    entry = await fake.entries.publish(env, entry)
    fake.reset_calls()

    outcome = await synchronize(env, entry, ARCHIVED, fake.entries)

    assert fake.call_names() == ["entries.unpublish", "entries.archive"]
    assert outcome.entry.sys.archived
    assert not outcome.entry.sys.published


@pytest.mark.asyncio
async def test_archive_wins_over_publish_with_warning(fake: FakeContentful, env: Environment) -> None:
    entry = await _stored_entry(fake, env)

    outcome = await synchronize(env, entry, BOTH, fake.entries)

    assert fake.call_names() == ["entries.archive"]
    assert [diagnostic.severity for diagnostic in outcome.diagnostics] == [Severity.WARNING]
    assert "both published and archived" in outcome.diagnostics[0].summary


@pytest.mark.asyncio
async def test_synchronize_accumulates_every_failure(fake: FakeContentful, env: Environment) -> None:
    entry = await _stored_entry(fake, env)
    entry = await fake.entries.publish(env, entry)
    fake.reset_calls()
    fake.fail("entries.unpublish", ConflictError("Entry entry-1 version mismatch"))
    fake.fail("entries.archive", PayloadValidationError("Entry entry-1 is published"))

    outcome = await synchronize(env, entry, ARCHIVED, fake.entries)

    assert fake.call_names() == ["entries.unpublish", "entries.archive"]
    assert outcome.applied == []
    assert [diagnostic.summary for diagnostic in outcome.diagnostics] == [
        "Entry entry-1 version mismatch",
        "Entry entry-1 is published",
    ]
    assert all(diagnostic.severity is Severity.ERROR for diagnostic in outcome.diagnostics)


@pytest.mark.asyncio
async def test_published_entry_with_newer_draft_is_logged(
    fake: FakeContentful, env: Environment, caplog: pytest.LogCaptureFixture
) -> None:
    entry = await _stored_entry(fake, env)
    published = await fake.entries.publish(env, entry)
    edited = await fake.entries.upsert(env, "article", published.model_copy(update={"fields": {"a": {"en-US": 1}}}))
    fake.reset_calls()
    caplog.set_level(logging.INFO, logger="contentform.core.engine.lifecycle")

    outcome = await synchronize(env, edited, PUBLISHED, fake.entries)

    assert outcome.applied == []
    assert fake.calls == []
    assert any("has unpublished changes (version 3)" in message for message in caplog.messages)


@pytest.mark.asyncio
async def test_up_to_date_published_entry_is_not_reported(
    fake: FakeContentful, env: Environment, caplog: pytest.LogCaptureFixture
) -> None:
    entry = await _stored_entry(fake, env)
    caplog.set_level(logging.INFO, logger="contentform.core.engine.lifecycle")

    await synchronize(env, entry, PUBLISHED, fake.entries)

    assert not any("unpublished changes" in message for message in caplog.messages)
