"""Publish/archive state synchronization for entries.

An entry sits on two independent axes, {unpublished, published} and
{unarchived, archived}, both derived from ``sys`` timestamps. Each pass
compares the current flags with the declared ones and issues only the
transitions needed, in an order Contentful accepts: an archived entry must be
unarchived before it can be published, and a published entry must be
unpublished before it can be archived. When both flags are declared true,
archived wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from contentform.core.contracts.client import EntryClient
from contentform.core.contracts.diagnostics import Diagnostic, diagnostic_from_error, warning
from contentform.core.contracts.exceptions import ProviderError
from contentform.core.contracts.remote import Environment, RemoteEntry, Sys

_LOG = logging.getLogger(__name__)


class Transition(StrEnum):
    UNARCHIVE = "unarchive"
    PUBLISH = "publish"
    UNPUBLISH = "unpublish"
    ARCHIVE = "archive"


@dataclass(frozen=True)
class LifecycleFlags:
    published: bool = False
    archived: bool = False

    @classmethod
    def of(cls, sys: Sys) -> LifecycleFlags:
        return cls(published=sys.published, archived=sys.archived)


@dataclass
class SyncOutcome:
    entry: RemoteEntry
    applied: list[Transition] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


def plan_transitions(current: LifecycleFlags, desired: LifecycleFlags) -> list[Transition]:
    publish = desired.published and not desired.archived
    transitions: list[Transition] = []
    if current.archived and not desired.archived:
        transitions.append(Transition.UNARCHIVE)
    if publish and not current.published:
        transitions.append(Transition.PUBLISH)
    elif not publish and current.published:
        transitions.append(Transition.UNPUBLISH)
    if desired.archived and not current.archived:
        transitions.append(Transition.ARCHIVE)
    return transitions


async def synchronize(
    env: Environment,
    entry: RemoteEntry,
    desired: LifecycleFlags,
    client: EntryClient,
) -> SyncOutcome:
    """Drive ``entry`` toward ``desired``.

    Every planned transition is attempted; failures are collected in order
    rather than stopping the pass, so a failed publish and a failed archive
    are both reported.
    """
    outcome = SyncOutcome(entry=entry)
    if desired.published and desired.archived:
        outcome.diagnostics.append(
            warning(
                f"Entry {entry.sys.id} is declared both published and archived",
                "Archived entries cannot be published; the entry is archived and left unpublished.",
            )
        )

    for transition in plan_transitions(LifecycleFlags.of(entry.sys), desired):
        call = getattr(client, transition.value)
        try:
            outcome.entry = await call(env, outcome.entry)
        except ProviderError as exc:
            _LOG.warning("Entry %s: %s failed: %s", entry.sys.id, transition.value, exc)
            outcome.diagnostics.append(diagnostic_from_error(exc))
            continue
        _LOG.info("Entry %s: %s", entry.sys.id, transition.value)
        outcome.applied.append(transition)

    if outcome.entry.sys.has_pending_changes:
        _LOG.info(
            "Entry %s is published at version %s but has unpublished changes (version %s)",
            entry.sys.id,
            outcome.entry.sys.published_version,
            outcome.entry.sys.version,
        )
    return outcome
