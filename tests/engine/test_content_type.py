import pytest

from contentform.core.contracts.desired import ContentTypeField, DesiredContentType
from contentform.core.contracts.diagnostics import Severity
from contentform.core.contracts.exceptions import PayloadValidationError
from contentform.core.engine import ReconcileContext
from contentform.core.engine.content_type import CONTENT_TYPE_HANDLERS
from tests.fakes.contentful import FakeContentful


@pytest.mark.asyncio
async def test_create_upserts_then_activates(
    fake: FakeContentful, context: ReconcileContext, desired_content_type: DesiredContentType
) -> None:
    result = await CONTENT_TYPE_HANDLERS.create(context, desired_content_type, None)

    assert result.ok
    assert result.resource_id == "tf_test1"
    assert fake.call_names() == ["environments.get", "content_types.upsert", "content_types.activate"]
    assert result.state is not None
    assert result.state.version == 2
    assert [field.id for field in result.state.fields] == ["field1", "field2"]


@pytest.mark.asyncio
async def test_create_without_id_uses_assigned_id(
    context: ReconcileContext, desired_content_type: DesiredContentType
) -> None:
    desired = desired_content_type.model_copy(update={"content_type_id": None})

    result = await CONTENT_TYPE_HANDLERS.create(context, desired, None)

    assert result.resource_id == "content-type-1"


@pytest.mark.asyncio
async def test_activate_failure_keeps_created_id(
    fake: FakeContentful, context: ReconcileContext, desired_content_type: DesiredContentType
) -> None:
    fake.fail("content_types.activate", PayloadValidationError("invalid display field"))

    result = await CONTENT_TYPE_HANDLERS.create(context, desired_content_type, None)

    assert result.resource_id == "tf_test1"
    assert result.partial
    assert [diagnostic.severity for diagnostic in result.diagnostics] == [Severity.ERROR]


@pytest.mark.asyncio
async def test_update_without_changes_makes_no_writes(
    fake: FakeContentful, context: ReconcileContext, desired_content_type: DesiredContentType
) -> None:
    await CONTENT_TYPE_HANDLERS.create(context, desired_content_type, None)
    fake.reset_calls()

    result = await CONTENT_TYPE_HANDLERS.update(context, desired_content_type, "tf_test1")

    assert result.ok
    assert fake.call_names() == ["environments.get", "content_types.get"]


@pytest.mark.asyncio
async def test_update_adds_field_and_reactivates(
    fake: FakeContentful, context: ReconcileContext, desired_content_type: DesiredContentType
) -> None:
    await CONTENT_TYPE_HANDLERS.create(context, desired_content_type, None)
    fake.reset_calls()
    extended = desired_content_type.model_copy(
        update={"fields": [*desired_content_type.fields, ContentTypeField(id="field3", name="Field 3", type="Symbol")]}
    )

    result = await CONTENT_TYPE_HANDLERS.update(context, extended, "tf_test1")

    assert result.ok
    assert fake.call_names() == [
        "environments.get",
        "content_types.get",
        "content_types.upsert",
        "content_types.activate",
    ]
    assert result.state is not None
    assert [field.id for field in result.state.fields] == ["field1", "field2", "field3"]


@pytest.mark.asyncio
async def test_update_omits_fields_before_removing_them(
    fake: FakeContentful, context: ReconcileContext, desired_content_type: DesiredContentType
) -> None:
    await CONTENT_TYPE_HANDLERS.create(context, desired_content_type, None)
    fake.reset_calls()
    reduced = desired_content_type.model_copy(update={"fields": [desired_content_type.fields[0]]})

    result = await CONTENT_TYPE_HANDLERS.update(context, reduced, "tf_test1")

    assert result.ok
    assert fake.call_names() == [
        "environments.get",
        "content_types.get",
        "content_types.upsert",
        "content_types.activate",
        "content_types.upsert",
        "content_types.activate",
    ]
    omitting, removing = fake.calls_to("content_types.upsert")
    assert [(field.id, field.omitted) for field in omitting[1].fields] == [("field1", False), ("field2", True)]
    assert [field.id for field in removing[1].fields] == ["field1"]
    assert result.state is not None
    assert [field.id for field in result.state.fields] == ["field1"]


@pytest.mark.asyncio
async def test_delete_deactivates_first(
    fake: FakeContentful, context: ReconcileContext, desired_content_type: DesiredContentType
) -> None:
    await CONTENT_TYPE_HANDLERS.create(context, desired_content_type, None)
    fake.reset_calls()

    result = await CONTENT_TYPE_HANDLERS.delete(context, desired_content_type, "tf_test1")
    after = await CONTENT_TYPE_HANDLERS.read(context, desired_content_type, "tf_test1")

    assert result.ok
    assert result.resource_id is None
    assert fake.call_names()[:4] == [
        "environments.get",
        "content_types.get",
        "content_types.deactivate",
        "content_types.delete",
    ]
    assert after.resource_id is None


@pytest.mark.asyncio
async def test_delete_absent_content_type_succeeds(
    fake: FakeContentful, context: ReconcileContext, desired_content_type: DesiredContentType
) -> None:
    result = await CONTENT_TYPE_HANDLERS.delete(context, desired_content_type, "tf_test1")

    assert result.ok
    assert fake.count("content_types.delete") == 0


@pytest.mark.asyncio
async def test_failed_activation_is_retried_on_next_update(
    fake: FakeContentful, context: ReconcileContext, desired_content_type: DesiredContentType
) -> None:
    await CONTENT_TYPE_HANDLERS.create(context, desired_content_type, None)
    extended = desired_content_type.model_copy(
        update={"fields": [*desired_content_type.fields, ContentTypeField(id="field3", name="Field 3", type="Symbol")]}
    )
    fake.fail("content_types.activate", PayloadValidationError("activation rejected"))

    first = await CONTENT_TYPE_HANDLERS.update(context, extended, "tf_test1")
    fake.reset_calls()
    second = await CONTENT_TYPE_HANDLERS.update(context, extended, "tf_test1")

    assert first.partial
    assert not first.ok
    assert second.ok
    assert fake.call_names() == ["environments.get", "content_types.get", "content_types.activate"]
    remote = await fake.content_types.get(await fake.environments.get("space-1", "master"), "tf_test1")
    assert not remote.sys.has_pending_changes
