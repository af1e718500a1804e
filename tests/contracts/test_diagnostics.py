from contentform.core.contracts.diagnostics import (
    Diagnostic,
    Severity,
    diagnostic_from_error,
    has_errors,
    warning,
)
from contentform.core.contracts.exceptions import PayloadValidationError
from contentform.core.contracts.result import ApplyResult


def test_diagnostic_from_error_carries_message_and_detail() -> None:
    diagnostic = diagnostic_from_error(PayloadValidationError("bad field", detail='{"errors": []}'))

    assert diagnostic == Diagnostic(severity=Severity.ERROR, summary="bad field", detail='{"errors": []}')


def test_has_errors_ignores_warnings() -> None:
    assert has_errors([]) is False
    assert has_errors([warning("heads up")]) is False
    assert has_errors([warning("heads up"), diagnostic_from_error(PayloadValidationError("x"))]) is True


def test_apply_result_failed_has_exactly_one_error() -> None:
    result = ApplyResult.failed(PayloadValidationError("rejected"), resource_id="e1", partial=True)

    assert result.resource_id == "e1"
    assert result.partial is True
    assert result.ok is False
    assert [d.summary for d in result.diagnostics] == ["rejected"]


def test_apply_result_defaults_to_absent_and_ok() -> None:
    result = ApplyResult()

    assert result.resource_id is None
    assert result.state is None
    assert result.diagnostics == []
    assert result.ok is True
