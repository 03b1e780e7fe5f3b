"""Unit tests for the calculator form state machine"""

import pytest
from emi_calculator.domain.form_state import (
    CalculateRequested,
    FieldEdited,
    edits_for,
    initial_state,
    transition,
)
from emi_calculator.domain.exceptions import UnknownFieldError
from emi_calculator.domain.models import FormFields, FormState, FormStatus
from emi_calculator.domain.validation import INVALID_INPUT_MESSAGE, OUT_OF_RANGE_MESSAGE


def test_initial_state_is_idle():
    state = initial_state()

    assert state.status is FormStatus.IDLE
    assert state.fields == FormFields()
    assert state.result is None
    assert state.error is None


def test_edit_moves_to_editing():
    """Editing a field stores the text and enters editing"""
    state = transition(initial_state(), FieldEdited("principal", "5000"))

    assert state.status is FormStatus.EDITING
    assert state.fields.principal == "5000"
    assert state.fields.annual_rate == ""


def test_transition_does_not_mutate_previous_state():
    before = initial_state()
    after = transition(before, FieldEdited("tenure", "24"))

    assert before.fields.tenure == ""
    assert after is not before


def test_calculate_success(filled_state: FormState):
    """Valid fields produce a result and no error"""
    state = transition(filled_state, CalculateRequested())

    assert state.status is FormStatus.SUCCESS
    assert state.error is None
    assert state.result.installment == pytest.approx(8884.88, abs=0.01)
    assert state.fields == filled_state.fields


def test_calculate_error_clears_result(filled_state: FormState):
    """Invalid fields show the message and drop any previous result"""
    succeeded = transition(filled_state, CalculateRequested())
    edited = FormState(
        fields=FormFields(principal="0", annual_rate="12", tenure="12"),
        status=FormStatus.SUCCESS,
        result=succeeded.result,
    )

    state = transition(edited, CalculateRequested())

    assert state.status is FormStatus.ERROR
    assert state.error == INVALID_INPUT_MESSAGE
    assert state.result is None


def test_edit_after_success_clears_result(filled_state: FormState):
    succeeded = transition(filled_state, CalculateRequested())

    state = transition(succeeded, FieldEdited("annual_rate", "10"))

    assert state.status is FormStatus.EDITING
    assert state.result is None
    assert state.fields.annual_rate == "10"
    assert state.fields.principal == "100000"


def test_edit_after_error_clears_error():
    failed = transition(initial_state(), CalculateRequested())
    assert failed.status is FormStatus.ERROR

    state = transition(failed, FieldEdited("principal", "1000"))

    assert state.status is FormStatus.EDITING
    assert state.error is None


def test_recalculate_replaces_result(filled_state: FormState):
    first = transition(filled_state, CalculateRequested())
    edited = transition(first, FieldEdited("tenure", "24"))

    second = transition(edited, CalculateRequested())

    assert second.status is FormStatus.SUCCESS
    assert second.result.installment < first.result.installment


def test_zero_rate_policy_is_forwarded():
    state = FormState(fields=FormFields(principal="1200", annual_rate="0", tenure="12"))

    assert transition(state, CalculateRequested()).result.installment == 100
    assert transition(state, CalculateRequested(), allow_zero_rate=False).status is FormStatus.ERROR


def test_unknown_field_raises():
    with pytest.raises(UnknownFieldError):
        transition(initial_state(), FieldEdited("currency", "EUR"))


def test_edits_for_rebuilds_fields():
    fields = FormFields(principal="1", annual_rate="2", tenure="3")
    state = initial_state()

    for edit in edits_for(fields):
        state = transition(state, edit)

    assert state.fields == fields
    assert state.status is FormStatus.EDITING


def test_calculate_with_negligible_rate_succeeds():
    state = FormState(fields=FormFields(principal="100000", annual_rate="1e-15", tenure="12"))

    result = transition(state, CalculateRequested())

    assert result.status is FormStatus.SUCCESS
    assert result.result.installment == pytest.approx(100000 / 12)


def test_calculate_out_of_range_is_an_error():
    """Figures past float range surface as an error, not an exception"""
    state = FormState(fields=FormFields(principal="1e308", annual_rate="12", tenure="1000"))

    result = transition(state, CalculateRequested())

    assert result.status is FormStatus.ERROR
    assert result.error == OUT_OF_RANGE_MESSAGE
    assert result.result is None
