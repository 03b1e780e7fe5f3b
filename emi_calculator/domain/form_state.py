"""Calculator form state machine

Every event produces a new FormState; nothing is mutated in place.

    idle ──edit──> editing ──calculate──> success | error
                     ^                       │
                     └─────────edit──────────┘
"""

from dataclasses import dataclass, replace
from typing import Union

from emi_calculator.domain.emi import compute_emi
from emi_calculator.domain.exceptions import UnknownFieldError
from emi_calculator.domain.models import FormFields, FormState, FormStatus, InvalidInput
from emi_calculator.domain.validation import check_result, validate_loan_input

FIELD_NAMES = ("principal", "annual_rate", "tenure")


@dataclass(frozen=True)
class FieldEdited:
    """User changed the text of one input"""

    field: str
    value: str


@dataclass(frozen=True)
class CalculateRequested:
    """User pressed the Calculate button"""

    pass


FormEvent = Union[FieldEdited, CalculateRequested]


def initial_state() -> FormState:
    return FormState()


def transition(state: FormState, event: FormEvent, *, allow_zero_rate: bool = True) -> FormState:
    """Apply one event to the form and return the resulting state"""
    if isinstance(event, FieldEdited):
        if event.field not in FIELD_NAMES:
            raise UnknownFieldError(f"Unknown form field: {event.field}")

        # Any edit invalidates the last outcome
        return FormState(
            fields=replace(state.fields, **{event.field: event.value}),
            status=FormStatus.EDITING,
        )

    if isinstance(event, CalculateRequested):
        fields = state.fields
        outcome = validate_loan_input(
            fields.principal,
            fields.annual_rate,
            fields.tenure,
            allow_zero_rate=allow_zero_rate,
        )

        if isinstance(outcome, InvalidInput):
            return FormState(fields=fields, status=FormStatus.ERROR, error=outcome.message)

        result = check_result(
            compute_emi(outcome.principal, outcome.annual_rate_percent, outcome.tenure_months)
        )
        if isinstance(result, InvalidInput):
            return FormState(fields=fields, status=FormStatus.ERROR, error=result.message)

        return FormState(fields=fields, status=FormStatus.SUCCESS, result=result)

    raise TypeError(f"Unsupported form event: {type(event).__name__}")


def edits_for(fields: FormFields) -> list[FieldEdited]:
    """Edits that reproduce the given field values from an empty form"""
    return [FieldEdited(name, getattr(fields, name)) for name in FIELD_NAMES]
