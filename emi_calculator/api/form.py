"""GET/POST / - Server-rendered calculator page"""

import time
import logging
from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse

from emi_calculator.api.dependencies import get_form_store, get_request_id, get_settings
from emi_calculator.config import Settings
from emi_calculator.domain.form_state import CalculateRequested, FormEvent, edits_for
from emi_calculator.domain.models import FormFields, FormState, FormStatus
from emi_calculator.presentation.page import render_page
from emi_calculator.presentation.store import FormStore
from emi_calculator.infrastructure.observability.metrics import record_calculation, record_transition
from emi_calculator.infrastructure.observability.logging import log_calculation
from emi_calculator.utils.number_utils import parse_int

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def show_form(
    store: FormStore = Depends(get_form_store),
    app_settings: Settings = Depends(get_settings),
):
    """Empty calculator in the idle state"""
    return HTMLResponse(render_page(store.state, app_settings.currency_symbol))


@router.post("/", response_class=HTMLResponse)
def submit_form(
    request: Request,
    principal: str = Form(""),
    annual_rate: str = Form(""),
    tenure: str = Form(""),
    store: FormStore = Depends(get_form_store),
    app_settings: Settings = Depends(get_settings),
):
    """
    Handle the Calculate action.

    The submitted fields are replayed as edits, then a calculate event is
    dispatched. Subscribers record metrics and render the final state.
    Always 200 for user input; the outcome is shown in the error or results
    panel. Unexpected failures are logged with the request ID and return 500.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    rendered: list[str] = []

    def on_transition(state: FormState, event: FormEvent) -> None:
        record_transition(type(event).__name__, state.status.value)

    def on_calculated(state: FormState, event: FormEvent) -> None:
        if not isinstance(event, CalculateRequested):
            return

        succeeded = state.status is FormStatus.SUCCESS
        tenure_months = parse_int(tenure) if succeeded else None
        record_calculation(succeeded, tenure_months)
        log_calculation(
            request_id,
            "success" if succeeded else "invalid_input",
            tenure_months,
            (time.time() - start_time) * 1000,
        )
        rendered.append(render_page(state, app_settings.currency_symbol))

    store.subscribe(on_transition)
    store.subscribe(on_calculated)

    fields = FormFields(principal=principal, annual_rate=annual_rate, tenure=tenure)
    try:
        for edit in edits_for(fields):
            store.dispatch(edit)
        store.dispatch(CalculateRequested())

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    logging.debug("Form submitted", extra={"request_id": request_id, "status": store.state.status.value})
    return HTMLResponse(rendered[-1])
