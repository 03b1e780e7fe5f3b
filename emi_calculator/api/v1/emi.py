"""POST /v1/emi - EMI calculation endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from emi_calculator.api.v1.schemas import EMIRequest, EMIResponse
from emi_calculator.api.dependencies import get_request_id, get_settings
from emi_calculator.config import Settings
from emi_calculator.domain.emi import compute_emi
from emi_calculator.domain.models import InvalidInput
from emi_calculator.domain.validation import check_result, validate_loan_input
from emi_calculator.infrastructure.observability.metrics import record_calculation
from emi_calculator.infrastructure.observability.logging import log_calculation

router = APIRouter()


@router.post("/emi", response_model=EMIResponse)
def calculate_emi(
    request_body: EMIRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Compute instalment and loan totals from raw field values.

    Flow:
    1. Validate the three values (same rules as the form)
    2. Compute EMI, total interest and total payment
    3. Reject figures that do not fit in a float
    4. Record metrics and logs

    Invalid input returns 422 with the form's error message.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        loan_input = validate_loan_input(
            request_body.principal,
            request_body.annual_rate_percent,
            request_body.tenure_months,
            allow_zero_rate=app_settings.allow_zero_rate,
        )

        result = loan_input
        if not isinstance(loan_input, InvalidInput):
            result = check_result(
                compute_emi(loan_input.principal, loan_input.annual_rate_percent, loan_input.tenure_months)
            )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    if isinstance(result, InvalidInput):
        record_calculation(False)
        logging.warning(f"Invalid input: {result.message}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=result.message)

    duration_ms = (time.time() - start_time) * 1000
    record_calculation(True, loan_input.tenure_months)
    log_calculation(request_id, "success", loan_input.tenure_months, duration_ms)

    return EMIResponse(
        principal=result.principal,
        installment=result.installment,
        total_interest=result.total_interest,
        total_payment=result.total_payment,
    )
