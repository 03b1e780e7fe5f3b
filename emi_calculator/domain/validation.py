"""Validation of raw calculator input and of the figures computed from it"""

import math
import sys

from emi_calculator.domain.models import LoanInput, LoanResult, InvalidInput
from emi_calculator.utils.number_utils import parse_float, parse_int

INVALID_INPUT_MESSAGE = (
    "All fields must be positive numbers, and Loan Tenure must be a positive integer in months."
)
OUT_OF_RANGE_MESSAGE = "The loan figures are too large to calculate. Try a smaller amount, rate or tenure."


def validate_loan_input(
    raw_principal: str,
    raw_rate: str,
    raw_tenure: str,
    *,
    allow_zero_rate: bool = True,
) -> LoanInput | InvalidInput:
    """
    Turn the three form fields into a LoanInput.

    Rules:
    - principal: finite number > 0
    - rate: finite number >= 0 (> 0 when allow_zero_rate is False)
    - tenure: integer literal >= 1 that fits in a float

    Any violation yields the same InvalidInput; the failing field is not reported.
    """
    principal = parse_float(raw_principal)
    rate = parse_float(raw_rate)
    tenure = parse_int(raw_tenure)

    if principal is None or principal <= 0:
        return InvalidInput(INVALID_INPUT_MESSAGE)

    if rate is None or rate < 0 or (rate == 0 and not allow_zero_rate):
        return InvalidInput(INVALID_INPUT_MESSAGE)

    # Larger integers cannot take part in float arithmetic
    if tenure is None or tenure <= 0 or tenure > sys.float_info.max:
        return InvalidInput(INVALID_INPUT_MESSAGE)

    return LoanInput(principal=principal, annual_rate_percent=rate, tenure_months=tenure)


def check_result(result: LoanResult) -> LoanResult | InvalidInput:
    """Reject figures that overflowed to infinity or NaN"""
    figures = (result.installment, result.total_interest, result.total_payment)
    if all(math.isfinite(value) for value in figures):
        return result
    return InvalidInput(OUT_OF_RANGE_MESSAGE)
