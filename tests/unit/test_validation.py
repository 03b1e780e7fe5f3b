"""Unit tests for calculator input validation"""

import pytest
from emi_calculator.domain.models import LoanInput, InvalidInput
from emi_calculator.domain.emi import compute_emi
from emi_calculator.domain.validation import (
    check_result,
    validate_loan_input,
    INVALID_INPUT_MESSAGE,
    OUT_OF_RANGE_MESSAGE,
)


def test_validate_accepts_typical_input():
    """Well-formed fields become a LoanInput"""
    result = validate_loan_input("100000", "12", "12")

    assert result == LoanInput(principal=100000.0, annual_rate_percent=12.0, tenure_months=12)


def test_validate_ignores_surrounding_whitespace():
    result = validate_loan_input(" 2500.50 ", "7.25\n", " 36")

    assert result == LoanInput(principal=2500.5, annual_rate_percent=7.25, tenure_months=36)


@pytest.mark.parametrize(
    "principal,rate,tenure",
    [
        ("0", "12", "12"),  # zero principal
        ("-5000", "12", "12"),  # negative principal
        ("", "12", "12"),  # empty principal
        ("12abc", "12", "12"),  # partial number
        ("nan", "12", "12"),  # not finite
        ("inf", "12", "12"),
        ("100000", "-1", "12"),  # negative rate
        ("100000", "abc", "12"),  # non-numeric rate
        ("100000", "12", "0"),  # zero tenure
        ("100000", "12", "-6"),  # negative tenure
        ("100000", "12", "2.5"),  # fractional tenure
        ("100000", "12", "12.0"),  # tenure must be an integer literal
        ("100000", "12", "abc"),  # non-numeric tenure
        ("100000", "12", ""),  # empty tenure
    ],
)
def test_validate_rejects_bad_input(principal, rate, tenure):
    """Every violation yields the same aggregate message"""
    result = validate_loan_input(principal, rate, tenure)

    assert result == InvalidInput(INVALID_INPUT_MESSAGE)


def test_validate_allows_zero_rate_by_default():
    """Zero rate is accepted since compute_emi supports it"""
    result = validate_loan_input("100000", "0", "12")

    assert isinstance(result, LoanInput)
    assert result.annual_rate_percent == 0


def test_validate_rejects_zero_rate_when_disabled():
    """Legacy policy treats a zero rate as invalid"""
    result = validate_loan_input("100000", "0", "12", allow_zero_rate=False)

    assert isinstance(result, InvalidInput)
    assert result.message == INVALID_INPUT_MESSAGE


def test_validate_accepts_scientific_notation():
    result = validate_loan_input("1e5", "1.2e1", "12")

    assert result == LoanInput(principal=100000.0, annual_rate_percent=12.0, tenure_months=12)


@pytest.mark.parametrize("tenure", ["1" + "0" * 400, "9" * 5000])
def test_validate_rejects_tenure_beyond_float_range(tenure):
    """Integers too large for float arithmetic are not usable tenures"""
    result = validate_loan_input("100000", "12", tenure)

    assert result == InvalidInput(INVALID_INPUT_MESSAGE)


def test_check_result_passes_finite_figures():
    result = compute_emi(100000, 12, 12)

    assert check_result(result) is result


def test_check_result_rejects_overflow():
    result = compute_emi(1e308, 12, 1000)

    assert check_result(result) == InvalidInput(OUT_OF_RANGE_MESSAGE)
