"""EMI computation for fixed-rate reducing-balance loans"""

import math

from emi_calculator.domain.models import LoanResult


def compute_emi(principal: float, annual_rate_percent: float, tenure_months: int) -> LoanResult:
    """
    Compute the equated monthly instalment and loan totals.

    Inputs are assumed valid (principal > 0, rate >= 0, tenure >= 1).
    No rounding is applied; formatting is left to the caller.

    Formula:
        r = annual_rate_percent / 12 / 100
        EMI = P * r * (1 + r)^N / ((1 + r)^N - 1)
            = P * r / (1 - (1 + r)^-N)

    The second form is evaluated through log1p/expm1, so rates too small to
    change 1 + r and tenures whose growth factor exceeds float range stay
    finite instead of dividing by zero or overflowing.

    Example:
        100000 at 12% over 12 months → EMI ≈ 8884.88, total ≈ 106618.55
    """
    monthly_rate = annual_rate_percent / 12 / 100

    # Zero-rate loans would divide by zero in the compound formula
    if monthly_rate == 0:
        return LoanResult(
            principal=principal,
            installment=principal / tenure_months,
            total_interest=0.0,
            total_payment=principal,
        )

    # ln((1 + r)^N), > 0 for any r > 0
    growth = tenure_months * math.log1p(monthly_rate)
    installment = principal * monthly_rate / -math.expm1(-growth)
    total_payment = installment * tenure_months

    return LoanResult(
        principal=principal,
        installment=installment,
        total_interest=total_payment - principal,
        total_payment=total_payment,
    )
