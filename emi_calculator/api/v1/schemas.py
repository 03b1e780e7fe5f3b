"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field


class EMIRequest(BaseModel):
    """Request body for POST /v1/emi

    Values are taken as raw text, exactly as typed into the form; numbers are
    accepted and stringified.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    principal: str = Field(..., description="Loan amount")
    annual_rate_percent: str = Field(..., description="Annual interest rate in percent")
    tenure_months: str = Field(..., description="Loan tenure in whole months")


class EMIResponse(BaseModel):
    """Response for POST /v1/emi"""

    principal: float
    installment: float
    total_interest: float
    total_payment: float
