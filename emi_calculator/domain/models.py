"""Domain models - pure Python dataclasses representing loan calculation entities"""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class LoanInput:
    """Validated calculator input"""

    principal: float
    annual_rate_percent: float
    tenure_months: int


@dataclass(frozen=True)
class LoanResult:
    """Repayment figures derived from a LoanInput"""

    principal: float
    installment: float
    total_interest: float
    total_payment: float


@dataclass(frozen=True)
class InvalidInput:
    """Validation failure. Carries one message for all fields."""

    message: str


class FormStatus(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True)
class FormFields:
    """Raw text currently held by the three inputs"""

    principal: str = ""
    annual_rate: str = ""
    tenure: str = ""


@dataclass(frozen=True)
class FormState:
    """Snapshot of the calculator form"""

    fields: FormFields = field(default_factory=FormFields)
    status: FormStatus = FormStatus.IDLE
    result: LoanResult | None = None
    error: str | None = None
