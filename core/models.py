# core/models.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


# ==========================================================
# Input domain
# ==========================================================
PHASE_SINGLE = "single"
PHASE_THREE = "three"
CONNECTION_PHASES = (PHASE_SINGLE, PHASE_THREE)

PAYMENT_CASH = "cash"
PAYMENT_FINANCED = "financed"
PAYMENT_OPTIONS = (PAYMENT_CASH, PAYMENT_FINANCED)

LOAN_TERMS_YEARS = (3, 5, 7, 10)

MIN_MONTHLY_BILL = 5000  # LKR

DEFAULT_PHASE = PHASE_SINGLE
DEFAULT_PAYMENT = PAYMENT_FINANCED
DEFAULT_LOAN_TERM_YEARS = 5
DEFAULT_INTEREST_RATE_PCT = 11.0


@dataclass(frozen=True)
class CalculationInput:
    monthly_bill_amount: float                       # LKR per month
    connection_phase: str = DEFAULT_PHASE            # "single" | "three"
    payment_option: str = DEFAULT_PAYMENT            # "cash" | "financed"
    loan_term_years: int = DEFAULT_LOAN_TERM_YEARS   # 3 | 5 | 7 | 10
    annual_interest_rate_pct: float = DEFAULT_INTEREST_RATE_PCT

    @property
    def is_financed(self) -> bool:
        return self.payment_option == PAYMENT_FINANCED


@dataclass(frozen=True)
class CalculationResult:
    """
    Full engine output. Immutable record with no identity.

    `payback_years` is None when the annual benefit is not positive
    ("not applicable"). `installment` and `net_monthly_cash_flow` only exist
    for financed purchases; the net cash flow may be negative.
    """

    inputs: CalculationInput

    # Consumption / sizing
    estimated_units: int
    required_capacity_kw: int
    selected_kw: int
    total_cost: int

    # Net Accounting
    monthly_generation: int
    net_imported_units: int
    excess_units: int
    gross_bill_after_solar: int
    export_rate: float
    export_income: float
    final_bill: float

    # Benefit
    monthly_bill_savings: float
    total_monthly_benefit: float
    annual_benefit: float
    payback_years: Optional[float]
    phase_note: str

    # Financed only
    installment: Optional[int] = None
    net_monthly_cash_flow: Optional[int] = None

    @property
    def is_financed(self) -> bool:
        return self.installment is not None

    @property
    def net_positive(self) -> Optional[bool]:
        if self.net_monthly_cash_flow is None:
            return None
        return self.net_monthly_cash_flow >= 0

    @property
    def saturated(self) -> bool:
        return self.required_capacity_kw > self.selected_kw

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
