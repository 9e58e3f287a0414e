# core/financial.py
from __future__ import annotations

from typing import Any, Dict, Optional

from .catalog import UNITS_PER_KW_MONTH
from .export_tariff import export_rate
from .models import PHASE_SINGLE
from .tariff import round_half_up, total_bill

SINGLE_PHASE_MAX_KW = 5


# ==========================================================
# Basic financial functions
# ==========================================================

def amortized_installment(total_cost: float, annual_rate_pct: float, term_years: int) -> int:
    principal = float(total_cost)
    r = float(annual_rate_pct) / 100.0 / 12.0
    n = int(term_years) * 12

    if n <= 0:
        raise ValueError("Invalid loan term.")

    if r == 0:
        installment = principal / n
    else:
        factor = (1 + r) ** n
        installment = principal * r * factor / (factor - 1)

    return round_half_up(installment)


def payback_years(total_cost: float, annual_benefit: float) -> Optional[float]:
    return float(total_cost) / annual_benefit if annual_benefit > 0 else None


def phase_note(selected_kw: int, connection_phase: str) -> str:
    if selected_kw > SINGLE_PHASE_MAX_KW and connection_phase == PHASE_SINGLE:
        return (
            f"A {selected_kw} kW system requires a three-phase connection for net metering "
            f"compliance and optimal performance in Sri Lanka. Single-phase is limited to "
            f"{SINGLE_PHASE_MAX_KW} kW."
        )
    if selected_kw > SINGLE_PHASE_MAX_KW:
        return f"The selected {selected_kw} kW package is suitable for three-phase connection."
    return f"A {SINGLE_PHASE_MAX_KW} kW system is generally compatible with single-phase connections."


# ==========================================================
# Net Accounting (one month)
# ==========================================================

def project_net_accounting(
    *,
    bill_amount: float,
    estimated_units: int,
    selected_kw: int,
    total_cost: float,
) -> Dict[str, Any]:
    generation = round_half_up(selected_kw * UNITS_PER_KW_MONTH)

    net_imported = max(0, int(estimated_units) - generation)
    excess = max(0, generation - int(estimated_units))

    gross_bill = total_bill(net_imported)
    rate = export_rate(selected_kw)
    export_income = excess * rate

    final_bill = max(0.0, gross_bill - export_income)

    bill_savings = float(bill_amount) - final_bill
    monthly_benefit = bill_savings + export_income
    annual_benefit = monthly_benefit * 12

    return {
        "monthly_generation": generation,
        "net_imported_units": net_imported,
        "excess_units": excess,
        "gross_bill_after_solar": gross_bill,
        "export_rate": rate,
        "export_income": export_income,
        "final_bill": final_bill,
        "monthly_bill_savings": bill_savings,
        "total_monthly_benefit": monthly_benefit,
        "annual_benefit": annual_benefit,
        "payback_years": payback_years(total_cost, annual_benefit),
    }


# ==========================================================
# Financing
# ==========================================================

def project_financing(
    *,
    total_cost: float,
    total_monthly_benefit: float,
    annual_rate_pct: float,
    term_years: int,
) -> Dict[str, Any]:
    installment = amortized_installment(total_cost, annual_rate_pct, term_years)
    net_monthly = round_half_up(total_monthly_benefit) - installment

    return {
        "installment": installment,
        "net_monthly_cash_flow": net_monthly,
        "net_positive": net_monthly >= 0,
    }
