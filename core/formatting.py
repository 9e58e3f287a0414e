# core/formatting.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

from .models import PHASE_SINGLE, CalculationResult
from .tariff import bill_breakdown, round_half_up


def base_dir() -> Path:
    """Stable base directory whether run from a script or from Streamlit."""
    try:
        return Path(__file__).resolve().parents[1]
    except Exception:
        return Path(os.getcwd()).resolve()


def prepare_output(folder: str = "outputs", base: Path | None = None) -> Dict[str, str]:
    out_dir = (base or base_dir()) / folder
    out_dir.mkdir(parents=True, exist_ok=True)

    return {
        "out_dir": str(out_dir),
        "chart_bills": str(out_dir / "solar_chart_bills.png"),
        "chart_position": str(out_dir / "solar_chart_position.png"),
        "pdf": str(out_dir / "solar_quote.pdf"),
    }


def money_rs(x: float, dec: int = 0) -> str:
    return f"Rs. {x:,.{dec}f}"


def num(x: float, nd: int = 2) -> str:
    return f"{x:,.{nd}f}"


def units_label(n: float) -> str:
    return f"{int(n):,} units"


def payback_label(years: float | None) -> str:
    return "N/A years" if years is None else f"{years:.1f} years"


# ==========================================================
# Labels shown by the calculator
# ==========================================================

def build_display(res: CalculationResult) -> Dict[str, Any]:
    phase = res.inputs.connection_phase
    benefit = round_half_up(res.total_monthly_benefit)
    current = bill_breakdown(res.estimated_units)

    out: Dict[str, Any] = {
        "type": "financed" if res.is_financed else "cash",
        "estimated_units": units_label(res.estimated_units),
        "theoretical_kw": f"{res.required_capacity_kw} kW",
        "recommended_package": f"{res.selected_kw} kW",
        "generation": units_label(res.monthly_generation),
        "excess_units": units_label(res.excess_units),
        "export_rate": f"{res.export_rate:.2f} LKR/unit",
        "monthly_net_income": money_rs(round_half_up(res.export_income)),
        "cost": money_rs(res.total_cost),
        "payback": payback_label(res.payback_years),
        "phase": "Single Phase" if phase == PHASE_SINGLE else "Three Phase",
        "phase_note": res.phase_note,
        "total_monthly_benefit": benefit,
        "current_energy_charge": money_rs(current["energy_charge"]),
        "current_fixed_charge": money_rs(current["fixed_charge"]),
        "saturated": res.saturated,
    }

    if res.is_financed:
        net = int(res.net_monthly_cash_flow or 0)
        out["installment"] = money_rs(res.installment or 0)
        out["net_monthly"] = money_rs(abs(net))
        out["net_positive"] = net >= 0
    else:
        out["savings"] = money_rs(benefit)

    return out
