# core/orchestrator.py
from __future__ import annotations

import logging
from typing import Any, Mapping

from .catalog import package_price, required_capacity_kw, select_package
from .financial import phase_note, project_financing, project_net_accounting
from .models import CalculationInput, CalculationResult
from .solver import estimate_units
from .validation import InvalidInputError, parse_input, validate_input

logger = logging.getLogger(__name__)


# ==========================================================
# Evaluation
# ==========================================================

def _evaluate(p: CalculationInput) -> CalculationResult:
    # p is already validated
    bill = float(p.monthly_bill_amount)

    units = estimate_units(bill)
    required_kw = required_capacity_kw(units)
    selected_kw = select_package(required_kw)
    total_cost = package_price(selected_kw)

    net = project_net_accounting(
        bill_amount=bill,
        estimated_units=units,
        selected_kw=selected_kw,
        total_cost=total_cost,
    )

    financing: Mapping[str, Any] = {}
    if p.is_financed:
        financing = project_financing(
            total_cost=total_cost,
            total_monthly_benefit=net["total_monthly_benefit"],
            annual_rate_pct=p.annual_interest_rate_pct,
            term_years=p.loan_term_years,
        )

    logger.debug(
        "units=%d required=%d kW selected=%d kW payback=%s",
        units, required_kw, selected_kw, net["payback_years"],
    )

    return CalculationResult(
        inputs=p,
        estimated_units=units,
        required_capacity_kw=required_kw,
        selected_kw=selected_kw,
        total_cost=total_cost,
        monthly_generation=net["monthly_generation"],
        net_imported_units=net["net_imported_units"],
        excess_units=net["excess_units"],
        gross_bill_after_solar=net["gross_bill_after_solar"],
        export_rate=net["export_rate"],
        export_income=net["export_income"],
        final_bill=net["final_bill"],
        monthly_bill_savings=net["monthly_bill_savings"],
        total_monthly_benefit=net["total_monthly_benefit"],
        annual_benefit=net["annual_benefit"],
        payback_years=net["payback_years"],
        phase_note=phase_note(selected_kw, p.connection_phase),
        installment=financing.get("installment"),
        net_monthly_cash_flow=financing.get("net_monthly_cash_flow"),
    )


def run_calculation(p: CalculationInput) -> CalculationResult:
    """
    Linear flow:
    Validation -> Units -> Package -> Net Accounting -> Financing

    Pure and synchronous: no shared state, no I/O.
    """
    try:
        validate_input(p)
    except InvalidInputError as e:
        logger.info("Input rejected: %s", e)
        raise
    return _evaluate(p)


def calculate(raw: Mapping[str, Any]) -> CalculationResult:
    # parse_input validates
    try:
        p = parse_input(raw)
    except InvalidInputError as e:
        logger.info("Input rejected: %s", e)
        raise
    return _evaluate(p)
