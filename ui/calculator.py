# ui/calculator.py
from __future__ import annotations

from typing import Any, Dict, List, Tuple

import streamlit as st

from core.config import CalculatorConfig
from core.models import MIN_MONTHLY_BILL, PAYMENT_CASH, PAYMENT_FINANCED, PHASE_SINGLE, PHASE_THREE


def render(cfg: CalculatorConfig) -> Dict[str, Any]:
    """Sidebar form. Returns the raw input mapping for core.orchestrator.calculate."""
    with st.sidebar:
        st.header("Your details")

        bill = st.number_input(
            f"Your current monthly bill ({cfg.currency})",
            min_value=0.0,
            step=500.0,
            value=float(cfg.default("monthly_bill_amount", MIN_MONTHLY_BILL)),
            help=f"Minimum {MIN_MONTHLY_BILL:,} {cfg.currency}.",
        )

        phases = [PHASE_SINGLE, PHASE_THREE]
        default_phase = cfg.default("connection_phase", PHASE_SINGLE)
        phase = st.radio(
            "Connection type",
            options=phases,
            index=phases.index(default_phase) if default_phase in phases else 0,
            format_func=lambda x: "Single Phase" if x == PHASE_SINGLE else "Three Phase",
            horizontal=True,
        )

        options = [PAYMENT_CASH, PAYMENT_FINANCED]
        default_option = cfg.default("payment_option", PAYMENT_FINANCED)
        option = st.radio(
            "Payment option",
            options=options,
            index=options.index(default_option) if default_option in options else 1,
            format_func=lambda x: "Cash" if x == PAYMENT_CASH else "Financed / Loan",
            horizontal=True,
        )

        raw: Dict[str, Any] = {
            "monthly_bill_amount": bill,
            "connection_phase": phase,
            "payment_option": option,
        }

        if option == PAYMENT_FINANCED:
            terms = list(cfg.loan_term_options)
            default_term = int(cfg.default("loan_term_years", terms[0]))
            raw["loan_term_years"] = st.selectbox(
                "Loan term (years)",
                options=terms,
                index=terms.index(default_term) if default_term in terms else 0,
                format_func=lambda x: f"{x} Years",
            )
            raw["annual_interest_rate_pct"] = st.number_input(
                "Annual interest rate (%)",
                min_value=0.0,
                step=0.1,
                value=float(cfg.default("annual_interest_rate_pct", 11.0)),
            )

    return raw


def validate(raw: Dict[str, Any]) -> Tuple[bool, List[str]]:
    errors: List[str] = []

    try:
        bill = float(raw.get("monthly_bill_amount"))
    except (TypeError, ValueError):
        errors.append("Monthly bill must be a number.")
        return False, errors

    if bill < MIN_MONTHLY_BILL:
        errors.append(f"Please enter a valid monthly bill of at least {MIN_MONTHLY_BILL:,} LKR.")

    return (len(errors) == 0), errors
