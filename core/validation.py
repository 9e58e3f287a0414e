# core/validation.py
from __future__ import annotations

import math
from typing import Any, Mapping

from .models import (
    CONNECTION_PHASES,
    DEFAULT_INTEREST_RATE_PCT,
    DEFAULT_LOAN_TERM_YEARS,
    DEFAULT_PAYMENT,
    DEFAULT_PHASE,
    LOAN_TERMS_YEARS,
    MIN_MONTHLY_BILL,
    PAYMENT_OPTIONS,
    CalculationInput,
)


class InvalidInputError(ValueError):
    """Input rejected before any computation."""


def _as_number(value: Any, field: str) -> float:
    if value is None or isinstance(value, bool):
        raise InvalidInputError(f"{field} must be a number. Value={value!r}")
    try:
        x = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{field} must be a number. Value={value!r}") from e
    if not math.isfinite(x):
        raise InvalidInputError(f"{field} must be a finite number. Value={value!r}")
    return x


def _as_int(value: Any, field: str) -> int:
    x = _as_number(value, field)
    if x != int(x):
        raise InvalidInputError(f"{field} must be a whole number. Value={value!r}")
    return int(x)


def validate_input(p: CalculationInput) -> None:
    bill = _as_number(p.monthly_bill_amount, "monthly_bill_amount")
    if bill < MIN_MONTHLY_BILL:
        raise InvalidInputError(
            f"Please enter a valid monthly bill of at least {MIN_MONTHLY_BILL:,} LKR."
        )

    if p.connection_phase not in CONNECTION_PHASES:
        raise InvalidInputError(f"connection_phase must be one of {CONNECTION_PHASES}")
    if p.payment_option not in PAYMENT_OPTIONS:
        raise InvalidInputError(f"payment_option must be one of {PAYMENT_OPTIONS}")

    if _as_int(p.loan_term_years, "loan_term_years") not in LOAN_TERMS_YEARS:
        raise InvalidInputError(f"loan_term_years must be one of {LOAN_TERMS_YEARS}")
    if _as_number(p.annual_interest_rate_pct, "annual_interest_rate_pct") < 0:
        raise InvalidInputError("annual_interest_rate_pct must be >= 0")


def parse_input(raw: Mapping[str, Any]) -> CalculationInput:
    """
    Builds a validated CalculationInput from a plain mapping (form or
    request payload). Only `monthly_bill_amount` is required.
    """
    if not isinstance(raw, Mapping):
        raise InvalidInputError("Input must be a mapping.")
    if "monthly_bill_amount" not in raw:
        raise InvalidInputError("Missing 'monthly_bill_amount'.")

    p = CalculationInput(
        monthly_bill_amount=_as_number(raw.get("monthly_bill_amount"), "monthly_bill_amount"),
        connection_phase=str(raw.get("connection_phase") or DEFAULT_PHASE).strip().lower(),
        payment_option=str(raw.get("payment_option") or DEFAULT_PAYMENT).strip().lower(),
        loan_term_years=_as_int(raw.get("loan_term_years", DEFAULT_LOAN_TERM_YEARS), "loan_term_years"),
        annual_interest_rate_pct=_as_number(
            raw.get("annual_interest_rate_pct", DEFAULT_INTEREST_RATE_PCT), "annual_interest_rate_pct"
        ),
    )
    validate_input(p)
    return p
