# core/solver.py
from __future__ import annotations

import logging
import math
from typing import Callable

from .models import MIN_MONTHLY_BILL
from .tariff import round_half_up, total_bill

logger = logging.getLogger(__name__)


# ==========================================================
# Search constants
#   The overshoot margin and refine window depend on how steep the
#   tariff is; re-derive them if the tariff tables change.
# ==========================================================
SCAN_START_UNITS = 30.0
SCAN_STOP_UNITS = 1200.0
SCAN_STEP_UNITS = 0.5
OVERSHOOT_MARGIN = 3000
REFINE_WINDOW = 10

FLOOR_ESTIMATE_UNITS = 80


# ==========================================================
# Generic bounded search over a monotone cost function
# ==========================================================

def _coarse_scan(
    cost_fn: Callable[[int], float],
    target: float,
    start: float,
    stop: float,
    step: float,
    overshoot: float,
) -> int:
    best_units = 0
    best_diff = math.inf

    n_steps = int(round((stop - start) / step))
    for k in range(n_steps + 1):
        units = round_half_up(start + k * step)
        cost = cost_fn(units)
        diff = abs(cost - target)
        if diff < best_diff:
            best_diff = diff
            best_units = units
        if cost > target + overshoot:
            break

    return best_units


def _refine(cost_fn: Callable[[int], float], target: float, center: int, window: int) -> int:
    best_units = center
    best_diff = abs(cost_fn(center) - target)

    for units in range(max(0, center - window), center + window + 1):
        diff = abs(cost_fn(units) - target)
        if diff < best_diff:
            best_diff = diff
            best_units = units

    return best_units


def solve_bounded(
    cost_fn: Callable[[int], float],
    target: float,
    *,
    start: float = SCAN_START_UNITS,
    stop: float = SCAN_STOP_UNITS,
    step: float = SCAN_STEP_UNITS,
    overshoot: float = OVERSHOOT_MARGIN,
    window: int = REFINE_WINDOW,
) -> int:
    """
    Integer quantity whose cost is closest to `target`.

    Two phases: a coarse scan (candidates rounded half-up, stops once the
    cost passes target + overshoot) and an integer refinement of +/- window
    around the coarse best. Ties keep the smaller, earlier quantity.
    `cost_fn` must be non-decreasing for the early stop to be valid.
    Never raises for finite targets; the scan bound caps the work.
    """
    coarse = _coarse_scan(cost_fn, target, start, stop, step, overshoot)
    return _refine(cost_fn, target, coarse, window)


# ==========================================================
# Public API: bill -> units
# ==========================================================

def estimate_units(bill_amount: float) -> int:
    if bill_amount < MIN_MONTHLY_BILL:
        return FLOOR_ESTIMATE_UNITS

    units = solve_bounded(total_bill, float(bill_amount))
    logger.debug("Bill %.2f -> %d units (bill at estimate %d)", bill_amount, units, total_bill(units))
    return units
