# core/tariff.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple


# ==========================================================
# Domestic tariff tables (no fuel surcharge)
# ==========================================================

@dataclass(frozen=True)
class EnergyTier:
    start: int              # kWh (exclusive)
    end: Optional[int]      # kWh (inclusive); None = open-ended
    rate: float             # LKR/kWh


@dataclass(frozen=True)
class TariffRegime:
    """Applies while consumption is <= `upto_units` (None = everything above)."""
    upto_units: Optional[int]
    tiers: Tuple[EnergyTier, ...]


LOW_USAGE_TIERS: Tuple[EnergyTier, ...] = (
    EnergyTier(0, 30, 4.50),
    EnergyTier(30, 60, 8.00),
)

# Above 60 kWh the first 60 units are billed as one block at 12.75
HIGH_USAGE_TIERS: Tuple[EnergyTier, ...] = (
    EnergyTier(0, 60, 12.75),
    EnergyTier(60, 90, 18.50),
    EnergyTier(90, 120, 24.50),
    EnergyTier(120, 180, 41.00),
    EnergyTier(180, None, 61.00),
)

TARIFF_SCHEDULE: Tuple[TariffRegime, ...] = (
    TariffRegime(60, LOW_USAGE_TIERS),
    TariffRegime(None, HIGH_USAGE_TIERS),
)

# (up to kWh inclusive, fixed charge LKR)
FIXED_CHARGE_STEPS: Tuple[Tuple[int, int], ...] = (
    (30, 80),
    (60, 210),
    (90, 400),
    (120, 1000),
    (180, 1500),
)
FIXED_CHARGE_ABOVE = 2100


# ==========================================================
# Helpers
# ==========================================================

def round_half_up(x: float) -> int:
    # .5 always rounds up (not banker's rounding)
    return int(math.floor(float(x) + 0.5))


def _tier_units(units: float, tier: EnergyTier) -> float:
    over = max(float(units) - tier.start, 0.0)
    if tier.end is None:
        return over
    return min(over, float(tier.end - tier.start))


def _regime_for(units: float) -> TariffRegime:
    for regime in TARIFF_SCHEDULE:
        if regime.upto_units is None or units <= regime.upto_units:
            return regime
    return TARIFF_SCHEDULE[-1]


# ==========================================================
# Public API
# ==========================================================

def energy_charge(units: float) -> int:
    if units <= 0:
        return 0
    regime = _regime_for(units)
    energy = sum(_tier_units(units, t) * t.rate for t in regime.tiers)
    return round_half_up(energy)


def fixed_charge(units: float) -> int:
    for upto, charge in FIXED_CHARGE_STEPS:
        if units <= upto:
            return charge
    return FIXED_CHARGE_ABOVE


def total_bill(units: float) -> int:
    return round_half_up(energy_charge(units) + fixed_charge(units))


def bill_breakdown(units: float) -> dict:
    energy = energy_charge(units)
    fixed = fixed_charge(units)
    return {
        "units": units,
        "energy_charge": energy,
        "fixed_charge": fixed,
        "total_bill": round_half_up(energy + fixed),
    }
