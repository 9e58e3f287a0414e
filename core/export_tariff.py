# core/export_tariff.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


# ==========================================================
# 2025 solar export tariff (Net Accounting), LKR per exported unit
# ==========================================================

@dataclass(frozen=True)
class ExportTier:
    limit_kw: float
    rate: float
    inclusive: bool = True


EXPORT_RATE_TIERS: Tuple[ExportTier, ...] = (
    ExportTier(5, 20.90, inclusive=False),
    ExportTier(20, 19.61),
    ExportTier(100, 17.46),
    ExportTier(500, 15.49),
    ExportTier(1000, 15.07),
)
EXPORT_RATE_ABOVE = 14.46


def _in_tier(kw: float, tier: ExportTier) -> bool:
    return kw <= tier.limit_kw if tier.inclusive else kw < tier.limit_kw


def export_rate(system_kw: float) -> float:
    for tier in EXPORT_RATE_TIERS:
        if _in_tier(system_kw, tier):
            return tier.rate
    return EXPORT_RATE_ABOVE
