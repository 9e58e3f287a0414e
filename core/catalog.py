# core/catalog.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)


# ==========================================================
# Source of truth: cash price per installed package
# ==========================================================

UNITS_PER_KW_MONTH = 125  # average monthly generation per installed kW


@dataclass(frozen=True)
class Package:
    kw: int
    price: int  # LKR, installed


PACKAGES: Tuple[Package, ...] = (
    Package(5, 750_000),
    Package(10, 1_540_000),
    Package(15, 2_050_000),
    Package(20, 2_360_000),
    Package(30, 3_350_000),
    Package(40, 3_960_000),
)

_BY_KW: Dict[int, Package] = {p.kw: p for p in PACKAGES}


# ==========================================================
# Public API
# ==========================================================

def package_sizes() -> List[int]:
    return sorted(_BY_KW.keys())


def package_price(kw: int) -> int:
    try:
        return _BY_KW[int(kw)].price
    except KeyError as e:
        raise KeyError(f"Package not in catalog: {kw} kW") from e


def required_capacity_kw(units: float) -> int:
    return int(math.ceil(float(units) / UNITS_PER_KW_MONTH))


def select_package(required_kw: float) -> int:
    sizes = package_sizes()
    for kw in sizes:
        if kw >= required_kw:
            return kw

    # Saturates at the largest package; not an error
    logger.debug("Required %s kW exceeds catalog, using %d kW", required_kw, sizes[-1])
    return sizes[-1]


def catalog_packages() -> List[dict]:
    return [
        {"kw": p.kw, "price": p.price, "monthly_generation": p.kw * UNITS_PER_KW_MONTH}
        for p in sorted(PACKAGES, key=lambda p: p.kw)
    ]
