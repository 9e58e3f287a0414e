# reports/charts.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import matplotlib.pyplot as plt

from core.models import CalculationResult


def _mkdir_charts(out_dir: Optional[str]) -> Path:
    base = Path(out_dir) if out_dir else Path("outputs") / "charts"
    base.mkdir(parents=True, exist_ok=True)
    return base


def _plot_bar(labels: List[str], values: List[float], out_path: Path, title: str) -> None:
    plt.figure()
    plt.bar(labels, values)
    plt.title(title)
    plt.ylabel("LKR / month")
    plt.tight_layout()
    plt.savefig(out_path, dpi=160)
    plt.close()


def _plot_line(xs: List[int], ys: List[float], out_path: Path, title: str, xlabel: str) -> None:
    plt.figure()
    plt.plot(xs, ys, marker="o")
    plt.axhline(0, color="grey", linewidth=0.8)
    plt.title(title)
    plt.xlabel(xlabel)
    plt.ylabel("LKR")
    plt.tight_layout()
    plt.savefig(out_path, dpi=160)
    plt.close()


def cumulative_position(res: CalculationResult) -> Dict[str, List[float]]:
    """
    Cash: -cost + year * annual benefit, until payback (at least 10 years).
    Financed: cumulative net monthly cash flow per year over the loan term.
    """
    if res.is_financed:
        years = int(res.inputs.loan_term_years)
        net_year = float(res.net_monthly_cash_flow or 0) * 12
        xs = list(range(0, years + 1))
        return {"x": xs, "y": [net_year * n for n in xs]}

    horizon = 10
    if res.payback_years is not None:
        horizon = max(horizon, int(res.payback_years) + 1)
    xs = list(range(0, horizon + 1))
    return {"x": xs, "y": [-float(res.total_cost) + res.annual_benefit * n for n in xs]}


def generate_charts(res: CalculationResult, out_dir: Optional[str] = None) -> Dict[str, str]:
    """
    Writes 2 PNG files:
      - solar_chart_bills.png (bill before vs after solar)
      - solar_chart_position.png (cumulative position)
    """
    base = _mkdir_charts(out_dir)

    p1 = base / "solar_chart_bills.png"
    _plot_bar(
        ["Current bill", "Bill after solar", "Export income"],
        [float(res.inputs.monthly_bill_amount), float(res.final_bill), float(res.export_income)],
        p1,
        "Monthly bill (Net Accounting)",
    )

    pos = cumulative_position(res)
    p2 = base / "solar_chart_position.png"
    title = "Cumulative net cash flow (loan term)" if res.is_financed else "Cumulative position vs. package cost"
    _plot_line(pos["x"], pos["y"], p2, title, "Year")

    return {
        "chart_bills": str(p1),
        "chart_position": str(p2),
    }
