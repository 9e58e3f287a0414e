# ui/results.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pandas as pd
import streamlit as st

from core.catalog import catalog_packages
from core.formatting import build_display, money_rs, units_label
from core.models import CalculationResult
from core.tariff import round_half_up


def detail_rows(res: CalculationResult) -> List[Dict[str, Any]]:
    disp = build_display(res)
    rows = [
        ("Estimated consumption", disp["estimated_units"]),
        ("Current energy charge", disp["current_energy_charge"]),
        ("Current fixed charge", disp["current_fixed_charge"]),
        ("Theoretical capacity", disp["theoretical_kw"]),
        ("Recommended package", disp["recommended_package"]),
        ("Package price", disp["cost"]),
        ("Monthly generation", disp["generation"]),
        ("Imported units after solar", units_label(res.net_imported_units)),
        ("Excess units", disp["excess_units"]),
        ("Export rate", disp["export_rate"]),
        ("Monthly export income", disp["monthly_net_income"]),
        ("Final bill", money_rs(round_half_up(res.final_bill))),
        ("Payback period", disp["payback"]),
        ("Connection", disp["phase"]),
    ]
    return [{"Item": k, "Value": v} for k, v in rows]


def catalog_rows(selected_kw: int) -> List[Dict[str, Any]]:
    return [
        {
            "Package": f"{p['kw']} kW",
            "Price": money_rs(p["price"]),
            "Monthly generation": units_label(p["monthly_generation"]),
            "Selected": "✓" if p["kw"] == selected_kw else "",
        }
        for p in catalog_packages()
    ]


def _render_kpis(res: CalculationResult, disp: Dict[str, Any]) -> None:
    c1, c2, c3 = st.columns(3)
    c1.metric("Recommended package", disp["recommended_package"])
    c2.metric("Package cost", disp["cost"])
    c3.metric("Payback", disp["payback"])

    if disp["saturated"]:
        st.warning(
            f"Your estimated need ({disp['theoretical_kw']}) exceeds the largest package; "
            f"showing {disp['recommended_package']}."
        )

    if res.is_financed:
        a, b = st.columns(2)
        a.metric("Monthly installment", disp["installment"])
        sign = "" if disp["net_positive"] else "-"
        b.metric("Net monthly cash flow", sign + disp["net_monthly"])
        if disp["net_positive"]:
            st.success("Your monthly benefit covers the loan installment.")
        else:
            st.warning("The loan installment is higher than your monthly benefit.")
    else:
        st.metric("Monthly savings", disp["savings"])


def render(res: CalculationResult, paths: Dict[str, str]) -> None:
    disp = build_display(res)

    _render_kpis(res, disp)
    st.info(disp["phase_note"])

    st.subheader("Details")
    st.dataframe(pd.DataFrame(detail_rows(res)), hide_index=True, use_container_width=True)

    with st.expander("Available packages"):
        st.dataframe(pd.DataFrame(catalog_rows(res.selected_kw)), hide_index=True, use_container_width=True)

    charts = [paths.get("chart_bills"), paths.get("chart_position")]
    charts = [c for c in charts if c and Path(c).exists()]
    if charts:
        cols = st.columns(len(charts))
        for col, c in zip(cols, charts):
            col.image(c)

    pdf = paths.get("pdf")
    if pdf and Path(pdf).exists():
        with open(pdf, "rb") as f:
            st.download_button("Download quotation (PDF)", data=f, file_name="solar_quote.pdf", mime="application/pdf")
