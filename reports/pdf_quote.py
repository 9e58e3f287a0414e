# reports/pdf_quote.py
from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import inch
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer

from core.formatting import build_display, money_rs, num, units_label
from core.models import CalculationResult
from core.tariff import round_half_up

from .pdf_helpers import section_bar, table_2cols
from .styles import pdf_palette, pdf_styles


def _ensure_pdf_path(paths: Dict[str, Any]) -> str:
    if not isinstance(paths, dict):
        raise TypeError("`paths` must be a dict containing 'pdf'.")

    pdf_path = paths.get("pdf")
    if not pdf_path:
        out_dir = paths.get("out_dir") or "outputs"
        pdf_path = str(Path(out_dir) / "solar_quote.pdf")
        paths["pdf"] = pdf_path

    p = Path(str(pdf_path))
    p.parent.mkdir(parents=True, exist_ok=True)
    return str(p)


def _rows_inputs(res: CalculationResult, disp: Dict[str, Any]) -> List[List[str]]:
    p = res.inputs
    rows = [
        ["Current monthly bill", money_rs(p.monthly_bill_amount)],
        ["Connection", disp["phase"]],
        ["Payment option", "Financed / Loan" if p.is_financed else "Cash"],
    ]
    if p.is_financed:
        rows.append(["Loan term", f"{p.loan_term_years} years"])
        rows.append(["Annual interest rate", f"{num(p.annual_interest_rate_pct, 1)} %"])
    return rows


def _rows_sizing(res: CalculationResult, disp: Dict[str, Any]) -> List[List[str]]:
    return [
        ["Estimated consumption", disp["estimated_units"]],
        ["Theoretical capacity", disp["theoretical_kw"]],
        ["Recommended package", disp["recommended_package"]],
        ["Package price", disp["cost"]],
        ["Monthly generation", disp["generation"]],
    ]


def _rows_net_accounting(res: CalculationResult, disp: Dict[str, Any]) -> List[List[str]]:
    return [
        ["Imported units after solar", units_label(res.net_imported_units)],
        ["Excess (exported) units", disp["excess_units"]],
        ["Bill on imported units", money_rs(res.gross_bill_after_solar)],
        ["Export rate", disp["export_rate"]],
        ["Monthly export income", disp["monthly_net_income"]],
        ["Final bill", money_rs(round_half_up(res.final_bill))],
    ]


def _rows_financial(res: CalculationResult, disp: Dict[str, Any]) -> List[List[str]]:
    rows = [
        ["Total monthly benefit", money_rs(disp["total_monthly_benefit"])],
        ["Payback period", disp["payback"]],
    ]
    if res.is_financed:
        sign = "" if disp["net_positive"] else "-"
        rows.append(["Monthly installment", disp["installment"]])
        rows.append(["Net monthly cash flow", sign + disp["net_monthly"]])
    return rows


def _chart(path: Optional[str], content_w: float) -> Optional[Image]:
    if not path or not Path(path).exists():
        return None
    w = content_w * 0.48
    return Image(path, width=w, height=w * 0.75)


def generate_quote_pdf(res: CalculationResult, paths: Dict[str, Any]) -> str:
    """
    Quotation PDF: inputs, sizing, Net Accounting and financial outcome.
    Charts from `paths["chart_bills"]` / `paths["chart_position"]` are embedded
    when present.
    """
    pal = pdf_palette()
    styles = pdf_styles()
    pdf_path = _ensure_pdf_path(paths)

    doc = SimpleDocTemplate(pdf_path, pagesize=A4, topMargin=0.6 * inch, bottomMargin=0.6 * inch)
    content_w = doc.width
    disp = build_display(res)

    story: List[Any] = [
        Paragraph("Solar Package &amp; Savings Quotation", styles["Title"]),
        Paragraph(f"Net Accounting, 2025 export tariffs. Date: {date.today().isoformat()}", styles["Small"]),
        Spacer(1, 10),
    ]

    sections = [
        ("Your inputs", _rows_inputs(res, disp), None),
        ("Recommended system", _rows_sizing(res, disp), 2),
        ("Net Accounting (monthly)", _rows_net_accounting(res, disp), None),
        ("Financial outcome", _rows_financial(res, disp), None),
    ]
    for title, rows, highlight in sections:
        story.append(section_bar(title, pal, content_w))
        story.append(Spacer(1, 4))
        color = None
        if title == "Financial outcome" and res.is_financed:
            highlight = len(rows) - 1
            color = pal["OK"] if disp["net_positive"] else pal["BAD"]
        story.append(table_2cols(["Item", "Value"], rows, content_w, pal, highlight, color))
        story.append(Spacer(1, 8))

    story.append(Paragraph("Connection", styles["H2b"]))
    story.append(Paragraph(disp["phase_note"], styles["BodyText"]))
    story.append(Spacer(1, 8))

    for key in ("chart_bills", "chart_position"):
        img = _chart(paths.get(key), content_w)
        if img is not None:
            story.append(img)

    doc.build(story)
    return pdf_path
