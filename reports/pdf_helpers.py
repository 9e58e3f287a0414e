# reports/pdf_helpers.py
from __future__ import annotations

from typing import Any, Dict, List

from reportlab.lib import colors
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph, Table, TableStyle


def section_bar(text: str, pal: Dict[str, Any], content_w: float) -> Table:
    style = ParagraphStyle(
        name="section_bar",
        fontName="Helvetica-Bold",
        fontSize=10,
        textColor=colors.white,
        leftIndent=6,
    )

    t = Table([[Paragraph(text, style)]], colWidths=[content_w])
    t.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), pal["PRIMARY"]),
        ("LEFTPADDING", (0, 0), (-1, -1), 6),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
    ]))
    return t


def make_table(data: List[List[Any]], content_w: float, *, ratios=None, repeatRows: int = 0) -> Table:
    if ratios:
        s = float(sum(ratios))
        col_widths = [content_w * (r / s) for r in ratios]
    else:
        ncols = len(data[0]) if data else 1
        col_widths = [content_w / ncols] * ncols
    return Table(data, colWidths=col_widths, repeatRows=repeatRows)


def table_style_uniform(pal: Dict[str, Any], *, font_header=9, font_body=9) -> TableStyle:
    return TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), pal["PRIMARY"]),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), font_header),
        ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 1), (-1, -1), font_body),
        ("GRID", (0, 0), (-1, -1), 0.6, pal["BORDER"]),
        ("BACKGROUND", (0, 1), (-1, -1), pal["SOFT"]),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ])


def table_2cols(header, rows, content_w, pal, highlight_row=None, highlight_color=None) -> Table:
    t = make_table([header] + rows, content_w, ratios=[2.6, 1.4], repeatRows=1)
    t.setStyle(table_style_uniform(pal))
    t.setStyle(TableStyle([("ALIGN", (1, 1), (1, -1), "RIGHT")]))
    if highlight_row is not None:
        r = highlight_row + 1
        t.setStyle(TableStyle([
            ("BACKGROUND", (0, r), (-1, r), highlight_color or pal["OK"]),
            ("TEXTCOLOR", (0, r), (-1, r), colors.white),
            ("FONTNAME", (0, r), (-1, r), "Helvetica-Bold"),
        ]))
    return t
