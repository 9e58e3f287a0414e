# reports/styles.py
from reportlab.lib import colors
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet


def pdf_palette():
    return {
        "PRIMARY": colors.HexColor("#0B2E4A"),
        "BORDER": colors.HexColor("#D7DCE3"),
        "SOFT": colors.HexColor("#F5F7FA"),

        # Cash-flow outcome
        "OK": colors.HexColor("#1B7F3A"),
        "BAD": colors.HexColor("#C62828"),
    }


_REQUIRED = ("H2b", "Small")


def pdf_styles():
    styles = getSampleStyleSheet()

    body = styles["BodyText"]
    body.fontName = "Helvetica"
    body.fontSize = 10
    body.leading = 12

    if "H2b" not in styles.byName:
        styles.add(
            ParagraphStyle(
                name="H2b",
                parent=styles["Heading2"],
                fontName="Helvetica-Bold",
                fontSize=11,
                leading=13,
                spaceBefore=6,
                spaceAfter=4,
                alignment=TA_LEFT,
                textColor=colors.black,
            )
        )

    if "Small" not in styles.byName:
        styles.add(ParagraphStyle(name="Small", parent=body, fontSize=8, leading=10))

    _assert_required(styles)
    return styles


def _assert_required(styles):
    missing = [k for k in _REQUIRED if k not in styles.byName]
    if missing:
        raise KeyError(f"PDF styles missing: {missing}. Define them in reports/styles.py")
