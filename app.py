# app.py
from __future__ import annotations

import logging
import sys
from pathlib import Path

import streamlit as st

# === make repo imports work under `streamlit run` ===
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import load_config
from core.formatting import prepare_output
from core.orchestrator import calculate
from core.validation import InvalidInputError
from reports.charts import generate_charts
from reports.pdf_quote import generate_quote_pdf
from ui import calculator, results

logger = logging.getLogger(__name__)


def main() -> None:
    st.set_page_config(page_title="Solar Package & Savings Calculator", layout="wide")
    st.title("Solar Package & Savings Calculator")
    st.caption("Net Accounting, 2025 CEB export tariffs")

    cfg = load_config()
    raw = calculator.render(cfg)

    run = st.sidebar.button("Calculate savings", type="primary")
    if not run:
        st.info("Enter your details in the sidebar and press **Calculate savings**.")
        return

    ok, errors = calculator.validate(raw)
    if not ok:
        st.error("\n".join(errors))
        st.stop()

    try:
        res = calculate(raw)
    except InvalidInputError as e:
        st.error(str(e))
        st.stop()

    paths = prepare_output(cfg.output_dir)

    try:
        paths.update(generate_charts(res, paths["out_dir"]))
    except Exception as e:
        logger.warning("Charts not generated: %s", e)
        st.warning(f"Could not generate charts: {e}")

    try:
        generate_quote_pdf(res, paths)
    except Exception as e:
        logger.warning("PDF not generated: %s", e)
        st.warning(f"Could not generate PDF: {e}")

    results.render(res, paths)


if __name__ == "__main__":
    main()
