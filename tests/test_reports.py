import tempfile
import unittest
from pathlib import Path

from core.formatting import prepare_output
from core.orchestrator import calculate
from reports.charts import cumulative_position, generate_charts
from reports.pdf_quote import generate_quote_pdf
from reports.styles import pdf_styles


class TestReports(unittest.TestCase):
    def test_cumulative_position_cash(self):
        res = calculate({"monthly_bill_amount": 20000, "payment_option": "cash"})
        pos = cumulative_position(res)
        self.assertEqual(-750_000, pos["y"][0])
        self.assertGreater(pos["y"][-1], 0)
        self.assertEqual(len(pos["x"]), len(pos["y"]))

    def test_cumulative_position_financed(self):
        res = calculate({"monthly_bill_amount": 20000, "loan_term_years": 7})
        pos = cumulative_position(res)
        self.assertEqual(list(range(0, 8)), pos["x"])
        self.assertEqual(0, pos["y"][0])

    def test_charts_and_pdf(self):
        for option in ("cash", "financed"):
            with self.subTest(option=option), tempfile.TemporaryDirectory() as tmp:
                res = calculate({"monthly_bill_amount": 20000, "payment_option": option})
                paths = prepare_output("outputs", base=Path(tmp))
                paths.update(generate_charts(res, paths["out_dir"]))

                self.assertTrue(Path(paths["chart_bills"]).exists())
                self.assertTrue(Path(paths["chart_position"]).exists())

                pdf = generate_quote_pdf(res, paths)
                self.assertTrue(Path(pdf).read_bytes().startswith(b"%PDF"))

    def test_quote_styles(self):
        styles = pdf_styles()
        self.assertEqual(11, styles["H2b"].fontSize)
        self.assertEqual(8, styles["Small"].fontSize)

    def test_pdf_without_charts(self):
        with tempfile.TemporaryDirectory() as tmp:
            res = calculate({"monthly_bill_amount": 5000, "loan_term_years": 3})
            paths = {"out_dir": tmp}
            pdf = generate_quote_pdf(res, paths)
            self.assertEqual(pdf, paths["pdf"])
            self.assertTrue(Path(pdf).exists())


if __name__ == "__main__":
    unittest.main()
