import dataclasses
import unittest
from unittest import mock

from core.models import CalculationInput
from core.orchestrator import calculate, run_calculation
from core.validation import InvalidInputError


class TestHappyPathCore(unittest.TestCase):
    def test_cash_single_phase(self):
        res = calculate({"monthly_bill_amount": 20000, "connection_phase": "single", "payment_option": "cash"})

        self.assertEqual(399, res.estimated_units)
        self.assertEqual(4, res.required_capacity_kw)
        self.assertEqual(5, res.selected_kw)
        self.assertEqual(750_000, res.total_cost)
        self.assertEqual(625, res.monthly_generation)
        self.assertLessEqual(res.final_bill, res.gross_bill_after_solar)
        self.assertGreater(res.total_monthly_benefit, 0)
        self.assertIsNotNone(res.payback_years)
        self.assertAlmostEqual(2.56, res.payback_years, places=2)
        self.assertIn("compatible with single-phase", res.phase_note)

        self.assertIsNone(res.installment)
        self.assertIsNone(res.net_monthly_cash_flow)
        self.assertIsNone(res.net_positive)
        self.assertFalse(res.saturated)

    def test_minimum_bill_accepted(self):
        res = calculate({"monthly_bill_amount": 5000, "payment_option": "cash"})
        self.assertEqual(155, res.estimated_units)
        self.assertEqual(2, res.required_capacity_kw)
        self.assertEqual(5, res.selected_kw)
        self.assertEqual(470, res.excess_units)

    def test_below_minimum_rejected_before_computation(self):
        with self.assertLogs("core.orchestrator", level="INFO"):
            with self.assertRaises(InvalidInputError):
                calculate({"monthly_bill_amount": 4999})
        with self.assertRaises(InvalidInputError):
            run_calculation(CalculationInput(monthly_bill_amount=4999))

    def test_financed_zero_interest(self):
        p = CalculationInput(
            monthly_bill_amount=20000,
            connection_phase="single",
            payment_option="financed",
            loan_term_years=5,
            annual_interest_rate_pct=0,
        )
        res = run_calculation(p)
        self.assertEqual(res.total_cost / (5 * 12), res.installment)
        self.assertTrue(res.net_positive)

    def test_financed_negative_cash_flow(self):
        res = calculate({
            "monthly_bill_amount": 5000,
            "payment_option": "financed",
            "loan_term_years": 3,
            "annual_interest_rate_pct": 11.0,
        })
        self.assertLess(res.net_monthly_cash_flow, 0)
        self.assertFalse(res.net_positive)

    def test_large_bill_hits_search_bound(self):
        res = calculate({"monthly_bill_amount": 80000, "connection_phase": "single", "payment_option": "cash"})
        self.assertEqual(1210, res.estimated_units)
        self.assertEqual(10, res.selected_kw)
        self.assertEqual(1_540_000, res.total_cost)
        self.assertIn("requires a three-phase connection", res.phase_note)

    def test_result_is_immutable_record(self):
        res = calculate({"monthly_bill_amount": 20000})
        with self.assertRaises(dataclasses.FrozenInstanceError):
            res.selected_kw = 40
        d = res.to_dict()
        self.assertEqual(20000.0, d["inputs"]["monthly_bill_amount"])
        self.assertIn("payback_years", d)

    def test_deterministic(self):
        raw = {"monthly_bill_amount": 33333, "connection_phase": "three", "payment_option": "financed"}
        self.assertEqual(calculate(raw), calculate(raw))

    def test_input_validated_once(self):
        with mock.patch("core.orchestrator.validate_input") as validate:
            calculate({"monthly_bill_amount": 20000})
            validate.assert_not_called()

            run_calculation(CalculationInput(monthly_bill_amount=20000))
            validate.assert_called_once()


if __name__ == "__main__":
    unittest.main()
