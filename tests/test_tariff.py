import dataclasses
import unittest

from core.tariff import (
    HIGH_USAGE_TIERS,
    bill_breakdown,
    energy_charge,
    fixed_charge,
    round_half_up,
    total_bill,
)


class TestTariff(unittest.TestCase):
    def test_energy_charge_boundaries(self):
        self.assertEqual(0, energy_charge(0))
        self.assertEqual(0, energy_charge(-5))
        self.assertEqual(135, energy_charge(30))
        self.assertEqual(375, energy_charge(60))
        self.assertEqual(1320, energy_charge(90))
        self.assertEqual(2055, energy_charge(120))
        self.assertEqual(4515, energy_charge(180))

    def test_energy_charge_switches_to_block_above_60(self):
        # 60 units: 30 x 4.5 + 30 x 8 under the low-usage schedule
        self.assertEqual(375, energy_charge(60))
        # 61 units: 765 base block + 18.5, rounded half-up
        self.assertEqual(784, energy_charge(61))
        self.assertEqual(143, energy_charge(31))

    def test_fixed_charge_steps(self):
        cases = [
            (0, 80), (30, 80), (31, 210), (60, 210), (61, 400), (90, 400),
            (91, 1000), (120, 1000), (121, 1500), (180, 1500), (181, 2100), (1200, 2100),
        ]
        for units, expected in cases:
            with self.subTest(units=units):
                self.assertEqual(expected, fixed_charge(units))

    def test_total_bill_typical(self):
        self.assertEqual(80, total_bill(0))
        self.assertEqual(505, total_bill(50))
        self.assertEqual(2565, total_bill(100))
        self.assertEqual(7835, total_bill(200))
        self.assertEqual(20035, total_bill(400))

    def test_total_bill_is_monotonic(self):
        prev = total_bill(0)
        for u in range(1, 1201):
            cur = total_bill(u)
            self.assertGreaterEqual(cur, prev, f"total_bill decreases at {u}")
            prev = cur

    def test_bill_breakdown(self):
        b = bill_breakdown(100)
        self.assertEqual(1565, b["energy_charge"])
        self.assertEqual(1000, b["fixed_charge"])
        self.assertEqual(2565, b["total_bill"])

    def test_round_half_up(self):
        self.assertEqual(31, round_half_up(30.5))
        self.assertEqual(30, round_half_up(30.49))
        self.assertEqual(3, round_half_up(2.5))
        self.assertEqual(0, round_half_up(-0.5))
        self.assertEqual(-1, round_half_up(-0.51))

    def test_tier_tables_are_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            HIGH_USAGE_TIERS[0].rate = 1.0


if __name__ == "__main__":
    unittest.main()
