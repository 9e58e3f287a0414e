import unittest

from core.catalog import (
    catalog_packages,
    package_price,
    package_sizes,
    required_capacity_kw,
    select_package,
)


class TestCatalog(unittest.TestCase):
    def test_required_capacity(self):
        self.assertEqual(0, required_capacity_kw(0))
        self.assertEqual(1, required_capacity_kw(125))
        self.assertEqual(2, required_capacity_kw(126))
        self.assertEqual(4, required_capacity_kw(399))
        self.assertEqual(41, required_capacity_kw(5001))

    def test_select_first_size_meeting_requirement(self):
        self.assertEqual(5, select_package(0))
        self.assertEqual(5, select_package(4))
        self.assertEqual(5, select_package(5))
        self.assertEqual(10, select_package(6))
        self.assertEqual(30, select_package(21))
        self.assertEqual(40, select_package(40))

    def test_select_saturates_at_largest(self):
        self.assertEqual(40, select_package(41))
        self.assertEqual(40, select_package(1000))

    def test_prices(self):
        self.assertEqual(750_000, package_price(5))
        self.assertEqual(3_960_000, package_price(40))
        with self.assertRaises(KeyError):
            package_price(7)

    def test_sizes_ascending(self):
        sizes = package_sizes()
        self.assertEqual([5, 10, 15, 20, 30, 40], sizes)
        self.assertEqual(sizes, [p["kw"] for p in catalog_packages()])
        self.assertEqual(625, catalog_packages()[0]["monthly_generation"])


if __name__ == "__main__":
    unittest.main()
