"""Tests for the tabular unit catalog."""

import unittest

import pandas as pd

from unit_converter.catalog import catalog_frame


class TestCatalogFrame(unittest.TestCase):
    def test_one_row_per_unit(self):
        df = catalog_frame()
        self.assertEqual(len(df), 10)
        self.assertEqual(list(df.columns), ["unit", "category", "base_unit", "factor"])

    def test_length_factors(self):
        df = catalog_frame().set_index("unit")
        self.assertEqual(df.loc["Yard", "factor"], 0.9144)
        self.assertEqual(df.loc["Yard", "base_unit"], "meter")

    def test_temperature_has_no_factor(self):
        df = catalog_frame()
        temps = df[df["category"] == "Temperature"]
        self.assertEqual(list(temps["unit"]), ["Celsius", "Fahrenheit", "Kelvin"])
        self.assertTrue(temps["factor"].isna().all())
        self.assertTrue(pd.isna(temps["base_unit"]).all())


if __name__ == "__main__":
    unittest.main()
