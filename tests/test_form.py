"""Tests for input parsing, result formatting and form submission."""

import unittest

from unit_converter.config import MESSAGES
from unit_converter.errors import EmptyInput, IncompatibleCategories, InvalidNumber, OutOfRange
from unit_converter.form import format_result, parse_value, submit
from unit_converter.models import Unit


class TestParseValue(unittest.TestCase):
    def test_plain_numbers(self):
        self.assertEqual(parse_value("42"), 42.0)
        self.assertEqual(parse_value("-3.5"), -3.5)
        self.assertEqual(parse_value("1e3"), 1000.0)

    def test_surrounding_whitespace_is_trimmed(self):
        self.assertEqual(parse_value("  7.25\n"), 7.25)

    def test_empty(self):
        for text in ("", "   ", "\t", None):
            with self.assertRaises(EmptyInput):
                parse_value(text)

    def test_invalid(self):
        for text in ("abc", "1.2.3", "12abc", "--1", "1,5"):
            with self.assertRaises(InvalidNumber):
                parse_value(text)

    def test_non_finite_is_invalid(self):
        for text in ("nan", "inf", "-Infinity"):
            with self.assertRaises(InvalidNumber):
                parse_value(text)

    def test_invalid_number_keeps_text(self):
        with self.assertRaises(InvalidNumber) as ctx:
            parse_value("abc")
        self.assertEqual(ctx.exception.text, "abc")


class TestFormatResult(unittest.TestCase):
    def test_two_decimals(self):
        self.assertEqual(format_result(0.0833333), "0.08")
        self.assertEqual(format_result(212.0), "212.00")
        self.assertEqual(format_result(63359.84251968504), "63359.84")

    def test_rounds_half_away_from_zero(self):
        self.assertEqual(format_result(0.125), "0.13")
        self.assertEqual(format_result(-1.005), "-1.01")

    def test_custom_decimals(self):
        self.assertEqual(format_result(2.5, decimals=0), "3")
        self.assertEqual(format_result(1 / 3, decimals=4), "0.3333")

    def test_large_values_are_not_in_exponent_form(self):
        self.assertEqual(format_result(1e20), "100000000000000000000.00")

    def test_negative_decimals_rejected(self):
        with self.assertRaises(ValueError):
            format_result(1.0, decimals=-1)

    def test_non_finite_rejected(self):
        for value in (float("inf"), float("-inf"), float("nan")):
            with self.assertRaises(ValueError):
                format_result(value)


class TestSubmit(unittest.TestCase):
    def test_success(self):
        result = submit(" 12 ", Unit.INCH, Unit.FOOT)
        self.assertTrue(result.ok)
        self.assertEqual(result.text, "1.00")
        self.assertAlmostEqual(result.value, 1.0)
        self.assertIsNone(result.notification)
        self.assertEqual(result.request.value, 12.0)

    def test_accepts_unit_names(self):
        result = submit("100", "Celsius", "Fahrenheit")
        self.assertEqual(result.text, "212.00")

    def test_empty_reported_before_incompatible(self):
        result = submit("", Unit.INCH, Unit.POUND)
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, EmptyInput)
        self.assertEqual(result.notification, MESSAGES["empty_input"])

    def test_invalid_reported_before_incompatible(self):
        result = submit("abc", Unit.INCH, Unit.POUND)
        self.assertIsInstance(result.error, InvalidNumber)
        self.assertEqual(result.notification, MESSAGES["invalid_number"])

    def test_incompatible(self):
        result = submit("1", Unit.INCH, Unit.POUND)
        self.assertIsInstance(result.error, IncompatibleCategories)
        self.assertEqual(result.notification, MESSAGES["incompatible_categories"])
        self.assertIsNone(result.text)
        self.assertIsNone(result.value)

    def test_overflowing_result_is_reported(self):
        result = submit("1e306", Unit.MILE, Unit.INCH)
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, OutOfRange)
        self.assertEqual(result.notification, MESSAGES["out_of_range"])
        self.assertIsNone(result.text)

    def test_decimals_override(self):
        result = submit("1", Unit.INCH, Unit.FOOT, decimals=5)
        self.assertEqual(result.text, "0.08333")


if __name__ == "__main__":
    unittest.main()
