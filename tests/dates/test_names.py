"""Tests for month and weekday name tables."""

import unittest

from juliancal.dates.names import (
    Month,
    Weekday,
    month_name,
    parse_month,
    short_month_name,
    weekday_name,
)
from juliancal.errors import InvalidInputError, MeeusError


class TestMonthNames(unittest.TestCase):
    """Test cases for month name lookups."""

    def test_short_month_name(self):
        self.assertEqual(short_month_name(1), "Jan")
        self.assertEqual(short_month_name(Month.OCT), "Oct")
        self.assertEqual(short_month_name(12), "Dec")

    def test_short_month_name_unknown(self):
        for month in (0, 13, -3):
            with self.subTest(month=month):
                self.assertEqual(short_month_name(month), "UNK")

    def test_month_name_returns_name(self):
        self.assertEqual(month_name(1), "January")
        self.assertEqual(month_name(Month.OCT), "October")
        self.assertEqual(month_name(12), "December")

    def test_month_name_out_of_range(self):
        with self.assertRaises(InvalidInputError) as ctx:
            month_name(13)
        self.assertEqual(ctx.exception.kind, MeeusError.INVALID_INPUT)

    def test_parse_month(self):
        self.assertEqual(parse_month("10"), Month.OCT)
        self.assertEqual(parse_month(2), Month.FEB)
        self.assertEqual(parse_month("oct"), Month.OCT)
        self.assertEqual(parse_month("September"), Month.SEP)
        self.assertEqual(parse_month(" DEC "), Month.DEC)

    def test_parse_month_invalid(self):
        for value in ("0", "13", "Octember", ""):
            with self.subTest(value=value):
                with self.assertRaises(InvalidInputError):
                    parse_month(value)


class TestWeekdayNames(unittest.TestCase):
    """Test cases for weekday names."""

    def test_weekday_name(self):
        self.assertEqual(weekday_name(Weekday.SUN), "Sunday")
        self.assertEqual(weekday_name(3), "Wednesday")
        self.assertEqual(weekday_name(Weekday.SAT), "Saturday")

    def test_weekday_name_out_of_range(self):
        with self.assertRaises(InvalidInputError):
            weekday_name(7)


if __name__ == "__main__":
    unittest.main()
