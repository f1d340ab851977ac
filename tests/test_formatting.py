import datetime as dt
import unittest

from fetchers.formatting import date_from_elapsed, date_from_short, format_range_remuneration


class ElapsedDateTests(unittest.TestCase):
    def setUp(self):
        self.today = dt.date(2024, 3, 10)

    def test_days_and_weeks(self):
        self.assertEqual(date_from_elapsed("3 days", self.today), "2024-03-07")
        self.assertEqual(date_from_elapsed("1 week", self.today), "2024-03-03")
        self.assertEqual(date_from_elapsed("2 weeks", self.today), "2024-02-25")

    def test_hours(self):
        afternoon = dt.datetime(2024, 3, 10, 15, 0)
        self.assertEqual(date_from_elapsed("5 hours", afternoon), "2024-03-10")
        self.assertEqual(date_from_elapsed("20 hours", afternoon), "2024-03-09")

    def test_months(self):
        self.assertEqual(date_from_elapsed("1 month", self.today), "2024-02-08")
        self.assertEqual(date_from_elapsed("2 months", self.today), "2024-01-10")

    def test_unrecognised_is_today(self):
        for text in ("today", "just now", "a few days", "3 fortnights"):
            with self.subTest(text=text):
                self.assertEqual(date_from_elapsed(text, self.today), "2024-03-10")


class ShortDateTests(unittest.TestCase):
    def setUp(self):
        self.today = dt.date(2024, 3, 10)

    def test_units(self):
        self.assertEqual(date_from_short("1d", self.today), "2024-03-09")
        self.assertEqual(date_from_short("2w", self.today), "2024-02-25")
        self.assertEqual(date_from_short("1m", self.today), "2024-02-09")

    def test_today(self):
        self.assertEqual(date_from_short("today", self.today), "2024-03-10")
        self.assertEqual(date_from_short("", self.today), "2024-03-10")


class RemunerationTests(unittest.TestCase):
    def test_money_bag_range(self):
        self.assertEqual(
            format_range_remuneration("\N{MONEY BAG} 6K - 7.5K", strip="\N{MONEY BAG}", lowercase=True),
            "$6k - $7.5k",
        )

    def test_dollar_range(self):
        self.assertEqual(format_range_remuneration("$ 90k-140k"), "$90k - $140k")

    def test_not_a_range(self):
        self.assertEqual(format_range_remuneration("$120k"), "")
        self.assertEqual(format_range_remuneration("Competitive"), "")


if __name__ == "__main__":
    unittest.main()
