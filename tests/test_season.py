import unittest
from datetime import date

from duellog.utils.season import (
    get_current_month_range,
    get_current_season_code,
    get_recent_season_codes,
    get_season_code_from_date,
    get_season_info,
    get_season_label,
    season_number_to_year_month,
    year_month_to_season_number,
)


class TestSeasonNumbers(unittest.TestCase):
    def test_base_season(self):
        self.assertEqual(season_number_to_year_month(32), (2024, 8))
        self.assertEqual(year_month_to_season_number(2024, 8), 32)

    def test_across_year_boundaries(self):
        self.assertEqual(season_number_to_year_month(48), (2025, 12))
        self.assertEqual(season_number_to_year_month(49), (2026, 1))
        self.assertEqual(season_number_to_year_month(50), (2026, 2))
        self.assertEqual(season_number_to_year_month(20), (2023, 8))
        self.assertEqual(season_number_to_year_month(27), (2024, 3))
        self.assertEqual(season_number_to_year_month(1), (2022, 1))
        self.assertEqual(season_number_to_year_month(0), (2021, 12))

    def test_round_trip(self):
        for n in range(-30, 120):
            year, month = season_number_to_year_month(n)
            self.assertTrue(1 <= month <= 12)
            self.assertEqual(year_month_to_season_number(year, month), n)


class TestSeasonInfo(unittest.TestCase):
    def test_bounds(self):
        info = get_season_info("S32")
        self.assertEqual(info.start, "2024-08-01")
        self.assertEqual(info.end, "2024-08-31")
        self.assertEqual((info.year, info.month, info.season_number), (2024, 8, 32))

    def test_month_lengths(self):
        self.assertEqual(get_season_info("S38").end, "2025-02-28")
        self.assertEqual(get_season_info("S27").end, "2024-03-31")
        self.assertEqual(get_season_info("S26").end, "2024-02-29")
        self.assertEqual(get_season_info("S46").end, "2025-10-31")

    def test_far_future_season(self):
        info = get_season_info("S100000")
        self.assertEqual((info.year, info.month), (10355, 4))
        self.assertEqual(info.start, "10355-04-01")
        self.assertEqual(info.end, "10355-04-30")

    def test_season_zero(self):
        info = get_season_info("S0")
        self.assertEqual((info.start, info.end), ("2021-12-01", "2021-12-31"))

    def test_case_and_whitespace(self):
        info = get_season_info(" s40 ")
        self.assertIsNotNone(info)
        self.assertEqual(info.code, "S40")
        self.assertEqual(info.start, "2025-04-01")

    def test_invalid_codes(self):
        for code in ["", "S", "X1", "S-1", "40", "S4a", "SS40"]:
            self.assertIsNone(get_season_info(code), code)

    def test_label(self):
        self.assertEqual(get_season_label("S49"), "S49 (2026/01)")
        self.assertEqual(get_season_label("bad"), "bad")

    def test_to_dict(self):
        self.assertEqual(get_season_info("S49").to_dict(), {
            "code": "S49",
            "seasonNumber": 49,
            "year": 2026,
            "month": 1,
            "start": "2026-01-01",
            "end": "2026-01-31",
        })


class TestSeasonCodes(unittest.TestCase):
    def test_recent_codes(self):
        self.assertEqual(get_recent_season_codes(3, "S40"), ["S40", "S39", "S38"])

    def test_recent_codes_empty(self):
        self.assertEqual(get_recent_season_codes(0, "S40"), [])
        self.assertEqual(get_recent_season_codes(-2, "S40"), [])
        self.assertEqual(get_recent_season_codes(3, "nope"), [])

    def test_recent_codes_default_to_current(self):
        codes = get_recent_season_codes(2)
        self.assertEqual(len(codes), 2)
        self.assertEqual(codes[0], get_current_season_code())

    def test_current_season(self):
        self.assertEqual(get_current_season_code(date(2026, 1, 15)), "S49")
        self.assertEqual(get_current_season_code(date(2024, 8, 1)), "S32")

    def test_code_from_date(self):
        self.assertEqual(get_season_code_from_date("2025-12-31"), "S48")
        self.assertEqual(get_season_code_from_date("2026-01-01T08:00:00Z"), "S49")
        self.assertEqual(get_season_code_from_date("2023-08-10"), "S20")

    def test_current_month_range(self):
        self.assertEqual(get_current_month_range(date(2024, 2, 10)), ("2024-02-01", "2024-02-29"))


if __name__ == "__main__":
    unittest.main()
