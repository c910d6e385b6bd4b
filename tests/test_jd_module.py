"""
Test file for the Julian day conversion used by DateTime (T) fields.
"""

import unittest
from jd_module import jd_to_ymd, ymd_to_jd


class TestJDModule(unittest.TestCase):
    """Test cases for jd_to_ymd / ymd_to_jd."""

    KNOWN_DATES = [
        (2453738, (2006, 1, 2)),
        (2460131, (2023, 7, 5)),
        (2440588, (1970, 1, 1)),
        (2451544, (1999, 12, 31)),
        (2487763, (2099, 2, 28)),
    ]

    def test_jd_to_ymd(self):
        for jd, expected in self.KNOWN_DATES:
            with self.subTest(jd=jd):
                self.assertEqual(jd_to_ymd(jd), expected)

    def test_ymd_to_jd(self):
        for jd, (year, month, day) in self.KNOWN_DATES:
            with self.subTest(jd=jd):
                self.assertEqual(ymd_to_jd(year, month, day), jd)

    def test_leap_day(self):
        jd = ymd_to_jd(2000, 2, 29)
        self.assertEqual(jd_to_ymd(jd), (2000, 2, 29))
        self.assertEqual(jd_to_ymd(jd + 1), (2000, 3, 1))

    def test_zero_is_before_year_one(self):
        """Julian day 0 is in 4713 BC, which datetime cannot represent."""
        year, _, _ = jd_to_ymd(0)
        self.assertLess(year, 1)


if __name__ == '__main__':
    unittest.main()
