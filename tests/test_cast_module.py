"""
Test file for the value cast helpers.
"""

import datetime
import unittest
from cast_module import (
    to_string, to_trimmed_string, to_int, to_float,
    to_datetime, to_date, to_bool, to_bytes
)
from dbf_module import DBF_ZERO_DATE, DBF_ZERO_DATETIME


class TestCastModule(unittest.TestCase):
    """Test cases for cast_module."""

    def test_to_string(self):
        self.assertEqual(to_string('Hêllo!'), 'Hêllo!')
        self.assertEqual(to_string(123.456), '')

    def test_to_trimmed_string(self):
        self.assertEqual(to_trimmed_string('Hêllo!      '), 'Hêllo!')
        self.assertEqual(to_trimmed_string(123.456), '')

    def test_to_int(self):
        self.assertEqual(to_int(123456), 123456)
        self.assertEqual(to_int('123.456'), 0)
        self.assertEqual(to_int(True), 0)

    def test_to_float(self):
        self.assertEqual(to_float(123.456), 123.456)
        self.assertEqual(to_float('123.456'), 0.0)

    def test_to_datetime(self):
        now = datetime.datetime.now(datetime.timezone.utc)
        self.assertEqual(to_datetime(now), now)
        self.assertEqual(to_datetime(datetime.date(2015, 2, 3)),
                         datetime.datetime(2015, 2, 3, tzinfo=datetime.timezone.utc))
        self.assertEqual(to_datetime('123.456'), DBF_ZERO_DATETIME)

    def test_to_date(self):
        self.assertEqual(to_date(datetime.date(2015, 2, 3)), datetime.date(2015, 2, 3))
        self.assertEqual(to_date(datetime.datetime(2015, 2, 3, 10, 0)), datetime.date(2015, 2, 3))
        self.assertEqual(to_date(None), DBF_ZERO_DATE)

    def test_to_bool(self):
        self.assertIs(to_bool(True), True)
        self.assertIs(to_bool(33), False)

    def test_to_bytes(self):
        self.assertEqual(to_bytes(b'\x00\x01'), b'\x00\x01')
        self.assertEqual(to_bytes('abc'), b'')


if __name__ == '__main__':
    unittest.main()
