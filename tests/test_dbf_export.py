"""
Test file for exporting records as dicts and JSON.
"""

import datetime
import io
import json
import unittest
from dbf_errors import DBFEOFError, DBFFieldDecodeError
from dbf_module import (
    dbf_stream_open, dbf_file_close, dbf_file_goto, dbf_file_recno,
    dbf_file_read_record_at, dbf_record_to_map,
    dbf_file_record_to_map, dbf_file_record_to_json
)
from decoder_module import UTF8Decoder
from vfp_fixture import (
    build_sample_table, build_single_field_table, enc_double, SAMPLE_RECORD_1_JSON
)


class TestDBFExport(unittest.TestCase):
    """Test cases for record_to_map / record_to_json."""

    def setUp(self):
        dbf_bytes, fpt_bytes = build_sample_table()
        self.dbf = dbf_stream_open(io.BytesIO(dbf_bytes), io.BytesIO(fpt_bytes), UTF8Decoder())

    def tearDown(self):
        dbf_file_close(self.dbf)

    def test_record_to_map(self):
        values = dbf_record_to_map(self.dbf, dbf_file_read_record_at(self.dbf, 1))
        self.assertEqual(len(values), 13)
        self.assertEqual(values['NAME'], 'Beta' + ' ' * 16)
        self.assertEqual(values['AMOUNT'], 123456789.99)
        self.assertEqual(values['BORN'], datetime.date(2015, 2, 3))
        self.assertEqual(values['ATTACH'], b'\x00\xff')

    def test_file_record_to_map_current(self):
        dbf_file_goto(self.dbf, 2)
        values = dbf_file_record_to_map(self.dbf)
        self.assertEqual(values['NAME'].strip(), 'Gamma')

    def test_file_record_to_map_recno(self):
        dbf_file_goto(self.dbf, 2)
        values = dbf_file_record_to_map(self.dbf, 0)
        self.assertEqual(values['NAME'].strip(), 'Alpha')
        self.assertEqual(dbf_file_recno(self.dbf), 2)

    def test_file_record_to_map_eof(self):
        with self.assertRaises(DBFEOFError):
            dbf_file_record_to_map(self.dbf, 4)

    def test_record_to_json_trimmed(self):
        self.assertEqual(dbf_file_record_to_json(self.dbf, 1, trim_spaces=True), SAMPLE_RECORD_1_JSON)

    def test_record_to_json_untrimmed(self):
        values = json.loads(dbf_file_record_to_json(self.dbf, 1))
        self.assertEqual(values['NAME'], 'Beta' + ' ' * 16)
        self.assertEqual(values['NOTES'], 'Second note\r\n')

    def test_record_to_json_keys_sorted(self):
        text = dbf_file_record_to_json(self.dbf, 0, trim_spaces=True)
        keys = list(json.loads(text).keys())
        self.assertEqual(keys, sorted(keys))

    def test_record_to_json_zero_values(self):
        values = json.loads(dbf_file_record_to_json(self.dbf, 2, trim_spaces=True))
        self.assertEqual(values['BORN'], '0001-01-01')
        self.assertEqual(values['UPDATED'], '0001-01-01T00:00:00.000Z')
        self.assertEqual(values['NOTES'], '')
        self.assertEqual(values['CODE'], -17)

    def test_record_to_json_non_ascii(self):
        text = dbf_file_record_to_json(self.dbf, 3, trim_spaces=True)
        self.assertIn('"NOTES":"Fourth é"', text)

    def test_record_to_json_decode_error(self):
        data = build_single_field_table('N', 4, b'x1y2')
        dbf = dbf_stream_open(io.BytesIO(data), None, UTF8Decoder())
        try:
            with self.assertRaises(DBFFieldDecodeError) as ctx:
                dbf_file_record_to_json(dbf, 0)
            self.assertIn('VAL', str(ctx.exception))
        finally:
            dbf_file_close(dbf)

    def test_record_to_json_rejects_nan(self):
        data = build_single_field_table('B', 8, enc_double(float('nan')))
        dbf = dbf_stream_open(io.BytesIO(data), None, UTF8Decoder())
        try:
            with self.assertRaises(ValueError):
                dbf_file_record_to_json(dbf, 0)
        finally:
            dbf_file_close(dbf)


if __name__ == '__main__':
    unittest.main()
