# -*- coding: ascii -*-
"""Tests for report tables."""

import os
import unittest

from mixedscripts.batch import FileOutcome
from mixedscripts.io_utils import read_table, write_table
from mixedscripts.scanner import Violation

from tests import TempDirTestCase


def sample_records():
    violation = Violation(3, 7, '\u043e', 'Cyrillic', 'CYRILLIC SMALL LETTER O')
    return [
        FileOutcome('a.py', 'pass').to_record(),
        FileOutcome('b.py', 'fail', violation.message('b.py'), violation).to_record(),
        FileOutcome('c.txt', 'error', 'Cannot read c.txt: invalid UTF-8 at byte offset 0').to_record(),
    ]


class TestReportTables(TempDirTestCase):

    def test_csv_round_trip(self):
        path = os.path.join(self.test_dir, 'nested', 'report.csv')
        write_table(sample_records(), path)
        rows = read_table(path)
        self.assertEqual([r['status'] for r in rows], ['pass', 'fail', 'error'])
        self.assertEqual(rows[1]['line'], 3)
        self.assertEqual(rows[1]['column'], 7)
        self.assertEqual(rows[1]['script'], 'Cyrillic')
        self.assertEqual(rows[1]['codepoint'], 'U+043E')

    def test_json_is_ascii(self):
        path = os.path.join(self.test_dir, 'report.json')
        write_table(sample_records(), path)
        with open(path, 'rb') as f:
            f.read().decode('ascii')
        rows = read_table(path)
        self.assertEqual(rows[1]['character_name'], 'CYRILLIC SMALL LETTER O')

    def test_empty_report_has_header(self):
        path = os.path.join(self.test_dir, 'empty.csv')
        write_table([], path)
        with open(path, encoding='utf-8') as f:
            self.assertEqual(f.readline().strip(), 'path,status,line,column,codepoint,script,character_name,message')

    def test_unsupported_format(self):
        with self.assertRaises(ValueError):
            write_table(sample_records(), os.path.join(self.test_dir, 'report.xlsx'))

    def test_missing_file(self):
        self.assertEqual(read_table(os.path.join(self.test_dir, 'absent.csv')), [])


if __name__ == '__main__':
    unittest.main()
