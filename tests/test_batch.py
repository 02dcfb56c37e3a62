# -*- coding: ascii -*-
"""Tests for batch scanning and file selection."""

import os
import unittest
from pathlib import Path

from mixedscripts.batch import FileOutcome, scan_paths, scan_tree, summarize
from mixedscripts.errors import UnknownScriptError
from mixedscripts.sources import default_selector, iter_source_files, make_selector

from tests import TempDirTestCase

CYRILLIC_O = '\u043e'


class BatchTreeTestCase(TempDirTestCase):
    """Scratch tree with one file per outcome."""

    def setUp(self):
        super().setUp()
        self.write('good.py', 'print("hello")\n')
        self.write('docs/bad.md', 'Look: g' + CYRILLIC_O + CYRILLIC_O + 'gle\n')
        self.write('docs/ok.rst', '=for mixedscripts Cyrillic,Common\n' + CYRILLIC_O + '\n')
        self.write('tool', '#!/bin/sh\necho ' + CYRILLIC_O + '\n')
        self.write('NOTES', CYRILLIC_O + '\n')
        self.write('logo.png', data=b'\x89PNG\r\n\x1a\n\xff')
        self.write('broken.txt', data=b'\xff\xfe\n')
        self.write('directive.yaml', 'a: 1 ## mixedscripts Klingon\n')
        self.write('.git/config', CYRILLIC_O + '\n')
        self.write('pkg.egg-info/PKG-INFO', CYRILLIC_O + '\n')

    def rel(self, path):
        return Path(os.path.relpath(path, self.test_dir)).as_posix()


class TestSources(BatchTreeTestCase):

    def test_default_selection(self):
        found = [self.rel(p) for p in iter_source_files([self.test_dir])]
        self.assertEqual(found, ['broken.txt', 'directive.yaml', 'good.py', 'tool',
                                 'docs/bad.md', 'docs/ok.rst'])

    def test_explicit_file_always_selected(self):
        notes = os.path.join(self.test_dir, 'NOTES')
        self.assertEqual(list(iter_source_files([notes])), [Path(notes)])

    def test_custom_extensions(self):
        selector = make_selector(['md', '.RST'])
        found = [self.rel(p) for p in iter_source_files([self.test_dir], selector)]
        self.assertEqual(found, ['tool', 'docs/bad.md', 'docs/ok.rst'])

    def test_custom_exclude_dirs(self):
        found = [self.rel(p) for p in iter_source_files([self.test_dir], exclude_dirs={'docs'})]
        self.assertNotIn('docs/bad.md', found)
        self.assertIn('.git/config', [self.rel(p) for p in iter_source_files(
            [self.test_dir], selector=lambda p: True, exclude_dirs=set())])

    def test_binary_never_selected(self):
        self.assertFalse(default_selector(Path(self.test_dir) / 'logo.png'))


class TestScanTree(BatchTreeTestCase):

    def statuses(self, outcomes):
        return {self.rel(o.path): o.status for o in outcomes}

    def test_outcomes(self):
        outcomes = scan_tree([self.test_dir])
        self.assertEqual(self.statuses(outcomes), {
            'broken.txt': 'error',
            'directive.yaml': 'error',
            'good.py': 'pass',
            'tool': 'fail',
            'docs/bad.md': 'fail',
            'docs/ok.rst': 'pass',
        })
        bad = [o for o in outcomes if o.path.endswith('bad.md')][0]
        self.assertEqual((bad.violation.line_number, bad.violation.column_number), (1, 8))
        self.assertTrue(bad.message.startswith('Unexpected Cyrillic character CYRILLIC SMALL LETTER O on line 1 character 8 in '))

    def test_shared_script_override(self):
        outcomes = scan_tree([self.test_dir], ['Latin', 'Cyrillic', 'Common'])
        self.assertEqual(self.statuses(outcomes)['docs/bad.md'], 'pass')

    def test_unknown_script_raised_up_front(self):
        with self.assertRaises(UnknownScriptError):
            scan_tree([self.test_dir], ['Klingon'])

    def test_workers_preserve_order(self):
        sequential = scan_tree([self.test_dir], workers=1)
        parallel = scan_tree([self.test_dir], workers=2)
        self.assertEqual([(o.path, o.status, o.message) for o in parallel],
                         [(o.path, o.status, o.message) for o in sequential])

    def test_default_root_is_cwd(self):
        cwd = os.getcwd()
        os.chdir(os.path.join(self.test_dir, 'docs'))
        try:
            outcomes = scan_tree()
        finally:
            os.chdir(cwd)
        self.assertEqual(sorted(Path(o.path).name for o in outcomes), ['bad.md', 'ok.rst'])

    def test_summarize(self):
        counts = summarize(scan_tree([self.test_dir]))
        self.assertEqual(counts, {'pass': 2, 'fail': 2, 'error': 2})


class TestFileOutcome(unittest.TestCase):

    def test_record_for_pass(self):
        record = FileOutcome('a.py', 'pass').to_record()
        self.assertEqual(record['status'], 'pass')
        self.assertIsNone(record['line'])
        self.assertIsNone(record['codepoint'])

    def test_scan_paths_empty(self):
        self.assertEqual(scan_paths([]), [])


if __name__ == '__main__':
    unittest.main()
