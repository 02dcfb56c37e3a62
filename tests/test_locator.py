# -*- coding: ascii -*-
"""Tests for failure localization and messages."""

import unittest

from mixedscripts.locator import CharacterInfo, describe, format_message, locate
from mixedscripts.predicate import build_predicate


class TestLocate(unittest.TestCase):

    def setUp(self):
        self.predicate = build_predicate(['Latin', 'Common'])

    def test_conforming_text(self):
        self.assertIsNone(locate('all fine here', self.predicate))

    def test_column_is_one_based(self):
        self.assertEqual(locate('\u043e', self.predicate), (1, '\u043e'))
        self.assertEqual(locate('abc \u043e', self.predicate), (5, '\u043e'))

    def test_column_counts_supplementary_characters_once(self):
        self.assertEqual(locate('\U0001F600\U0001F600\u03b1', self.predicate), (3, '\u03b1'))


class TestDescribe(unittest.TestCase):

    def test_named_character(self):
        self.assertEqual(describe('\u043e'), CharacterInfo('Cyrillic', 'CYRILLIC SMALL LETTER O'))
        self.assertEqual(describe('\u03b1'), CharacterInfo('Greek', 'GREEK SMALL LETTER ALPHA'))

    def test_unnamed_character(self):
        self.assertEqual(describe('\t'), CharacterInfo('Common', 'NO NAME'))

    def test_shared_character_lists_scripts(self):
        info = describe('\u0964')
        self.assertEqual(info.name, 'DEVANAGARI DANDA')
        self.assertIn('Devanagari', info.script.split(', '))
        self.assertIn('Bengali', info.script.split(', '))


class TestFormatMessage(unittest.TestCase):

    def test_exact_wording(self):
        self.assertEqual(
            format_message('lib/Foo.pm', 12, 3, 'Cyrillic', 'CYRILLIC SMALL LETTER O'),
            'Unexpected Cyrillic character CYRILLIC SMALL LETTER O on line 12 character 3 in lib/Foo.pm',
        )


if __name__ == '__main__':
    unittest.main()
