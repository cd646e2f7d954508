from __future__ import annotations

import re

from b64d.lib.patterns import alphabet, formats, pattern

from .. import TestBase


class RegexTextBase(TestBase):

    def assertMatches(self, p: formats, _string: str):
        for string in (_string, _string.encode('latin1')):
            kind = type(string).__name__
            self.assertTrue(p.fullmatch(string),
                msg=F'The string "{string}" did not match the pattern {p.name} as {kind}')
            self.assertListEqual([string], p.findall(string),
                msg=F'The string "{string}" not recovered by pattern {p.name} as {kind}')


class TestFormats(RegexTextBase):

    def test_b64_padded(self):
        self.assertMatches(formats.b64, 'aGVsbG8gd29ybGQ=')
        self.assertMatches(formats.b64, 'YQ==')

    def test_b64_minimum_length(self):
        self.assertMatches(formats.b64, 'abcd')
        self.assertListEqual(formats.b64.findall(B'abc'), [])
        self.assertListEqual(formats.b64.findall(B'abc=='), [])

    def test_b64_padding_is_limited_to_two(self):
        self.assertListEqual(formats.b64.findall(B'abcd==='), [B'abcd=='])

    def test_b64_excludes_urlsafe_characters(self):
        self.assertListEqual(formats.b64.findall(B'aGVsbG8td29ybGQ'), [B'aGVsbG8', B'td29ybGQ'])

    def test_b64u_excludes_standard_characters(self):
        self.assertMatches(formats.b64u, 'aGVsbG8td29ybGQ')
        self.assertListEqual(formats.b64u.findall(B'ab+cdef/ghij'), [B'cdef', B'ghij'])

    def test_greedy_non_overlapping_left_to_right(self):
        self.assertListEqual(
            formats.b64.findall(B'x=aaaa==bbbb cccccccc!dddd'),
            [B'aaaa==', B'bbbb', B'cccccccc', B'dddd'])

    def test_str_and_bin_patterns_agree(self):
        line = 'user=aGVsbG8gd29ybGQ=&id=5'
        self.assertListEqual(
            [m.encode('ascii') for m in formats.b64.findall(line)],
            formats.b64.findall(line.encode('ascii')))


class TestPatternObjects(TestBase):

    def test_alphabet_bounds(self):
        self.assertEqual(alphabet('[a-z]').str_pattern, '(?:[a-z])+')
        self.assertEqual(alphabet('[a-z]', lower=0).str_pattern, '(?:[a-z])*')
        self.assertEqual(alphabet('[a-z]', suffix='=?', lower=3).str_pattern, '(?:[a-z]){3,}=?')

    def test_flags_apply_to_both_variants(self):
        p = pattern('ab+', re.IGNORECASE)
        self.assertListEqual(p.findall('xABBy'), ['ABB'])
        self.assertListEqual(p.findall(B'xABBy'), [B'ABB'])

    def test_fullmatch_dispatches_on_type(self):
        p = alphabet('[0-9]', lower=2)
        self.assertIsNotNone(p.fullmatch('123'))
        self.assertIsNotNone(p.fullmatch(B'123'))
        self.assertIsNone(p.fullmatch(B'1'))
