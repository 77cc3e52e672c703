"""Tests for the React Native scanner."""

import re

import pytest

from i18n_grader.scanners import SCANNERS, get_scanner
from i18n_grader.scanners.base import ScanPattern, line_number
from i18n_grader.scanners.react_native import ReactNativeScanner


SCREEN_SOURCE = """import i18n from '../i18n';

export const Screen = () => (
  <View>
    <Text>{i18n.t('screen.title')}</Text>
    <Button title={i18n.t('screen.button')} />
    <Text>Hardcoded Text</Text>
  </View>
);
"""


class TestLineNumber:
    """Test cases for line_number."""

    def test_first_line(self):
        """Offsets before the first newline are on line 1."""
        assert line_number('abc\ndef', 0) == 1
        assert line_number('abc\ndef', 2) == 1

    def test_later_lines(self):
        """Each preceding newline adds one."""
        assert line_number('a\nb\nc', 2) == 2
        assert line_number('a\nb\nc', 4) == 3

    def test_offset_of_newline(self):
        """A newline belongs to the line it ends."""
        assert line_number('a\nb', 1) == 1


class TestScanPattern:
    """Test cases for ScanPattern."""

    def test_compiles_on_creation(self):
        """Patterns should be compiled once."""
        pattern = ScanPattern(pattern=r'x(\d+)', description='numbers')
        assert pattern.compiled.search('x42').group(1) == '42'

    def test_invalid_pattern_raises(self):
        """Invalid regexes should fail at construction."""
        with pytest.raises(re.error):
            ScanPattern(pattern=r'(unclosed', description='bad')


class TestReactNativeScanner:
    """Test cases for ReactNativeScanner."""

    def test_finds_usages_with_lines(self):
        """Should capture keys and their 1-based line numbers."""
        result = ReactNativeScanner().scan(SCREEN_SOURCE)

        assert [(u.key, u.line) for u in result.usages] == [
            ('screen.title', 5),
            ('screen.button', 6),
        ]

    def test_finds_hardcoded_candidates(self):
        """Should capture JSX text between tags."""
        result = ReactNativeScanner().scan(SCREEN_SOURCE)

        assert [(c.text, c.line) for c in result.candidates] == [
            ('Hardcoded Text', 7),
        ]

    @pytest.mark.parametrize('source', [
        "i18n.t('a.b')",
        'i18n.t("a.b")',
        'i18n.t(`a.b`)',
    ])
    def test_quote_styles(self, source):
        """Single, double and backtick quotes should all be recognized."""
        result = ReactNativeScanner().scan(source)
        assert [u.key for u in result.usages] == ['a.b']

    def test_multiple_usages_on_one_line(self):
        """Every call on a line should be reported."""
        result = ReactNativeScanner().scan("const s = i18n.t('a') + i18n.t('b');")
        assert [(u.key, u.line) for u in result.usages] == [('a', 1), ('b', 1)]

    def test_call_with_options_not_matched(self):
        """Only single-argument calls are recognized."""
        result = ReactNativeScanner().scan("i18n.t('items.count', { count: 2 })")
        assert result.usages == []

    def test_dynamic_key_not_matched(self):
        """Non-literal keys are not recognized."""
        result = ReactNativeScanner().scan("i18n.t(keyName)")
        assert result.usages == []

    def test_bracket_key_captured_verbatim(self):
        """Bracket notation keys should be captured as written."""
        result = ReactNativeScanner().scan("i18n.t('array[0].title')")
        assert result.usages[0].key == 'array[0].title'

    def test_expression_children_ignored(self):
        """JSX expressions are not text candidates."""
        result = ReactNativeScanner().scan('<Text>{value}</Text>')
        assert result.candidates == []

    def test_candidate_is_stripped(self):
        """Candidates should be trimmed of surrounding whitespace."""
        result = ReactNativeScanner().scan('<Text>   Padded text   </Text>')
        assert result.candidates[0].text == 'Padded text'

    def test_multiline_text_reports_opening_line(self):
        """Text spanning lines is reported at the line of the opening '>'."""
        result = ReactNativeScanner().scan('<Text>\n  Welcome back\n</Text>')

        assert len(result.candidates) == 1
        assert result.candidates[0].text == 'Welcome back'
        assert result.candidates[0].line == 1

    def test_scan_is_empty(self):
        """Plain code should produce an empty result."""
        result = ReactNativeScanner().scan('const x = 1;\n')
        assert result.is_empty
        assert not ReactNativeScanner().scan(SCREEN_SOURCE).is_empty


class TestGetScanner:
    """Test cases for the scanner registry."""

    def test_known_scanner(self):
        """Registered names should build a scanner."""
        assert 'react-native' in SCANNERS
        assert isinstance(get_scanner('react-native'), ReactNativeScanner)

    def test_unknown_scanner(self):
        """Unknown names should raise ValueError."""
        with pytest.raises(ValueError, match="Unknown scanner"):
            get_scanner('swift')
