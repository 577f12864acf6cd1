"""Tests for rime_scheme.core.scheme_text — quoting and the lenient line reader."""

import os

from rime_scheme.core.scheme_text import format_line, parse_scheme_lines, to_yaml_string, trim_quotes

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'fixtures')
WEASEL_SNIPPET = os.path.join(FIXTURES_DIR, 'weasel.yaml')


class TestToYamlString:
    def test_escapes_single_quotes(self):
        assert to_yaml_string("This is a 'test' string.") == "'This is a ''test'' string.'"

    def test_plain(self):
        assert to_yaml_string('Mint') == "'Mint'"

    def test_empty(self):
        assert to_yaml_string('') == "''"


class TestTrimQuotes:
    def test_single_quotes(self):
        assert trim_quotes("'This is a test string.'") == 'This is a test string.'

    def test_double_quotes(self):
        assert trim_quotes('"This is a test string."') == 'This is a test string.'

    def test_whitespace_first(self):
        assert trim_quotes("  'x'  ") == 'x'

    def test_only_one_quote_each_side(self):
        assert trim_quotes("''x''") == "'x'"

    def test_unmatched_quotes_still_trimmed(self):
        assert trim_quotes('\'abc"') == 'abc'

    def test_default(self):
        assert trim_quotes() == ''


class TestFormatLine:
    def test_key_value(self):
        assert format_line('text_color', '0xff000000') == 'text_color: 0xff000000'


class TestParseSchemeLines:
    def test_key_values(self):
        assert parse_scheme_lines('a: 1\nb: 2') == {'a': '1', 'b': '2'}

    def test_comment_stripped(self):
        assert parse_scheme_lines('text_color: 0xff000000 # black') == {'text_color': '0xff000000'}

    def test_hash_colour_is_lost(self):
        # '#' always starts a comment, so a raw #rrggbbaa value vanishes
        assert parse_scheme_lines('text_color: #000000ff') == {}

    def test_needs_exactly_two_parts(self):
        assert parse_scheme_lines('a: b: c\nlonely\nempty:') == {}

    def test_crlf(self):
        assert parse_scheme_lines('a: 1\r\nb: 2\r\n') == {'a': '1', 'b': '2'}

    def test_later_duplicate_wins(self):
        assert parse_scheme_lines('a: 1\na: 2') == {'a': '2'}

    def test_quotes_trimmed(self):
        assert parse_scheme_lines("name: 'Ink'") == {'name': 'Ink'}


class TestFixtureSnippet:
    def test_fixture(self):
        with open(WEASEL_SNIPPET, encoding='utf-8') as f:
            result = parse_scheme_lines(f.read())
        assert result['name'] == 'Ink Paper'
        assert result['author'] == 'Jane <jane@example.com>'
        assert result['hilited_candidate_back_color'] == '0xffc47e3a'
        assert result['color_format'] == 'argb'
        assert result['unknown_key'] == '0xff000000'
