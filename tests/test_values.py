"""Tests for value decoding."""

from __future__ import annotations

from dotenvkit.values import decode_value, quote_style, unescape_double_quoted


def test_empty_value():
    assert decode_value("") == ""


def test_unquoted_value_is_trimmed_only():
    assert decode_value("  plain\\nvalue  ") == "plain\\nvalue"


def test_double_quotes_stripped():
    assert decode_value('"quoted value"') == "quoted value"


def test_single_quotes_stripped():
    assert decode_value("'single quoted'") == "single quoted"


def test_empty_quotes():
    assert decode_value('""') == ""
    assert decode_value("''") == ""


def test_lone_quote_is_not_a_pair():
    assert decode_value('"') == '"'


def test_mismatched_quotes_are_literal():
    assert decode_value("\"abc'") == "\"abc'"


def test_double_quoted_escapes():
    assert decode_value(r'"line1\nline2"') == "line1\nline2"
    assert decode_value(r'"tab\there"') == "tab\there"
    assert decode_value(r'"cr\rhere"') == "cr\rhere"
    assert decode_value(r'"say \"hello\""') == 'say "hello"'
    assert decode_value(r'"back\\slash"') == "back\\slash"
    assert decode_value(r'"it\'s"') == "it's"


def test_single_quoted_has_no_escapes():
    assert decode_value(r"'no\nexpansion'") == r"no\nexpansion"


def test_unknown_escape_is_preserved():
    assert unescape_double_quoted(r"a\qb") == r"a\qb"


def test_trailing_backslash_is_kept():
    assert unescape_double_quoted("abc\\") == "abc\\"


def test_escaped_backslash_then_n():
    assert unescape_double_quoted(r"\\n") == "\\n"


def test_quote_style():
    assert quote_style('"x"') == '"'
    assert quote_style("'x'") == "'"
    assert quote_style("x") is None
    assert quote_style("'") is None
