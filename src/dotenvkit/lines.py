# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Split a single .env line into key and raw value.

Handles:
  - blank lines and ``#`` comments (skipped by the caller)
  - ``export KEY=VALUE`` prefix
  - ``KEY=VALUE`` and YAML-style ``KEY: VALUE``
  - inline ``#`` comments outside of quotes
"""

from __future__ import annotations

import re

KEY_PATTERN = r"[A-Za-z_][A-Za-z0-9_]*"

_EXPORT_RE = re.compile(
    rf"""
    ^\s*
    export\s+           # export prefix
    ({KEY_PATTERN})     # key
    \s*[=:]\s*          # separator
    (.*)                # raw value (decoded later)
    $
    """,
    re.VERBOSE,
)

_LINE_RE = re.compile(
    rf"""
    ^\s*
    ({KEY_PATTERN})     # key
    \s*[=:]\s*          # separator
    (.*)                # raw value (decoded later)
    $
    """,
    re.VERBOSE,
)

_QUOTES = ("'", '"')


def is_skippable(line: str) -> bool:
    """Return True for blank lines and full-line comments."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def strip_inline_comment(line: str) -> str:
    """Drop a trailing ``# comment`` that is not inside quotes.

    Quote state is either unquoted or quoted with the opening character
    remembered.  A matching quote preceded by a backslash does not close
    the quote (only the immediately preceding character is checked).
    """
    quote: str | None = None
    for i, char in enumerate(line):
        if quote is None:
            if char in _QUOTES:
                quote = char
            elif char == "#":
                return line[:i].strip()
        elif char == quote and line[i - 1] != "\\":
            quote = None
    return line


def classify_line(line: str) -> tuple[str, str] | None:
    """Return ``(key, raw_value)`` for an assignment line, else None.

    The export form is tried first so that ``export KEY=1`` yields ``KEY``.
    """
    m = _EXPORT_RE.match(line) or _LINE_RE.match(line)
    if m is None:
        return None
    return m.group(1), m.group(2).strip()
