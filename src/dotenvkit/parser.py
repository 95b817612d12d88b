# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse .env content into key-value dicts.

Each non-blank, non-comment line goes through comment stripping, line
classification, value decoding and (optionally) variable expansion, in that
order.  A malformed line aborts the whole parse; no partial result is ever
returned.
"""

from __future__ import annotations

import io
from typing import Iterable, Iterator

from dotenvkit.errors import MalformedLineError, ReadError
from dotenvkit.expand import Lookup, expand_variables
from dotenvkit.lines import classify_line, is_skippable, strip_inline_comment
from dotenvkit.values import decode_value, quote_style


class Parser:
    """Configured .env parser.

    Configuration is fixed at construction and never mutated, so one
    instance can be shared between threads: every :meth:`parse` call builds
    its result in a dict of its own.

    Parameters
    ----------
    expand : bool, default True
        Substitute ``$NAME`` / ``${NAME}`` references.
    literal_single_quotes : bool, default False
        If True, single-quoted values are not expanded.  By default they are;
        single quotes only turn off escape decoding.
    lookup : callable, optional
        ``name -> value | None`` used when a reference is not defined earlier
        in the input.  Defaults to ``os.environ.get``.
    """

    def __init__(
        self,
        expand: bool = True,
        literal_single_quotes: bool = False,
        lookup: Lookup | None = None,
    ) -> None:
        self._expand = expand
        self._literal_single_quotes = literal_single_quotes
        self._lookup = lookup

    @property
    def expand(self) -> bool:
        return self._expand

    @property
    def literal_single_quotes(self) -> bool:
        return self._literal_single_quotes

    def parse(self, stream: Iterable[str], source: str = "<stream>") -> dict[str, str]:
        """Parse *stream* (a text file or any iterable of lines).

        *source* names the input in read errors.
        """
        result: dict[str, str] = {}
        for _, key, value, _ in self.entries(stream, source):
            result[key] = value
        return result

    def entries(
        self,
        stream: Iterable[str],
        source: str = "<stream>",
    ) -> Iterator[tuple[int, str, str, str | None]]:
        """Yield ``(lineno, key, value, quote)`` for every assignment line in order.

        *quote* is the quote character around the raw value, or None.  Values
        are expanded against the entries yielded before them.

        This is a streaming view: entries before a bad line have already been
        yielded when :class:`MalformedLineError` or :class:`ReadError` is
        raised.  Use :meth:`parse` for the all-or-nothing result.
        """
        known: dict[str, str] = {}
        lineno = 0
        try:
            for lineno, raw_line in enumerate(stream, start=1):
                if is_skippable(raw_line):
                    continue
                entry = self._parse_line(lineno, raw_line, known)
                if entry is None:
                    continue
                key, value, quote = entry
                known[key] = value
                yield lineno, key, value, quote
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(source, f"error reading {source} after line {lineno}: {e}") from e

    def parse_string(self, text: str) -> dict[str, str]:
        """Parse a .env formatted string."""
        # StringIO splits on "\n" only, unlike str.splitlines().
        return self.parse(io.StringIO(text))

    def _parse_line(
        self,
        lineno: int,
        raw_line: str,
        known: dict[str, str],
    ) -> tuple[str, str, str | None] | None:
        line = strip_inline_comment(raw_line.strip())
        if not line:
            return None
        parsed = classify_line(line)
        if parsed is None:
            raise MalformedLineError(lineno, raw_line.rstrip("\r\n"))
        key, raw_value = parsed
        value = decode_value(raw_value)
        if self._should_expand(raw_value):
            value = expand_variables(value, known, self._lookup)
        return key, value, quote_style(raw_value)

    def _should_expand(self, raw_value: str) -> bool:
        if not self._expand:
            return False
        if self._literal_single_quotes and quote_style(raw_value) == "'":
            return False
        return True


_DEFAULT_PARSER = Parser()


def parse(stream: Iterable[str], **options: object) -> dict[str, str]:
    """Parse a stream of .env lines.  *options* are passed to :class:`Parser`."""
    parser = Parser(**options) if options else _DEFAULT_PARSER  # type: ignore[arg-type]
    return parser.parse(stream)


def unmarshal(text: str, **options: object) -> dict[str, str]:
    """Parse a .env formatted string.  *options* are passed to :class:`Parser`."""
    parser = Parser(**options) if options else _DEFAULT_PARSER  # type: ignore[arg-type]
    return parser.parse_string(text)
