# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exceptions raised by dotenvkit.

Every error derives from :class:`DotenvError`, which is a ``ValueError`` so
callers that already guard config loading with ``except ValueError`` keep
working.
"""

from __future__ import annotations


class DotenvError(ValueError):
    """Base class for all dotenvkit errors."""


class MalformedLineError(DotenvError):
    """A line matched neither ``[export] KEY=value`` nor ``KEY: value``."""

    def __init__(self, lineno: int, line: str) -> None:
        self.lineno = lineno
        self.line = line
        super().__init__(f"parse error on line {lineno}: invalid line format: {line.strip()!r}")


class ReadError(DotenvError):
    """The input could not be read (missing file, bad encoding, broken stream)."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(message)


class MissingVariableError(DotenvError, KeyError):
    """A required environment variable is unset or empty."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"required environment variable {key} is not set")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])
