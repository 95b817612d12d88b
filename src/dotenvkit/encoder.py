# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Serialize a mapping back to .env text."""

from __future__ import annotations

from typing import Mapping

# Any of these forces double quotes.
_SPECIAL_CHARS = frozenset(" \t\n\r\"'\\#$")


def needs_quoting(value: str) -> bool:
    """Return True if *value* must be written inside double quotes."""
    if not value:
        return True
    return any(c in _SPECIAL_CHARS for c in value)


def escape_value(value: str) -> str:
    """Escape *value* for a double-quoted token (backslash first)."""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


def format_line(key: str, value: str) -> str:
    """Format one ``KEY=value`` line, quoting the value when needed."""
    if not needs_quoting(value):
        return f"{key}={value}"
    return f'{key}="{escape_value(value)}"'


def marshal(env: Mapping[str, str]) -> str:
    """Return *env* as .env text: sorted keys, newline separated, no trailing newline."""
    return "\n".join(format_line(key, env[key]) for key in sorted(env))
