# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Decode a raw value token into its logical string."""

from __future__ import annotations

_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    '"': '"',
    "'": "'",
}


def quote_style(raw: str) -> str | None:
    """Return the surrounding quote character of *raw*, or None if unquoted."""
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in ('"', "'"):
        return raw[0]
    return None


def decode_value(raw: str) -> str:
    """Strip surrounding quotes and, for double quotes only, decode escapes.

    Single-quoted values are returned verbatim.  Unquoted values are only
    trimmed; inline comments were already removed from the line.
    """
    raw = raw.strip()
    quote = quote_style(raw)
    if quote == '"':
        return unescape_double_quoted(raw[1:-1])
    if quote == "'":
        return raw[1:-1]
    return raw


def unescape_double_quoted(inner: str) -> str:
    """Decode ``\\n``, ``\\r``, ``\\t``, ``\\\\``, ``\\"`` and ``\\'``.

    Unknown escapes are kept as backslash plus character, and a trailing
    lone backslash is kept as is.
    """
    out: list[str] = []
    i = 0
    while i < len(inner):
        char = inner[i]
        if char == "\\" and i + 1 < len(inner):
            nxt = inner[i + 1]
            out.append(_ESCAPES.get(nxt, "\\" + nxt))
            i += 2
            continue
        out.append(char)
        i += 1
    return "".join(out)
