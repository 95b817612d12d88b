# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``$NAME`` / ``${NAME}`` substitution."""

from __future__ import annotations

import os
import re
from typing import Callable, Mapping, Optional

from dotenvkit.lines import KEY_PATTERN

# Read-only view of the process environment used as the expansion fallback.
Lookup = Callable[[str], Optional[str]]

_VAR_RE = re.compile(rf"\$\{{({KEY_PATTERN})\}}|\$({KEY_PATTERN})")


def references(value: str) -> list[str]:
    """Return the variable names referenced by *value*, in order of appearance."""
    return [m.group(1) or m.group(2) for m in _VAR_RE.finditer(value)]


def expand_variables(
    value: str,
    known: Mapping[str, str],
    lookup: Lookup | None = None,
) -> str:
    """Replace every reference in *value* in one left-to-right pass.

    Names resolve from *known* (entries parsed so far), then *lookup*
    (default ``os.environ.get``), then to the empty string.  Substituted
    text is not scanned again, so ``A=$A`` cannot loop.
    """
    if lookup is None:
        lookup = os.environ.get

    def _resolve(m: re.Match[str]) -> str:
        name = m.group(1) or m.group(2)
        if name in known:
            return known[name]
        found = lookup(name)
        return found if found is not None else ""

    return _VAR_RE.sub(_resolve, value)
