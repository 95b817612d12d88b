# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Typed access to environment variables.

Unset and empty variables are treated the same: both fall back to the
default.  Values that do not convert also fall back, silently.
"""

from __future__ import annotations

import os
from typing import Mapping

from dotenvkit.errors import MissingVariableError

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})


def _raw(key: str, environ: Mapping[str, str] | None) -> str:
    env = os.environ if environ is None else environ
    return env.get(key) or ""


def get_int(key: str, default: int, environ: Mapping[str, str] | None = None) -> int:
    value = _raw(key, environ)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_float(key: str, default: float, environ: Mapping[str, str] | None = None) -> float:
    value = _raw(key, environ)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def get_bool(key: str, default: bool, environ: Mapping[str, str] | None = None) -> bool:
    """Recognizes true/false, 1/0, yes/no, on/off (case insensitive)."""
    value = _raw(key, environ).strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


def get_required(key: str, environ: Mapping[str, str] | None = None) -> str:
    """Return the variable or raise :class:`MissingVariableError`."""
    value = _raw(key, environ)
    if not value:
        raise MissingVariableError(key)
    return value


def get_with_default(key: str, default: str, environ: Mapping[str, str] | None = None) -> str:
    return _raw(key, environ) or default
