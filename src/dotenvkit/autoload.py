# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Load .env into ``os.environ`` as a side effect of import.

Usage::

    import dotenvkit.autoload  # noqa: F401

Uses the same file/config resolution as :func:`dotenvkit.load_dotenv`.  A
missing or malformed .env (or .dotenvkit.toml) is ignored so importing never fails.
"""

from __future__ import annotations

import contextlib

from dotenvkit.sdk import load_dotenv

with contextlib.suppress(ValueError, OSError):
    load_dotenv()
