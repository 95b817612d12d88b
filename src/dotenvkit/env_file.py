# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Read and write .env files.

Files are parsed independently and merged in order; later files take
precedence for duplicate keys.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from dotenvkit.encoder import marshal
from dotenvkit.errors import ReadError
from dotenvkit.parser import Parser

DEFAULT_ENV_FILE = ".env"


def parse_env_file(path: str | Path, parser: Parser | None = None) -> dict[str, str]:
    """Read a .env file and return an ordered dict of key-value pairs."""
    parser = parser or Parser()
    path = Path(path)
    try:
        handle = path.open(encoding="utf-8")
    except OSError as e:
        raise ReadError(str(path), f"failed to open file {path}: {e}") from e
    with handle:
        return parser.parse(handle, source=str(path))


def read_env_files(*paths: str | Path, parser: Parser | None = None) -> dict[str, str]:
    """Parse each file (default ``.env``) and merge them, later files winning."""
    if not paths:
        paths = (DEFAULT_ENV_FILE,)
    result: dict[str, str] = {}
    for path in paths:
        result.update(parse_env_file(path, parser))
    return result


def write_env_file(env: Mapping[str, str], path: str | Path) -> None:
    """Serialize *env* to *path*, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(marshal(env) + "\n", encoding="utf-8")
