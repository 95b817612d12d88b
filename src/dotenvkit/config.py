# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

""".dotenvkit.toml configuration loading.

Searches upward from cwd for ``.dotenvkit.toml``.  Environment variables
``DOTENVKIT_FILES`` and ``DOTENVKIT_OVERRIDE`` win over the file; CLI flags
and explicit SDK arguments win over both.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILENAME = ".dotenvkit.toml"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class DotenvConfig:
    """Resolved configuration for the current invocation."""

    env_files: list[str] = field(default_factory=lambda: [".env"])
    override: bool = False
    expand: bool = True
    literal_single_quotes: bool = False
    config_path: Path | None = None

    def with_environ(self, environ: Mapping[str, str] | None = None) -> DotenvConfig:
        """Return a copy with ``DOTENVKIT_*`` environment overrides applied."""
        env = os.environ if environ is None else environ
        env_files = list(self.env_files)
        override = self.override
        files = env.get("DOTENVKIT_FILES")
        if files:
            env_files = split_file_list([files])
        flag = env.get("DOTENVKIT_OVERRIDE")
        if flag:
            override = flag.strip().lower() in _TRUTHY
        return DotenvConfig(
            env_files=env_files,
            override=override,
            expand=self.expand,
            literal_single_quotes=self.literal_single_quotes,
            config_path=self.config_path,
        )


def split_file_list(values: list[str] | tuple[str, ...]) -> list[str]:
    """Flatten ``["a,b", " c "]`` into ``["a", "b", "c"]``."""
    out: list[str] = []
    for value in values:
        out.extend(part.strip() for part in value.split(",") if part.strip())
    return out


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.dotenvkit.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def load_config(path: Path | None = None) -> DotenvConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return DotenvConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text())
    section = raw.get("dotenvkit", {})

    env_files = section.get("env_files", [".env"])
    if isinstance(env_files, str):
        env_files = [env_files]
    if not isinstance(env_files, list) or not all(isinstance(f, str) for f in env_files):
        raise ValueError(f"{path}: dotenvkit.env_files must be a list of strings")

    return DotenvConfig(
        env_files=env_files,
        override=bool(section.get("override", False)),
        expand=bool(section.get("expand", True)),
        literal_single_quotes=bool(section.get("literal_single_quotes", False)),
        config_path=path,
    )
