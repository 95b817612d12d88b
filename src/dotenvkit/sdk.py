# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""SDK for loading .env files into the environment (python-dotenv style)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import MutableMapping

from dotenvkit.config import DotenvConfig, load_config
from dotenvkit.env_file import read_env_files
from dotenvkit.errors import DotenvError
from dotenvkit.parser import Parser


def _resolve_config() -> DotenvConfig:
    """Config file, then ``DOTENVKIT_*`` environment overrides (same as CLI)."""
    return load_config().with_environ()


def _resolve_paths(paths: tuple[str | Path, ...], cfg: DotenvConfig) -> tuple[str | Path, ...]:
    if paths:
        return paths
    return tuple(cfg.env_files)


def _make_parser(
    cfg: DotenvConfig,
    expand: bool | None,
    literal_single_quotes: bool | None,
    environ: MutableMapping[str, str],
) -> Parser:
    return Parser(
        expand=cfg.expand if expand is None else expand,
        literal_single_quotes=(
            cfg.literal_single_quotes if literal_single_quotes is None else literal_single_quotes
        ),
        lookup=environ.get,
    )


def apply_to_environ(
    values: dict[str, str],
    environ: MutableMapping[str, str],
    override: bool,
) -> int:
    """Copy *values* into *environ*; return how many keys were set.

    Without *override* a key is only set when it is unset or empty.
    """
    count = 0
    for key, value in values.items():
        if not override and environ.get(key):
            continue
        environ[key] = value
        count += 1
    return count


def dotenv_values(
    *paths: str | Path,
    expand: bool | None = None,
    literal_single_quotes: bool | None = None,
    environ: MutableMapping[str, str] | None = None,
) -> dict[str, str]:
    """Return the merged contents of the .env files without modifying the environment.

    Parameters
    ----------
    *paths : str or Path
        Files to read, in order; later files win.  Defaults to
        ``DOTENVKIT_FILES`` or the ``env_files`` config setting, else ``.env``.
    expand : bool, optional
        Expand ``$NAME`` references.  Defaults from config, else True.
    literal_single_quotes : bool, optional
        Do not expand single-quoted values.  Defaults from config, else False.
    environ : mapping, optional
        Environment consulted for references not defined in the file.
        Defaults to ``os.environ``.

    Returns
    -------
    dict[str, str]
        Mapping of variable name to value.
    """
    env = os.environ if environ is None else environ
    cfg = _resolve_config()
    parser = _make_parser(cfg, expand, literal_single_quotes, env)
    return read_env_files(*_resolve_paths(paths, cfg), parser=parser)


def load_dotenv(
    *paths: str | Path,
    override: bool | None = None,
    expand: bool | None = None,
    literal_single_quotes: bool | None = None,
    environ: MutableMapping[str, str] | None = None,
) -> bool:
    """Load .env files into ``os.environ`` (or *environ*).

    Parameters
    ----------
    override : bool, optional
        If True, overwrite existing keys.  If False, only set keys that are
        unset or empty.  Defaults from ``DOTENVKIT_OVERRIDE`` or config, else False.

    The remaining parameters are those of :func:`dotenv_values`.

    Returns
    -------
    bool
        True if at least one variable was set, False otherwise.

    Examples
    --------
    >>> from dotenvkit import load_dotenv
    >>> load_dotenv()  # .env, or whatever config names
    True
    >>> load_dotenv(".env", ".env.local")  # .env.local wins on duplicates
    True
    >>> load_dotenv(override=True)  # overwrite existing env vars
    True
    """
    env = os.environ if environ is None else environ
    cfg = _resolve_config()
    parser = _make_parser(cfg, expand, literal_single_quotes, env)
    values = read_env_files(*_resolve_paths(paths, cfg), parser=parser)
    resolved_override = cfg.override if override is None else override
    return apply_to_environ(values, env, resolved_override) > 0


def overload_dotenv(*paths: str | Path, **kwargs: object) -> bool:
    """:func:`load_dotenv` with ``override=True``."""
    return load_dotenv(*paths, override=True, **kwargs)  # type: ignore[arg-type]


def must_load_dotenv(*paths: str | Path, **kwargs: object) -> None:
    """Load like :func:`load_dotenv`, failing loudly for startup code.

    Any failure is raised as :class:`DotenvError` prefixed with
    ``failed to load env files``.
    """
    try:
        load_dotenv(*paths, **kwargs)  # type: ignore[arg-type]
    except (ValueError, OSError) as e:
        # ValueError covers DotenvError and invalid .dotenvkit.toml.
        raise DotenvError(f"failed to load env files: {e}") from e
