# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""dotenvkit CLI -- inspect, edit and run commands with .env files.

The CLI is split into per-command modules under this package.  The ``cli``
click group, shared helpers (``console``, ``common_options``, ``_load_values``,
etc.) live here so every command module can import them.
"""

from __future__ import annotations

import functools
import os

import click
from rich.console import Console

from dotenvkit import __version__
from dotenvkit.config import load_config, split_file_list
from dotenvkit.env_file import parse_env_file
from dotenvkit.errors import DotenvError
from dotenvkit.parser import Parser

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _get_parser(ctx: click.Context, expand: bool | None = None) -> Parser:
    """Return a parser configured from ctx.obj (expansion falls back to os.environ)."""
    return Parser(
        expand=ctx.obj["expand"] if expand is None else expand,
        literal_single_quotes=ctx.obj["literal_single_quotes"],
        lookup=os.environ.get,
    )


def _load_values(ctx: click.Context, expand: bool | None = None) -> dict[str, str]:
    """Parse and merge every configured env file; later files win."""
    parser = _get_parser(ctx, expand)
    merged: dict[str, str] = {}
    for path in ctx.obj["files"]:
        try:
            values = parse_env_file(path, parser)
        except DotenvError as e:
            raise click.ClickException(str(e))
        if ctx.obj["verbose"]:
            console.print(f"[dim]Read {len(values)} variable(s) from {path}[/dim]")
        merged.update(values)
    return merged


def _mask(value: str) -> str:
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


def _merge_common(
    ctx: click.Context,
    files: tuple[str, ...],
    no_expand: bool,
) -> None:
    """Merge subcommand-level --file/--no-expand into ctx.obj."""
    if files:
        ctx.obj["files"] = split_file_list(files)
    if no_expand:
        ctx.obj["expand"] = False


def common_options(f: object) -> object:
    """Add --file and --no-expand to a command."""
    @functools.wraps(f)
    @click.option(
        "--file", "-f", "files", multiple=True,
        help="Env file(s) to read; repeat or comma separate. Later files win.",
    )
    @click.option("--no-expand", is_flag=True, help="Do not expand $NAME / ${NAME} references.")
    @click.pass_context
    def wrapper(
        ctx: click.Context,
        files: tuple[str, ...],
        no_expand: bool,
        *args: object,
        **kwargs: object,
    ) -> object:
        _merge_common(ctx, files, no_expand)
        return f(ctx, *args, **kwargs)
    return wrapper


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--file", "-f", "files", multiple=True,
    help="Env file(s) to read; repeat or comma separate (default: DOTENVKIT_FILES or config, else .env).",
)
@click.option("--overload", "-o", is_flag=True, help="Override existing environment variables.")
@click.option("--no-expand", is_flag=True, help="Do not expand $NAME / ${NAME} references.")
@click.option(
    "--literal-single-quotes", is_flag=True,
    help="Treat single-quoted values as fully literal (no expansion).",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[str, ...],
    overload: bool,
    no_expand: bool,
    literal_single_quotes: bool,
    verbose: bool,
) -> None:
    """Load, inspect and write .env files."""
    try:
        cfg = load_config().with_environ()
    except ValueError as e:
        raise click.UsageError(f"Invalid config: {e}")
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["files"] = split_file_list(files) if files else list(cfg.env_files)
    ctx.obj["override"] = overload or cfg.override
    ctx.obj["expand"] = cfg.expand and not no_expand
    ctx.obj["literal_single_quotes"] = literal_single_quotes or cfg.literal_single_quotes
    ctx.obj["verbose"] = verbose
    if verbose and cfg.config_path is not None:
        console.print(f"[dim]Using config {cfg.config_path}[/dim]")


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from dotenvkit.cli import (  # noqa: E402, F401
    run_cmd,
    crud_cmd,
    list_cmd,
    export_cmd,
    check_cmd,
)
