# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotenvkit get``, ``dotenvkit set``, ``dotenvkit delete`` commands."""

from __future__ import annotations

import re
from pathlib import Path

import click

from dotenvkit.cli import _get_parser, _load_values, cli, common_options, console
from dotenvkit.env_file import parse_env_file, write_env_file
from dotenvkit.errors import DotenvError
from dotenvkit.lines import KEY_PATTERN


def _target_file(ctx: click.Context) -> Path:
    """The first configured env file is the one that gets edited."""
    return Path(ctx.obj["files"][0])


def _read_unexpanded(ctx: click.Context, path: Path) -> dict[str, str]:
    # Keep $NAME references as written so rewriting the file does not bake them in.
    if not path.is_file():
        return {}
    try:
        return parse_env_file(path, _get_parser(ctx, expand=False))
    except DotenvError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.argument("key")
@common_options
def get(ctx: click.Context, key: str) -> None:
    """Print a single value."""
    values = _load_values(ctx)
    if key not in values:
        raise click.ClickException(f"Key '{key}' not found.")
    click.echo(values[key])


@cli.command("set")
@click.argument("key")
@click.argument("value")
@common_options
def set_key(ctx: click.Context, key: str, value: str) -> None:
    """Set a single value in the first env file (comments are not preserved)."""
    if re.fullmatch(KEY_PATTERN, key) is None:
        raise click.BadParameter(f"Invalid key name: {key}", param_hint="KEY")
    path = _target_file(ctx)
    data = _read_unexpanded(ctx, path)
    data[key] = value
    write_env_file(data, path)
    console.print(f"[green]Set {key} in {path}[/green]")


@cli.command()
@click.argument("key")
@common_options
def delete(ctx: click.Context, key: str) -> None:
    """Remove a single value from the first env file."""
    path = _target_file(ctx)
    data = _read_unexpanded(ctx, path)
    if key not in data:
        raise click.ClickException(f"Key '{key}' not found in {path}.")
    del data[key]
    write_env_file(data, path)
    console.print(f"[green]Removed {key} from {path}[/green]")
