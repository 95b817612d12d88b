# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotenvkit run`` -- execute a command with .env files loaded."""

from __future__ import annotations

import os
import shutil
import subprocess

import click

from dotenvkit.cli import _load_values, cli, common_options, console
from dotenvkit.sdk import apply_to_environ

# Exit code for a command that is not on PATH (same as the shell).
EXIT_NOT_FOUND = 127


@cli.command(
    "run",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("command")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@common_options
def run(ctx: click.Context, command: str, args: tuple[str, ...]) -> None:
    """Run COMMAND with the variables from the env files added to its environment.

    Existing variables win unless --overload is given.  Exits with the
    command's exit code, 1 if the env files cannot be loaded, or 127 if the
    command is not found.

    \b
    Examples:
      dotenvkit run python app.py
      dotenvkit -f .env,.env.local run npm start
      dotenvkit -o -f .env.override run ./server
    """
    values = _load_values(ctx)
    env = dict(os.environ)
    count = apply_to_environ(values, env, override=ctx.obj["override"])
    if ctx.obj["verbose"]:
        console.print(f"[dim]Set {count} variable(s)[/dim]")

    cmd_path = shutil.which(command, path=env.get("PATH"))
    if cmd_path is None:
        console.print(f"[red]Command not found: {command}[/red]")
        ctx.exit(EXIT_NOT_FOUND)

    try:
        result = subprocess.run([cmd_path, *args], env=env)
    except OSError as e:
        raise click.ClickException(f"Failed to execute command: {e}")
    ctx.exit(result.returncode)
