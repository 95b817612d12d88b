# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotenvkit check`` command."""

from __future__ import annotations

import os

import click
from rich.markup import escape

from dotenvkit.cli import _get_parser, cli, common_options, console
from dotenvkit.errors import DotenvError
from dotenvkit.expand import references


def _unresolved(ctx: click.Context, path: str) -> list[tuple[int, str, str]]:
    """Return ``(lineno, key, name)`` for references that would expand to ""."""
    parser = _get_parser(ctx, expand=False)
    literal_single = ctx.obj["literal_single_quotes"]
    missing: list[tuple[int, str, str]] = []
    seen: set[str] = set()
    with open(path, encoding="utf-8") as handle:
        for lineno, key, value, quote in parser.entries(handle, source=path):
            # Single-quoted values are never expanded in literal mode.
            if not (literal_single and quote == "'"):
                for name in dict.fromkeys(references(value)):
                    if name not in seen and os.environ.get(name) is None:
                        missing.append((lineno, key, name))
            seen.add(key)
    return missing


@cli.command()
@click.option("--strict", is_flag=True, help="Also fail on references that resolve to nothing.")
@common_options
def check(ctx: click.Context, strict: bool) -> None:
    """Validate the env files.

    Reports the first malformed line of each file.  With --strict, also
    reports $NAME references that are neither defined on an earlier line
    nor set in the environment (forward references expand to "").
    """
    parser = _get_parser(ctx)
    failed = False
    for path in ctx.obj["files"]:
        try:
            with open(path, encoding="utf-8") as handle:
                count = len(parser.parse(handle, source=path))
        except OSError as e:
            console.print(
                f"[red]{escape(path)}: cannot read file: {escape(str(e.strerror or e))}[/red]",
                soft_wrap=True,
            )
            failed = True
            continue
        except DotenvError as e:
            console.print(f"[red]{escape(path)}: {escape(str(e))}[/red]", soft_wrap=True)
            failed = True
            continue

        if strict and ctx.obj["expand"]:
            missing = _unresolved(ctx, path)
            for lineno, key, name in missing:
                console.print(
                    f"[yellow]{escape(path)}:{lineno}: {key} references undefined ${name}[/yellow]",
                    soft_wrap=True,
                )
            if missing:
                failed = True
                continue
        console.print(f"[green]{escape(path)}: OK ({count} variable(s))[/green]", soft_wrap=True)

    if failed:
        ctx.exit(1)
