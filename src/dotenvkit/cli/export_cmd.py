# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotenvkit export`` command."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from dotenvkit.cli import HAS_YAML, _load_values, cli, common_options, console
from dotenvkit.encoder import marshal

if HAS_YAML:
    import yaml


@cli.command("export")
@click.option(
    "--format", "fmt",
    type=click.Choice(["dotenv", "unix", "win", "json", "yaml"]),
    default="dotenv",
    help="Output format: dotenv (default, KEY=value), unix (export KEY=value), win (PowerShell), json, yaml.",
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False),
    default=None,
    help="Output file path (default: stdout).",
)
@common_options
def export(ctx: click.Context, fmt: str, output: str | None) -> None:
    """Export the merged, expanded variables to stdout or a file.

    Default format is dotenv (sorted KEY=value, quoted where needed) so the
    output can be read back by any dotenv parser.  Use --format unix for
    shell sourcing: eval "$(dotenvkit export --format unix)".  Use
    --format win for PowerShell: dotenvkit export --format win | iex.
    """
    pairs = _load_values(ctx)
    text = _render(pairs, fmt)

    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text + "\n" if text else "", encoding="utf-8")
        console.print(f"[green]Exported {len(pairs)} variable(s) to {output}[/green]")
    elif text:
        click.echo(text)


def _render(pairs: dict[str, str], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(dict(sorted(pairs.items())), indent=2)
    if fmt == "yaml":
        if not HAS_YAML:
            raise click.ClickException("PyYAML is not installed. Install with: pip install pyyaml")
        return yaml.safe_dump(pairs, default_flow_style=False, sort_keys=True).rstrip("\n")
    if fmt == "dotenv":
        return marshal(pairs)
    return "\n".join(_format_export_lines(pairs, fmt))


def _shell_escape(value: str) -> str:
    """Escape for Unix sh: single-quote wrapped, internal ' -> '\\''."""
    if not value or any(c in value for c in " \t\n'\"\\$`!#&|;(){}<>*?~"):
        return "'" + value.replace("'", "'\\''") + "'"
    return value


def _powershell_escape(value: str) -> str:
    """Escape for PowerShell single-quoted string: ' -> ''."""
    return value.replace("'", "''")


def _format_export_lines(pairs: dict[str, str], fmt: str) -> list[str]:
    lines: list[str] = []
    for key, value in sorted(pairs.items()):
        if fmt == "unix":
            lines.append(f"export {key}={_shell_escape(value)}")
        else:
            lines.append(f"$env:{key} = '{_powershell_escape(value)}'")
    return lines
