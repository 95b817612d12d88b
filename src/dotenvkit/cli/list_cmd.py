# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotenvkit list`` command."""

from __future__ import annotations

import click
from rich.table import Table

from dotenvkit.cli import _load_values, _mask, cli, common_options, console


@cli.command("list")
@click.option("--show-values", is_flag=True, help="Show values instead of masking them.")
@common_options
def list_keys(ctx: click.Context, show_values: bool) -> None:
    """List variable names with masked values."""
    values = _load_values(ctx)
    files = ", ".join(ctx.obj["files"])
    if not values:
        console.print(f"[yellow]No variables found in {files}[/yellow]")
        return
    table = Table(title=f"Variables ({files})")
    table.add_column("Key", style="white")
    table.add_column("Value" if show_values else "Value (masked)", style="dim")
    for key in sorted(values):
        value = values[key]
        if show_values:
            shown = value
        else:
            shown = _mask(value) if value else "(empty)"
        table.add_row(key, shown)
    console.print(table)
