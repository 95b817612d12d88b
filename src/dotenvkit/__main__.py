# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the dotenvkit CLI (run via ``dotenvkit``, ``denv``, or ``python -m dotenvkit``)."""

from __future__ import annotations

import sys


def main() -> None:
    """Run the CLI."""
    try:
        from dotenvkit.cli import cli
    except ImportError:
        sys.stderr.write("dotenvkit CLI dependencies missing. Install with: pip install dotenvkit\n")
        sys.exit(1)
    cli()


if __name__ == "__main__":
    main()
