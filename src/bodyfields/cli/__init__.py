# topmark:header:start
#
#   project      : BodyFields
#   file         : __init__.py
#   file_relpath : src/bodyfields/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BodyFields CLI package.

This package groups all Click command definitions and supporting utilities
for the BodyFields command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        bodyfields = "bodyfields.cli.main:cli"

All subcommands live in `bodyfields.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
