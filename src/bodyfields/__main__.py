# topmark:header:start
#
#   project      : BodyFields
#   file         : __main__.py
#   file_relpath : src/bodyfields/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running BodyFields via ``python -m bodyfields``.

It delegates directly to `bodyfields.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how BodyFields is launched.

Examples:
    Run the GitHub Action entry point::

        python -m bodyfields action
"""

from __future__ import annotations

from bodyfields.cli.main import cli

if __name__ == "__main__":
    cli()
