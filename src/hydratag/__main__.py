# topmark:header:start
#
#   project      : HydraTag
#   file         : __main__.py
#   file_relpath : src/hydratag/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running HydraTag via ``python -m hydratag``.

Equivalent to running the ``hydratag`` console script.

Examples:
    Compile the templates below ``templates/`` in place::

        python -m hydratag compile --apply templates/
"""

from __future__ import annotations

from hydratag.cli.main import cli

if __name__ == "__main__":
    cli()
