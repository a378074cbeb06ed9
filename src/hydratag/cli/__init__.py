# topmark:header:start
#
#   project      : HydraTag
#   file         : __init__.py
#   file_relpath : src/hydratag/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HydraTag CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    hydratag = "hydratag.cli.main:cli"

All subcommands live in ``hydratag.cli.commands``.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
