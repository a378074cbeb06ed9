# topmark:header:start
#
#   project      : HydraTag
#   file         : __init__.py
#   file_relpath : src/hydratag/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for HydraTag.

Layered TOML configuration (packaged defaults, discovered ``hydratag.toml`` /
``pyproject.toml`` files, explicit ``--config`` files and command line
overrides) merged into a frozen `Config`.
"""

from __future__ import annotations

from hydratag.config.model import Config, MutableConfig

__all__ = ["Config", "MutableConfig"]
