# topmark:header:start
#
#   project      : HydraTag
#   file         : keys.py
#   file_relpath : src/hydratag/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for HydraTag configuration.

These names form the external configuration schema as it appears in
``hydratag.toml`` and in ``[tool.hydratag]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by HydraTag configuration.

    The ordering mirrors ``hydratag-default.toml``.
    """

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [rewriter]
    SECTION_REWRITER: Final[str] = "rewriter"

    KEY_DIALECT: Final[str] = "dialect"
    KEY_MAX_DEPTH: Final[str] = "max_depth"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_INCLUDE: Final[str] = "include"
    KEY_EXCLUDE: Final[str] = "exclude"
