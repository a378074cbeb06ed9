# topmark:header:start
#
#   project      : HydraTag
#   file         : cmd_common.py
#   file_relpath : src/hydratag/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by HydraTag commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from hydratag.cli.errors import HydratagConfigError
from hydratag.config.logging import get_logger
from hydratag.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hydratag.cli.console_api import ConsoleLike
    from hydratag.config.logging import HydratagLogger
    from hydratag.config.model import Config
    from hydratag.rewriter.dialects import Dialect

logger: HydratagLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (0 when not set)."""
    return int(ctx.obj.get("verbosity_level", 0))


def build_config(
    *,
    anchor: Path | None,
    no_config: bool,
    config_paths: Sequence[str],
    dialect: Dialect | None = None,
    max_depth: int | None = None,
    include_patterns: Sequence[str] = (),
    exclude_patterns: Sequence[str] = (),
) -> Config:
    """Merge all configuration layers and the command line overrides.

    Args:
        anchor (Path | None): Start of upward config discovery (CWD if None).
        no_config (bool): Skip discovered config files.
        config_paths (Sequence[str]): Explicit ``--config`` files.
        dialect (Dialect | None): ``--dialect`` override.
        max_depth (int | None): ``--max-depth`` override.
        include_patterns (Sequence[str]): ``--include`` patterns.
        exclude_patterns (Sequence[str]): ``--exclude`` patterns.

    Returns:
        Config: The frozen effective configuration.

    Raises:
        HydratagConfigError: If the merged configuration is invalid.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        anchor=anchor,
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    try:
        draft.apply_overrides(
            dialect=dialect,
            max_depth=max_depth,
            include_patterns=include_patterns,
            exclude_patterns=exclude_patterns,
        )
        config: Config = draft.freeze()
    except ValueError as exc:
        raise HydratagConfigError(str(exc)) from exc
    logger.debug("Effective config: %s", config)
    return config
