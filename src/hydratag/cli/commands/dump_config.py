# topmark:header:start
#
#   project      : HydraTag
#   file         : dump_config.py
#   file_relpath : src/hydratag/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HydraTag `dump-config` command.

Prints the effective configuration as TOML after merging the packaged
defaults, discovered and explicit config files. The config sources are listed
as TOML comments above the document, so the output can be saved as a
``hydratag.toml`` (or, with ``--pyproject``, pasted into ``pyproject.toml``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hydratag.cli.cmd_common import build_config, get_console
from hydratag.cli.options import CONTEXT_SETTINGS, common_config_options
from hydratag.config.io import nest_toml_under_section, to_toml
from hydratag.config.logging import get_logger
from hydratag.constants import PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from hydratag.cli.console_api import ConsoleLike
    from hydratag.config.logging import HydratagLogger
    from hydratag.config.model import Config

logger: HydratagLogger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Print the effective merged HydraTag configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--pyproject",
    "as_pyproject",
    is_flag=True,
    help="Nest the output under [tool.hydratag] for use in pyproject.toml.",
)
@common_config_options
def dump_config_command(
    *,
    as_pyproject: bool,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Print the effective merged configuration as TOML."""
    console: ConsoleLike = get_console(click.get_current_context())

    config: Config = build_config(anchor=None, no_config=no_config, config_paths=config_paths)
    logger.trace("Config to dump: %s", config)

    document: str = to_toml(config.to_toml_dict())
    if as_pyproject:
        document = nest_toml_under_section(document, f"tool.{PYPROJECT_TOOL_SECTION}")

    console.print("# Effective HydraTag configuration")
    for source in config.config_files:
        console.print(f"# source: {source}")
    console.print()
    console.print(document, nl=False)
