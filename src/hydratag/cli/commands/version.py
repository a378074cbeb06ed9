# topmark:header:start
#
#   project      : HydraTag
#   file         : version.py
#   file_relpath : src/hydratag/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HydraTag `version` command.

Prints the HydraTag version installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hydratag.cli.cmd_common import get_console, get_effective_verbosity
from hydratag.constants import HYDRATAG_VERSION

if TYPE_CHECKING:
    from hydratag.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of HydraTag.",
)
def version_command() -> None:
    """Show the current version of HydraTag."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("HydraTag version:", bold=True, underline=True))
        console.print(f"    {console.styled(HYDRATAG_VERSION, bold=True)}")
    else:
        console.print(console.styled(HYDRATAG_VERSION, bold=True))
