# topmark:header:start
#
#   project      : HydraTag
#   file         : errors.py
#   file_relpath : src/hydratag/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the HydraTag CLI.

Raise these from commands to stop with a standardized message and exit code.
They print through the project console when one is present in the Click
context, and fall back to Click's default display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from hydratag.cli.exit_codes import ExitCode


class HydratagCliError(click.ClickException):
    """Base class for all HydraTag CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        obj: Any = getattr(ctx, "obj", None) if ctx is not None else None
        console = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class HydratagUsageError(HydratagCliError):
    """Invalid command line invocation (bad flag combination, missing inputs)."""

    exit_code = ExitCode.USAGE_ERROR


class HydratagConfigError(HydratagCliError):
    """Invalid effective configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class HydratagFileNotFoundError(HydratagCliError):
    """An input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class HydratagEncodingError(HydratagCliError):
    """A template could not be decoded as UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class HydratagPipelineError(HydratagCliError):
    """A template could not be compiled."""

    exit_code = ExitCode.PIPELINE_ERROR
