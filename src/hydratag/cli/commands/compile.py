# topmark:header:start
#
#   project      : HydraTag
#   file         : compile.py
#   file_relpath : src/hydratag/cli/commands/compile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HydraTag `compile` command.

Compiles component tags in template files into placeholder markup.

Input modes:
  * Paths mode (default): files, directories (recursive) and globs, filtered by
    the configured include and exclude patterns.
  * Content-on-STDIN: ``-`` as the sole PATH reads template source from STDIN
    and writes the compiled text to STDOUT.

Files are only rewritten with ``--apply``; otherwise the command reports what
would change and exits with `ExitCode.WOULD_CHANGE`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from hydratag.cli.cli_types import EnumChoiceParam
from hydratag.cli.cmd_common import build_config, get_console, get_effective_verbosity
from hydratag.cli.errors import (
    HydratagEncodingError,
    HydratagFileNotFoundError,
    HydratagPipelineError,
    HydratagUsageError,
)
from hydratag.cli.exit_codes import ExitCode
from hydratag.cli.options import CONTEXT_SETTINGS, common_config_options
from hydratag.config.logging import get_logger
from hydratag.file_resolver import resolve_file_list
from hydratag.processing import FileOutcome, count_outcomes, process_files
from hydratag.rewriter.compiler import TagRewriter
from hydratag.rewriter.dialects import Dialect
from hydratag.rewriter.errors import NestingDepthError
from hydratag.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from hydratag.cli.console_api import ConsoleLike
    from hydratag.config.logging import HydratagLogger
    from hydratag.config.model import Config
    from hydratag.processing import FileResult

logger: HydratagLogger = get_logger(__name__)

# Failure outcomes in order of precedence for the exit status
_ERROR_EXIT_CODES: dict[FileOutcome, ExitCode] = {
    FileOutcome.NOT_FOUND: ExitCode.FILE_NOT_FOUND,
    FileOutcome.UNICODE_DECODE_ERROR: ExitCode.ENCODING_ERROR,
    FileOutcome.UNREADABLE: ExitCode.IO_ERROR,
    FileOutcome.WRITE_FAILED: ExitCode.IO_ERROR,
    FileOutcome.NESTING_TOO_DEEP: ExitCode.PIPELINE_ERROR,
}


def _compile_stdin(console: ConsoleLike, config: Config) -> None:
    try:
        source: str = click.get_text_stream("stdin", encoding="utf-8").read()
    except UnicodeDecodeError as exc:
        raise HydratagEncodingError(f"<stdin>: not valid UTF-8 ({exc.reason})") from exc
    try:
        compiled: str = TagRewriter(config).compile(source)
    except NestingDepthError as exc:
        raise HydratagPipelineError(f"<stdin>: {exc}") from exc
    console.print(compiled, nl=False)


def _render_summary(console: ConsoleLike, results: list[FileResult]) -> None:
    counts = count_outcomes(results)
    console.print(console.styled(f"Summary ({len(results)} file(s)):", bold=True))
    for outcome in FileOutcome:
        n = counts.get(outcome, 0)
        if n:
            console.print(f"  {outcome.color(outcome.value)}: {n}")


def _render_per_file(
    console: ConsoleLike, results: list[FileResult], *, vlevel: int, apply_changes: bool
) -> None:
    if vlevel < 0:
        return
    for r in results:
        if r.outcome is FileOutcome.UNCHANGED and vlevel == 0:
            continue
        line = f"{r.path}: {r.outcome.color(r.outcome.value)}"
        if r.message and vlevel > 0:
            line += f" ({r.message})"
        console.print(line)
    if not apply_changes and any(r.outcome is FileOutcome.WOULD_CHANGE for r in results):
        console.print("Run `hydratag compile --apply` to write these changes.")


def _render_diffs(console: ConsoleLike, results: list[FileResult]) -> None:
    for r in results:
        if r.result is None or not r.result.changed:
            continue
        patch = unified_diff(r.result.original, r.result.compiled, path=str(r.path))
        console.print(render_patch(patch), nl=False)


def _exit_code_for(results: list[FileResult], *, apply_changes: bool) -> ExitCode:
    outcomes = {r.outcome for r in results}
    for outcome, code in _ERROR_EXIT_CODES.items():
        if outcome in outcomes:
            return code
    if not apply_changes and FileOutcome.WOULD_CHANGE in outcomes:
        return ExitCode.WOULD_CHANGE
    return ExitCode.SUCCESS


@click.command(
    name="compile",
    help="Compile component tags into placeholder markup (dry run; use --apply to write).",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  hydratag compile templates/              report templates that would change
  hydratag compile --apply templates/      rewrite them in place
  hydratag compile --diff page.html        show what would change
  hydratag compile - < page.html           compile STDIN to STDOUT
""",
)
@click.argument("paths", nargs=-1, type=str)
@click.option("--apply", "apply_changes", is_flag=True, help="Write changes to files.")
@click.option("--diff", is_flag=True, help="Show a unified diff per changed file.")
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the compiled text of every file instead of reporting.",
)
@click.option(
    "--summary",
    "summary_mode",
    is_flag=True,
    help="Show outcome counts instead of per-file details.",
)
@click.option(
    "--dialect",
    type=EnumChoiceParam(Dialect),
    default=None,
    help=f"Host template dialect ({', '.join(d.value for d in Dialect)}).",
)
@click.option(
    "--max-depth",
    "max_depth",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum component nesting depth.",
)
@click.option(
    "--include",
    "include_patterns",
    multiple=True,
    metavar="GLOB",
    help="Only compile files matching these patterns (replaces configured includes).",
)
@click.option(
    "--exclude",
    "exclude_patterns",
    multiple=True,
    metavar="GLOB",
    help="Skip files matching these patterns (added to configured excludes).",
)
@common_config_options
def compile_command(
    *,
    paths: tuple[str, ...],
    apply_changes: bool,
    diff: bool,
    to_stdout: bool,
    summary_mode: bool,
    dialect: Dialect | None,
    max_depth: int | None,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Compile component tags in template files.

    Exit Status:
        SUCCESS (0): Nothing to change, or all changes were written.
        WOULD_CHANGE (2): Dry run found templates that would be rewritten.
        USAGE_ERROR (64): Invalid invocation (no paths, ``-`` mixed with paths,
            conflicting flags).
        ENCODING_ERROR (65): A template is not valid UTF-8.
        FILE_NOT_FOUND (66): An input path does not exist.
        PIPELINE_ERROR (70): Components nest deeper than the configured limit.
        IO_ERROR (74): A template could not be read or written.
        CONFIG_ERROR (78): The effective configuration is invalid.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    if not paths:
        raise HydratagUsageError("compile: no input paths given (use '-' to read STDIN).")
    stdin_mode: bool = "-" in paths
    if stdin_mode and len(paths) > 1:
        raise HydratagUsageError("compile: '-' (STDIN) cannot be combined with other paths.")
    if to_stdout and apply_changes:
        raise HydratagUsageError("compile: --stdout and --apply are mutually exclusive.")

    anchor: Path | None = None if stdin_mode else Path(paths[0])
    config: Config = build_config(
        anchor=anchor,
        no_config=no_config,
        config_paths=config_paths,
        dialect=dialect,
        max_depth=max_depth,
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
    )

    if stdin_mode:
        _compile_stdin(console, config)
        return

    missing: list[str] = [p for p in paths if "*" not in p and not Path(p).exists()]
    file_list: list[Path] = resolve_file_list(paths, config)
    if not file_list:
        if missing:
            raise HydratagFileNotFoundError(f"No such file or directory: {', '.join(missing)}")
        console.warn("No template files to compile.")
        return

    if vlevel > 0:
        console.print(
            console.styled(
                f"Compiling {len(file_list)} file(s) ({config.dialect.value} dialect)",
                bold=True,
            )
        )

    results: list[FileResult] = process_files(
        TagRewriter(config), file_list, apply=apply_changes
    )

    if to_stdout:
        for r in results:
            if r.result is not None:
                console.print(r.result.compiled, nl=False)
    elif summary_mode:
        _render_summary(console, results)
    else:
        _render_per_file(console, results, vlevel=vlevel, apply_changes=apply_changes)

    if diff and not to_stdout:
        _render_diffs(console, results)

    if apply_changes and vlevel >= 0:
        written = sum(1 for r in results if r.outcome is FileOutcome.CHANGED)
        msg = f"Compiled {written} file(s)." if written else "No changes to apply."
        console.print(console.styled(msg, fg="green", bold=True))

    if missing:
        raise HydratagFileNotFoundError(f"No such file or directory: {', '.join(missing)}")

    code: ExitCode = _exit_code_for(results, apply_changes=apply_changes or to_stdout)
    if code is not ExitCode.SUCCESS:
        ctx.exit(code)
