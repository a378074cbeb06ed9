# topmark:header:start
#
#   project      : HydraTag
#   file         : diff.py
#   file_relpath : src/hydratag/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff helpers for compiled templates."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from hydratag.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hydratag.config.logging import HydratagLogger

logger: HydratagLogger = get_logger(__name__)


def unified_diff(original: str, compiled: str, *, path: str) -> str:
    """Return a unified diff between a template and its compiled form.

    Args:
        original (str): Template source.
        compiled (str): Compiled template text.
        path (str): Label used in the ``---``/``+++`` header lines.

    Returns:
        str: The diff, or an empty string if both texts are equal.
    """
    diff_lines = difflib.unified_diff(
        original.splitlines(keepends=True),
        compiled.splitlines(keepends=True),
        fromfile=f"{path} (original)",
        tofile=f"{path} (compiled)",
        n=3,
    )
    return "".join(diff_lines)


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): A unified diff as a sequence of lines or
            a single multiline string.
        show_line_numbers (bool): Whether to prefix output with line numbers.

    Returns:
        str: The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    # Control characters are shown explicitly
    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r").replace("\n", "\\n")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return chalk.gray(
            "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
        )
    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
