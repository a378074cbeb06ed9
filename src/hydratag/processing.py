# topmark:header:start
#
#   project      : HydraTag
#   file         : processing.py
#   file_relpath : src/hydratag/processing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-file compilation with outcome bucketing.

`process_file` compiles one template, optionally writes the result back, and
classifies what happened as a `FileOutcome`. Read, decode, nesting and write
failures are captured on the `FileResult` instead of being raised, so a run
over many files reports every problem and keeps going.

This module is presentation-free: colors are attached to the outcome enum
but only applied by the CLI.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from yachalk import chalk

from hydratag.config.logging import get_logger
from hydratag.rewriter.errors import NestingDepthError
from hydratag.utils.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from hydratag.config.logging import HydratagLogger
    from hydratag.rewriter.compiler import CompileResult, TagRewriter

logger: HydratagLogger = get_logger(__name__)


class FileOutcome(ColoredStrEnum):
    """What happened to one template file."""

    UNCHANGED = ("unchanged", chalk.green)
    WOULD_CHANGE = ("would change", chalk.yellow)
    CHANGED = ("compiled", chalk.cyan)
    NOT_FOUND = ("not found", chalk.red)
    UNREADABLE = ("read error", chalk.red_bright)
    UNICODE_DECODE_ERROR = ("Unicode decode error", chalk.red)
    NESTING_TOO_DEEP = ("nesting too deep", chalk.red)
    WRITE_FAILED = ("write error", chalk.red_bright)

    @property
    def is_error(self) -> bool:
        """True for outcomes that represent a failure."""
        return self not in (
            FileOutcome.UNCHANGED,
            FileOutcome.WOULD_CHANGE,
            FileOutcome.CHANGED,
        )


@dataclass(frozen=True, slots=True)
class FileResult:
    """Result of processing one template file.

    Attributes:
        path (Path): The template file.
        outcome (FileOutcome): Classified outcome.
        result (CompileResult | None): Compiled text (``None`` if compiling failed).
        message (str | None): Error detail for failure outcomes.
    """

    path: Path
    outcome: FileOutcome
    result: CompileResult | None = None
    message: str | None = None


def _write_text(path: Path, text: str) -> None:
    # newline="" writes line endings exactly as compiled
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)


def process_file(rewriter: TagRewriter, path: Path, *, apply: bool = False) -> FileResult:
    """Compile one template file and, if requested, write the result back.

    Args:
        rewriter (TagRewriter): The rewriter to compile with.
        path (Path): Template file.
        apply (bool): Write changed files in place (UTF-8).

    Returns:
        FileResult: The outcome; failures are captured, not raised.
    """
    try:
        result: CompileResult = rewriter.compile_file(path)
    except FileNotFoundError as exc:
        logger.error("Cannot read %s: %s", path, exc)
        return FileResult(path, FileOutcome.NOT_FOUND, message=str(exc))
    except UnicodeDecodeError as exc:
        logger.error("Cannot decode %s as UTF-8: %s", path, exc)
        return FileResult(path, FileOutcome.UNICODE_DECODE_ERROR, message=str(exc))
    except OSError as exc:
        logger.error("Cannot read %s: %s", path, exc)
        return FileResult(path, FileOutcome.UNREADABLE, message=str(exc))
    except NestingDepthError as exc:
        logger.error("Cannot compile %s: %s", path, exc)
        return FileResult(path, FileOutcome.NESTING_TOO_DEEP, message=str(exc))

    if not result.changed:
        return FileResult(path, FileOutcome.UNCHANGED, result)
    if not apply:
        return FileResult(path, FileOutcome.WOULD_CHANGE, result)

    try:
        _write_text(path, result.compiled)
    except OSError as exc:
        logger.error("Cannot write %s: %s", path, exc)
        return FileResult(path, FileOutcome.WRITE_FAILED, result, message=str(exc))
    logger.info("Compiled %s (%d component tag(s))", path, result.components)
    return FileResult(path, FileOutcome.CHANGED, result)


def process_files(
    rewriter: TagRewriter, paths: Iterable[Path], *, apply: bool = False
) -> list[FileResult]:
    """Process several template files in order."""
    return [process_file(rewriter, p, apply=apply) for p in paths]


def count_outcomes(results: Iterable[FileResult]) -> Counter[FileOutcome]:
    """Return the number of results per outcome."""
    return Counter(r.outcome for r in results)
