# topmark:header:start
#
#   project      : HydraTag
#   file         : file_resolver.py
#   file_relpath : src/hydratag/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template file resolution for HydraTag.

Expands the positional paths given on the command line into the sorted list
of template files to compile, filtered by the configured gitignore-style
include and exclude patterns.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from hydratag.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hydratag.config.logging import HydratagLogger
    from hydratag.config.model import Config

logger: HydratagLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def _expand_path(p: Path) -> list[Path]:
    """Expand a positional path into candidate files.

    Globs are expanded relative to the current working directory; directories
    are walked recursively.
    """
    if "*" in str(p):
        return [c for c in Path(".").glob(str(p)) if c.is_file()]
    if p.is_dir():
        return [c for c in p.rglob("*") if c.is_file()]
    if p.is_file():
        return [p]
    return []


def resolve_file_list(
    paths: Iterable[str | Path],
    config: Config,
    *,
    base: Path | None = None,
) -> list[Path]:
    """Return the template files to compile.

    Semantics:
      1. **Candidate set**: files, directories (recursively) and globs named
         by ``paths``. Missing paths and globs without matches are reported as
         warnings.
      2. **Include intersection**: when include patterns are configured, only
         candidates matching any of them are kept. Files named explicitly are
         kept regardless.
      3. **Exclude subtraction**: candidates matching any exclude pattern are
         removed, including explicitly named files.
      4. The result is **sorted** for deterministic output.

    Args:
        paths (Iterable[str | Path]): Positional paths.
        config (Config): Supplies the include and exclude patterns.
        base (Path | None): Directory patterns are matched against (CWD by default).

    Returns:
        list[Path]: Files selected for compilation.
    """
    base = base or Path.cwd()
    explicit: set[Path] = set()
    candidates: set[Path] = set()

    for raw in paths:
        p = Path(raw)
        expanded: list[Path] = _expand_path(p)
        if "*" in str(p):
            if not expanded:
                logger.warning("No matches for glob pattern: %s", p)
        elif not p.exists():
            logger.warning("No such file or directory: %s", p)
        elif p.is_file():
            explicit.add(p)
        candidates.update(expanded)

    if config.include_patterns:
        include_spec: PathSpec = PathSpec.from_lines(
            GitWildMatchPattern, list(config.include_patterns)
        )
        candidates = {
            p
            for p in candidates
            if p in explicit or include_spec.match_file(_rel_for_match(p, base))
        }

    if config.exclude_patterns:
        exclude_spec: PathSpec = PathSpec.from_lines(
            GitWildMatchPattern, list(config.exclude_patterns)
        )
        candidates = {
            p for p in candidates if not exclude_spec.match_file(_rel_for_match(p, base))
        }

    logger.trace("Files to process: %d -- %s", len(candidates), sorted(candidates))
    return sorted(candidates)
