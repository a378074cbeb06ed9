# topmark:header:start
#
#   project      : HydraTag
#   file         : model.py
#   file_relpath : src/hydratag/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot handed to the rewriter and the
      file resolver.
    - `MutableConfig`: a mutable builder used during discovery and merging; it
      can be frozen into `Config` and thawed back for edits.

Merge order (lowest to highest precedence):
    1) Built-in defaults (``hydratag-default.toml``)
    2) Project configs discovered upward from the anchor directory, root-most
       first; within a directory ``pyproject.toml`` is merged before
       ``hydratag.toml``
    3) Extra config files passed explicitly (``--config``), in the given order
    4) Command line overrides (`MutableConfig.apply_overrides`)

Invalid values in a TOML source are reported as warnings and ignored, so the
value from a lower layer stays in effect.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from hydratag.config.io import (
    get_int_value_or_none,
    get_string_list_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from hydratag.config.keys import Toml
from hydratag.config.logging import get_logger
from hydratag.constants import (
    DEFAULT_MAX_DEPTH,
    HYDRATAG_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from hydratag.rewriter.dialects import Dialect

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hydratag.config.io import TomlTable
    from hydratag.config.logging import HydratagLogger

logger: HydratagLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for HydraTag.

    Produced by `MutableConfig.freeze`. Use `Config.thaw` to obtain a mutable
    builder for edits.

    Attributes:
        dialect (Dialect): Host template dialect the placeholder code is written for.
        max_depth (int): Maximum component nesting depth.
        include_patterns (tuple[str, ...]): Gitignore-style patterns selecting templates.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns removing templates.
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
    """

    dialect: Dialect = Dialect.JINJA
    max_depth: int = DEFAULT_MAX_DEPTH
    include_patterns: tuple[str, ...] = ()
    exclude_patterns: tuple[str, ...] = ()
    config_files: tuple[Path | str, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration in the shape of a HydraTag TOML document.

        Note:
            Export-only; parsing lives on the mutable side.
        """
        return {
            Toml.SECTION_REWRITER: {
                Toml.KEY_DIALECT: self.dialect.value,
                Toml.KEY_MAX_DEPTH: self.max_depth,
            },
            Toml.SECTION_FILES: {
                Toml.KEY_INCLUDE: list(self.include_patterns),
                Toml.KEY_EXCLUDE: list(self.exclude_patterns),
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            dialect=self.dialect,
            max_depth=self.max_depth,
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` (or an empty list) means "not set by this layer"; `freeze`
    fills unset values with the built-in defaults.
    """

    dialect: Dialect | None = None
    max_depth: int | None = None
    include_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        Raises:
            ValueError: If ``max_depth`` is smaller than 1.
        """
        max_depth: int = self.max_depth if self.max_depth is not None else DEFAULT_MAX_DEPTH
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1 (got {max_depth})")
        return Config(
            dialect=self.dialect if self.dialect is not None else Dialect.JINJA,
            max_depth=max_depth,
            include_patterns=tuple(self.include_patterns),
            exclude_patterns=tuple(self.exclude_patterns),
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    @functools.cache
    def _defaults_dict(cls) -> TomlTable:
        return load_defaults_dict()

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated from the bundled ``hydratag-default.toml``."""
        return cls.from_toml_dict(cls._defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a builder from a parsed HydraTag TOML table.

        Args:
            data (TomlTable): The HydraTag table (top level of ``hydratag.toml``,
                or ``[tool.hydratag]`` of ``pyproject.toml``).
            config_file (Path | None): Source file, recorded in ``config_files``.

        Returns:
            MutableConfig: The builder; invalid values are left unset.
        """
        rewriter_tbl: TomlTable = get_table_value(data, Toml.SECTION_REWRITER)
        logger.trace("TOML [%s]: %s", Toml.SECTION_REWRITER, rewriter_tbl)
        files_tbl: TomlTable = get_table_value(data, Toml.SECTION_FILES)
        logger.trace("TOML [%s]: %s", Toml.SECTION_FILES, files_tbl)

        draft: MutableConfig = cls()
        if config_file is not None:
            draft.config_files = [config_file]

        dialect_raw: str | None = get_string_value_or_none(rewriter_tbl, Toml.KEY_DIALECT)
        if dialect_raw is not None:
            try:
                draft.dialect = Dialect.parse(dialect_raw)
            except ValueError as exc:
                logger.warning("Ignoring [%s].%s: %s", Toml.SECTION_REWRITER, Toml.KEY_DIALECT, exc)

        max_depth: int | None = get_int_value_or_none(rewriter_tbl, Toml.KEY_MAX_DEPTH)
        if max_depth is not None:
            if max_depth < 1:
                logger.warning(
                    "Ignoring [%s].%s = %d: must be at least 1",
                    Toml.SECTION_REWRITER,
                    Toml.KEY_MAX_DEPTH,
                    max_depth,
                )
            else:
                draft.max_depth = max_depth

        draft.include_patterns = get_string_list_or_none(files_tbl, Toml.KEY_INCLUDE) or []
        draft.exclude_patterns = get_string_list_or_none(files_tbl, Toml.KEY_EXCLUDE) or []
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        For ``pyproject.toml`` the ``[tool.hydratag]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The builder, or ``None`` if a ``pyproject.toml``
                has no ``[tool.hydratag]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = _tool_table(data)
            if not tool_section:
                logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            data = tool_section
        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Files are returned root-most first, nearest last. Within one directory
        ``pyproject.toml`` (only with a ``[tool.hydratag]`` table) comes before
        ``hydratag.toml``, so the latter takes precedence when merged. A config
        with ``root = true`` stops the walk after its directory.

        Args:
            start (Path): Directory (or file) where discovery starts.

        Returns:
            list[Path]: Discovered config files in merge order.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, HYDRATAG_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                data: TomlTable = load_toml_dict(p)
                table: TomlTable = _tool_table(data) if name == PYPROJECT_TOML_NAME else data
                if name == PYPROJECT_TOML_NAME and not table:
                    continue
                dir_entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if table.get(Toml.KEY_ROOT) is True:
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a builder.

        Args:
            anchor (Path | None): Start of upward discovery (defaults to the CWD).
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                after discovery, in the given order.
            no_config (bool): If True, skip discovery (explicit files still apply).

        Returns:
            MutableConfig: The merged builder.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override this one."""
        return MutableConfig(
            dialect=other.dialect if other.dialect is not None else self.dialect,
            max_depth=other.max_depth if other.max_depth is not None else self.max_depth,
            include_patterns=list(other.include_patterns or self.include_patterns),
            exclude_patterns=list(other.exclude_patterns or self.exclude_patterns),
            config_files=self.config_files + other.config_files,
        )

    def apply_overrides(
        self,
        *,
        dialect: Dialect | str | None = None,
        max_depth: int | None = None,
        include_patterns: Iterable[str] | None = None,
        exclude_patterns: Iterable[str] | None = None,
    ) -> MutableConfig:
        """Apply command line overrides in place.

        Include patterns replace the configured ones; exclude patterns are
        added to them.

        Returns:
            MutableConfig: ``self``, for chaining.

        Raises:
            ValueError: If ``dialect`` names no known dialect.
        """
        if dialect is not None:
            self.dialect = Dialect.parse(dialect)
        if max_depth is not None:
            self.max_depth = max_depth
        includes: list[str] = list(include_patterns or ())
        if includes:
            self.include_patterns = includes
        self.exclude_patterns.extend(exclude_patterns or ())
        logger.trace("Config after overrides: %s", self)
        return self


def _tool_table(data: TomlTable) -> TomlTable:
    tool: Any = data.get("tool", {})
    if not isinstance(tool, dict):
        return {}
    section: Any = tool.get(PYPROJECT_TOOL_SECTION, {})
    return section if isinstance(section, dict) else {}
