# topmark:header:start
#
#   project      : HydraTag
#   file         : io.py
#   file_relpath : src/hydratag/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight TOML I/O helpers for HydraTag configuration.

Pure helpers for reading and writing TOML, kept apart from the model classes
to avoid import cycles:

1. Load defaults from the packaged resource (``load_defaults_dict``).
2. Load project TOML files (``load_toml_dict``).
3. Inspect values with the typed getters (``get_table_value`` and friends).
4. Serialize back to TOML (``to_toml``), optionally nested under a dotted
   section with ``nest_toml_under_section``.

``toml`` handles plain parsing and rendering. ``tomlkit`` is only used where a
document has to be rewritten without losing comments and whitespace.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, TypeGuard

import toml
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.items import Table

from hydratag.config.logging import get_logger
from hydratag.constants import DEFAULT_TOML_CONFIG_NAME, DEFAULT_TOML_CONFIG_PACKAGE

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable
    from pathlib import Path

    from hydratag.config.logging import HydratagLogger

logger: HydratagLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(val, dict)


def is_any_list(val: Any) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value (item types are not checked)."""
    return isinstance(val, list)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table at ``key``, or an empty dict if missing or not a table."""
    value: Any = table.get(key)
    if is_toml_table(value):
        return value
    if value is not None:
        logger.warning("Ignoring [%s]: expected a table, got %s", key, type(value).__name__)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Return the string at ``key``.

    Non-string values are reported with a warning and ignored.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The value, or ``None`` when missing or not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Ignoring '%s': expected a string, got %r", key, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Return the integer at ``key``.

    Booleans are not accepted as integers. Other types are reported with a
    warning and ignored.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        int | None: The value, or ``None`` when missing or not an integer.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.warning("Ignoring '%s': expected an integer, got %r", key, value)
    return None


def get_string_list_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Return the list of strings at ``key``.

    Non-string items are dropped with a warning. A value that is not a list is
    ignored altogether.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        list[str] | None: The strings, or ``None`` when the key is missing or
            not a list.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not is_any_list(value):
        logger.warning("Ignoring '%s': expected a list of strings, got %r", key, value)
        return None
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(item)
        else:
            logger.warning("Ignoring non-string entry in '%s': %r", key, item)
    return out


def load_defaults_dict() -> TomlTable:
    """Return the packaged default configuration as a Python dict.

    Raises:
        RuntimeError: If the bundled default config resource cannot be read or
            parsed as TOML.
    """
    resource: Traversable = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    logger.debug("Loading defaults from package resource: %s", resource)
    try:
        text: str = resource.read_text(encoding="utf8")
    except OSError as exc:
        raise RuntimeError(
            f"Cannot read bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r}: {exc}"
        ) from exc

    try:
        data: TomlTable = toml.loads(text)
    except toml.TomlDecodeError as exc:
        raise RuntimeError(
            f"Bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r} is invalid TOML: {exc}"
        ) from exc

    return data


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file (UTF-8).

    Args:
        path (Path): Path to a TOML document (``hydratag.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed content; an empty dict if the file cannot be
            read or parsed (the error is logged).
    """
    try:
        val: TomlTable = toml.load(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        val = {}
    except toml.TomlDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        val = {}
    return val


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML table to a string."""
    return toml.dumps(toml_dict)


def nest_toml_under_section(toml_doc: str, section_keys: str) -> str:
    r"""Return ``toml_doc`` nested under a dotted section path.

    ``nest_toml_under_section("a = 1\n", "tool.hydratag")`` yields a document
    equivalent to::

        [tool.hydratag]
        a = 1

    The original document's items are re-used, so comments attached to them
    survive the move.

    Args:
        toml_doc (str): Original TOML document.
        section_keys (str): Dotted section path such as ``"tool.hydratag"``.

    Returns:
        str: The nested TOML document.

    Raises:
        ValueError: If ``section_keys`` has no non-empty component.
        RuntimeError: If ``toml_doc`` cannot be parsed.
    """
    keys: list[str] = [k for k in section_keys.split(".") if k]
    if not keys:
        raise ValueError("section_keys must contain at least one non-empty component")

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(toml_doc)
    except TomlkitParseError as exc:
        raise RuntimeError(f"Error parsing TOML document: {exc}") from exc

    new_doc: tomlkit.TOMLDocument = tomlkit.document()
    current: tomlkit.TOMLDocument | Table = new_doc
    for key in keys:
        # Intermediate tables stay implicit so only the leaf header is written
        table: Table = tomlkit.table(is_super_table=key != keys[-1])
        current.add(key, table)
        current = table

    for item_key, item_value in doc.items():
        current.add(item_key, item_value)

    return new_doc.as_string()
