# topmark:header:start
#
#   project      : HydraTag
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers: typed getters, loading and section nesting."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
import toml

from hydratag.config.io import (
    get_int_value_or_none,
    get_string_list_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    nest_toml_under_section,
    to_toml,
)
from tests.conftest import mark_config

if TYPE_CHECKING:
    from pathlib import Path


@mark_config
def test_defaults_resource_has_both_sections() -> None:
    """The packaged defaults parse and carry the rewriter and files tables."""
    data = load_defaults_dict()
    assert data["rewriter"]["dialect"] == "jinja"
    assert isinstance(data["files"]["include"], list)


@mark_config
def test_load_toml_dict_reports_errors_and_returns_empty(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Missing and malformed files yield an empty table and an error log."""
    caplog.set_level(logging.ERROR)
    bad = tmp_path / "bad.toml"
    bad.write_text("[rewriter\n", encoding="utf-8")

    assert load_toml_dict(tmp_path / "missing.toml") == {}
    assert load_toml_dict(bad) == {}
    assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == 2


@mark_config
def test_typed_getters(caplog: pytest.LogCaptureFixture) -> None:
    """Getters return typed values and warn about mismatches."""
    caplog.set_level(logging.WARNING)
    table = {
        "s": "x",
        "i": 3,
        "b": True,
        "l": ["a", 1, "b"],
        "t": {"k": 1},
        "n": "not a table",
    }
    assert get_string_value_or_none(table, "s") == "x"
    assert get_string_value_or_none(table, "missing") is None
    assert get_int_value_or_none(table, "i") == 3
    assert get_int_value_or_none(table, "b") is None
    assert get_string_list_or_none(table, "l") == ["a", "b"]
    assert get_string_list_or_none(table, "s") is None
    assert get_table_value(table, "t") == {"k": 1}
    assert get_table_value(table, "n") == {}
    assert get_table_value(table, "missing") == {}
    assert len(caplog.records) == 4


@mark_config
def test_nest_toml_under_section() -> None:
    """Nested output parses back to the same data under the section path."""
    doc = to_toml({"rewriter": {"dialect": "jinja", "max_depth": 64}})
    nested = nest_toml_under_section(doc, "tool.hydratag")

    assert "[tool.hydratag.rewriter]" in nested
    assert "[tool]" not in nested
    assert toml.loads(nested) == {
        "tool": {"hydratag": {"rewriter": {"dialect": "jinja", "max_depth": 64}}}
    }


@mark_config
def test_nest_toml_under_section_rejects_empty_path() -> None:
    """A section path without components is an error."""
    with pytest.raises(ValueError):
        nest_toml_under_section("a = 1\n", "..")
