# topmark:header:start
#
#   project      : HydraTag
#   file         : test_dialects.py
#   file_relpath : tests/rewriter/test_dialects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host dialect lookup and host-code fragments."""

from __future__ import annotations

import pytest

from hydratag.rewriter.dialects import BLADE, JINJA, Dialect, get_host_dialect
from tests.conftest import mark_rewriter, parametrize


@mark_rewriter
@parametrize(
    "value,expected",
    [
        ("jinja", Dialect.JINJA),
        ("BLADE", Dialect.BLADE),
        ("  Jinja ", Dialect.JINJA),
        (Dialect.BLADE, Dialect.BLADE),
    ],
)
def test_dialect_parse(value: str | Dialect, expected: Dialect) -> None:
    """Dialect names are case-insensitive and whitespace-trimmed."""
    assert Dialect.parse(value) is expected


@mark_rewriter
def test_unknown_dialect_lists_choices() -> None:
    """An unknown name raises a ValueError naming the valid choices."""
    with pytest.raises(ValueError, match="blade, jinja"):
        Dialect.parse("twig")


@mark_rewriter
def test_get_host_dialect() -> None:
    """Both members and names resolve to the shipped host syntaxes."""
    assert get_host_dialect("blade") is BLADE
    assert get_host_dialect(Dialect.JINJA) is JINJA


@mark_rewriter
def test_blade_fragments() -> None:
    """Blade uses PHP arrays and htmlspecialchars(json_encode(...))."""
    mapping = BLADE.mapping([("'a'", "'1'"), ("'b'", "$b")])
    assert mapping == "['a' => '1', 'b' => $b]"
    assert BLADE.args_payload(mapping) == (
        "{!! htmlspecialchars(json_encode(['a' => '1', 'b' => $b]), ENT_QUOTES, 'UTF-8') !!}"
    )
    assert BLADE.expression("$title") == "{{ $title }}"


@mark_rewriter
def test_jinja_fragments() -> None:
    """Jinja uses dict literals and the tojson / forceescape filters."""
    mapping = JINJA.mapping([("'a'", "'1'"), ("'b'", "b")])
    assert mapping == "{'a': '1', 'b': b}"
    assert JINJA.args_payload(mapping) == "{{ {'a': '1', 'b': b} | tojson | forceescape }}"
    assert JINJA.expression("title") == "{{ (title) | e }}"
