# topmark:header:start
#
#   project      : HydraTag
#   file         : test_lexer.py
#   file_relpath : tests/rewriter/test_lexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag boundary scanner: naming rule, token kinds and opaque host regions."""

from __future__ import annotations

from hydratag.rewriter.dialects import BLADE, JINJA, HostDialect
from hydratag.rewriter.lexer import TokenKind, is_component_tag_name, tokenize
from tests.conftest import mark_rewriter, parametrize


@mark_rewriter
@parametrize(
    "name,expected",
    [
        ("User_Card", True),
        ("Alert_Box_V2", True),
        ("A_B", True),
        ("UserCard", False),
        ("user_card", False),
        ("User_", False),
        ("_User_Card", False),
        ("User-Card", False),
        ("div", False),
    ],
)
def test_component_tag_naming_rule(name: str, expected: bool) -> None:
    """Names start uppercase, are alphanumeric and contain an underscore-joined word."""
    assert is_component_tag_name(name) is expected


@mark_rewriter
def test_tokenize_reports_kinds_and_offsets() -> None:
    """Opening, closing and self-closing tags are reported in source order."""
    source = 'a<User_Card $id="1">b</User_Card><Spinner_Icon />'
    tokens = tokenize(source, JINJA)

    assert [t.kind for t in tokens] == [TokenKind.OPEN, TokenKind.CLOSE, TokenKind.SELF_CLOSING]
    assert [t.name for t in tokens] == ["User_Card", "User_Card", "Spinner_Icon"]
    assert tokens[0].attributes == ' $id="1"'
    assert source[tokens[0].start : tokens[0].end] == '<User_Card $id="1">'
    assert source[tokens[2].start : tokens[2].end] == "<Spinner_Icon />"


@mark_rewriter
def test_tokenize_ignores_html_and_unconventional_names() -> None:
    """Lowercase HTML tags and names without an underscore are not tokens."""
    assert tokenize("<div><Card /><p>x</p></div>", JINJA) == []


@mark_rewriter
def test_quoted_values_may_contain_angle_brackets_and_slashes() -> None:
    """A ``>`` or ``/>`` inside a quoted value does not end the tag."""
    source = '<Nav_Item href="/a/b" title="x > y" label=\'/>\' />'
    tokens = tokenize(source, JINJA)

    assert len(tokens) == 1
    assert tokens[0].kind is TokenKind.SELF_CLOSING
    assert tokens[0].end == len(source)


@mark_rewriter
def test_multiline_opening_tag() -> None:
    """Attributes may be spread over several lines."""
    tokens = tokenize('<User_Card\n    $id="1"\n    hidden\n/>', JINJA)
    assert [t.kind for t in tokens] == [TokenKind.SELF_CLOSING]


@mark_rewriter
@parametrize(
    "source",
    [
        '{{ "<User_Card />" }}',
        "{# <User_Card /> #}",
        "{% set x = '<User_Card />' %}",
    ],
)
def test_jinja_host_regions_are_opaque(source: str) -> None:
    """Tag-shaped text inside Jinja expressions, comments and statements is skipped."""
    assert tokenize(source, JINJA) == []


@mark_rewriter
@parametrize(
    "source",
    [
        "{{ '<User_Card />' }}",
        "{!! '<User_Card />' !!}",
        "{{-- <User_Card /> --}}",
    ],
)
def test_blade_host_regions_are_opaque(source: str) -> None:
    """Tag-shaped text inside Blade echoes and comments is skipped."""
    assert tokenize(source, BLADE) == []


@mark_rewriter
def test_blade_does_not_treat_jinja_statements_as_opaque() -> None:
    """Opaque regions are dialect specific."""
    tokens = tokenize("{% <User_Card /> %}", BLADE)
    assert [t.name for t in tokens] == ["User_Card"]


@mark_rewriter
@parametrize(
    "source,host",
    [
        ("{{ '}} <User_Card />' }}", JINJA),
        ("{% set x = \"%} <User_Card />\" %}", JINJA),
        ("{{ 'it\\'s }} <User_Card />' }}", JINJA),
        ("{!! e('}} <User_Card />') !!}", BLADE),
        ("{{ \"}} <User_Card />\" }}", BLADE),
    ],
)
def test_quoted_closing_delimiters_do_not_end_a_region(source: str, host: HostDialect) -> None:
    """A closing delimiter inside a quoted string stays part of the host region."""
    assert tokenize(source, host) == []


@mark_rewriter
def test_text_after_a_host_region_is_scanned() -> None:
    """Scanning resumes right after the region's real end."""
    tokens = tokenize("{{ 'a' }}<User_Card />{{ \"b\" }}", JINJA)
    assert [t.name for t in tokens] == ["User_Card"]
