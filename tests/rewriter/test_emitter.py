# topmark:header:start
#
#   project      : HydraTag
#   file         : test_emitter.py
#   file_relpath : tests/rewriter/test_emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Placeholder markup: args payload, class value and HTML attributes."""

from __future__ import annotations

import pytest

from hydratag.rewriter.attributes import classify_attributes, parse_attributes
from hydratag.rewriter.dialects import BLADE, JINJA
from hydratag.rewriter.emitter import (
    PlaceholderEmitter,
    build_args_payload,
    build_class_value,
    render_html_attributes,
)
from hydratag.rewriter.errors import NestingDepthError
from hydratag.rewriter.lexer import tokenize
from hydratag.rewriter.tree import build_tree
from hydratag.rewriter.types import ParsedAttribute
from tests.conftest import mark_rewriter, parametrize


def _args(raw: str) -> dict[str, ParsedAttribute]:
    return dict(classify_attributes(raw).component_args)


@mark_rewriter
def test_empty_args_payload_is_fixed_literal() -> None:
    """No arguments yields ``[]`` in every dialect."""
    assert build_args_payload({}, JINJA) == "[]"
    assert build_args_payload({}, BLADE) == "[]"


@mark_rewriter
def test_args_payload_value_kinds_jinja() -> None:
    """Literals are quoted, expressions raw, flags ``true``."""
    payload = build_args_payload(_args(' $name="O\'Brien" :$user="user" $open'), JINJA)
    assert payload == (
        "{{ {'name': 'O\\'Brien', 'user': user, 'open': true} | tojson | forceescape }}"
    )


@mark_rewriter
def test_args_payload_value_kinds_blade() -> None:
    """Blade payloads wrap a PHP array in htmlspecialchars(json_encode(...))."""
    payload = build_args_payload(_args(' data-id="7" :$user="$user"'), BLADE)
    assert payload == (
        "{!! htmlspecialchars(json_encode(['id' => '7', 'user' => $user]), "
        "ENT_QUOTES, 'UTF-8') !!}"
    )


@mark_rewriter
@parametrize(
    "raw,expected",
    [
        ("", "_Component_Init"),
        (' class="card wide"', "_Component_Init card wide"),
        (' class=""', "_Component_Init"),
        (" class", "_Component_Init"),
        (' :class="classes"', "_Component_Init {{ (classes) | e }}"),
        (' class="{{ classes }}"', "_Component_Init {{ (classes) | e }}"),
        (' class="a&b\'"', "_Component_Init a&amp;b&#039;"),
    ],
)
def test_class_value(raw: str, expected: str) -> None:
    """The init token always comes first; literal classes are escaped."""
    attrs = parse_attributes(raw)
    assert build_class_value(attrs.get("class"), JINJA) == expected


@mark_rewriter
def test_render_html_attributes_skips_class_and_escapes_literals() -> None:
    """Expressions become evaluation placeholders, flags stay bare."""
    attrs = classify_attributes(' id="x<y" class="c" :title="t" hidden').html_attributes
    assert render_html_attributes(attrs, JINJA) == ' id="x&lt;y" title="{{ (t) | e }}" hidden'


@mark_rewriter
def test_render_nested_and_depth_limit() -> None:
    """Depth counts from 1 at top level; exceeding the limit raises."""
    source = "<Outer_Box><Inner_Box /></Outer_Box>"
    nodes = build_tree(source, tokenize(source, JINJA))

    out = PlaceholderEmitter(JINJA, max_depth=2).render(nodes)
    assert out.text.count("<div ") == 2
    assert out.components == 2

    with pytest.raises(NestingDepthError) as excinfo:
        PlaceholderEmitter(JINJA, max_depth=1).render(nodes)
    assert excinfo.value.tag_name == "Inner_Box"
    assert excinfo.value.depth == 2
    assert excinfo.value.max_depth == 1


@mark_rewriter
def test_blank_inner_content_has_no_children() -> None:
    """Whitespace-only content is dropped."""
    source = "<A_B>  \n  </A_B>"
    nodes = build_tree(source, tokenize(source, JINJA))
    out = PlaceholderEmitter(JINJA, max_depth=4).render(nodes).text
    assert out.endswith('data-component-args="[]"></div>')


@mark_rewriter
def test_unpaired_tags_are_carried_to_their_new_offsets() -> None:
    """Tags left as text are reported where they ended up in the output."""
    source = "<A_B><C_D></A_B></C_D>"
    rendered = PlaceholderEmitter(JINJA, max_depth=4).render(
        build_tree(source, tokenize(source, JINJA))
    )

    assert rendered.components == 1
    assert [(t.name, t.kind.value) for t in rendered.pending] == [
        ("C_D", "open"),
        ("C_D", "close"),
    ]
    for token in rendered.pending:
        assert rendered.text[token.start : token.end] in ("<C_D>", "</C_D>")


@mark_rewriter
def test_deep_nesting_fails_with_depth_error() -> None:
    """Nesting far beyond the interpreter's recursion limit still reports the depth."""
    source = "<A_B>" * 3000 + "x" + "</A_B>" * 3000
    nodes = build_tree(source, tokenize(source, JINJA))

    with pytest.raises(NestingDepthError) as excinfo:
        PlaceholderEmitter(JINJA, max_depth=64).render(nodes)
    assert excinfo.value.depth == 65
