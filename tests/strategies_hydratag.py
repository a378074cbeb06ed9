# topmark:header:start
#
#   project      : HydraTag
#   file         : strategies_hydratag.py
#   file_relpath : tests/strategies_hydratag.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hypothesis strategies for generating component-tag templates.

Templates are assembled from a bounded set of fragments: plain text, opening,
closing and self-closing component tags with mixed attribute syntaxes, and
host expressions. Unbalanced and crossing tags are generated on purpose.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

BLACKLIST_CATEGORIES: tuple[Literal["Cs"], ...] = ("Cs",)

# A small pool keeps matching open/close pairs likely
TAG_NAMES: tuple[str, ...] = ("User_Card", "Alert_Box", "Nav_Item_V2", "A_B")

EXPRESSIONS: tuple[str, ...] = ("user", "user.name", "items | length", "loop.index + 1")

# Attribute values never contain the quote that delimits them or host code braces
literal_values: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(
        blacklist_categories=BLACKLIST_CATEGORIES,
        blacklist_characters='"{}\r\x00',
    ),
    max_size=12,
)

# Text between tags: no component tag can appear in it
plain_text: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(
        blacklist_categories=BLACKLIST_CATEGORIES,
        blacklist_characters="<{}%#",
    ),
    max_size=20,
)

attribute_keys: st.SearchStrategy[str] = st.from_regex(r"\A[a-z][a-z0-9_\-]{0,6}\Z")


@st.composite
def attributes(draw: Draw) -> str:
    """Return one attribute as written in a component tag, with its leading space."""
    key: str = draw(attribute_keys)
    style: str = draw(
        st.sampled_from(("literal", "arg", "data", "flag", "expr", "expr_arg", "wrapped"))
    )
    if style == "literal":
        return f' {key}="{draw(literal_values)}"'
    if style == "arg":
        return f' ${key}="{draw(literal_values)}"'
    if style == "data":
        return f' data-{key}="{draw(literal_values)}"'
    if style == "flag":
        return f" {key}"
    if style == "expr":
        return f' :{key}="{draw(st.sampled_from(EXPRESSIONS))}"'
    if style == "expr_arg":
        return f' :${key}="{draw(st.sampled_from(EXPRESSIONS))}"'
    return f' {key}="{{{{ {draw(st.sampled_from(EXPRESSIONS))} }}}}"'


@st.composite
def component_tags(draw: Draw) -> str:
    """Return an opening, self-closing or closing component tag."""
    name: str = draw(st.sampled_from(TAG_NAMES))
    kind: str = draw(st.sampled_from(("open", "self_closing", "close")))
    if kind == "close":
        return f"</{name}>"
    attrs: str = "".join(draw(st.lists(attributes(), max_size=3)))
    return f"<{name}{attrs}{' /' if kind == 'self_closing' else ''}>"


@st.composite
def templates(draw: Draw) -> str:
    """Return template source mixing text, component tags and host expressions."""
    fragments = st.one_of(
        plain_text,
        component_tags(),
        st.sampled_from(EXPRESSIONS).map(lambda code: f"{{{{ {code} }}}}"),
        st.sampled_from(("<div>", "</div>", "<p class='x'>", "<br/>", "\n", "\r\n")),
    )
    return "".join(draw(st.lists(fragments, max_size=20)))
