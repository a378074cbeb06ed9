# topmark:header:start
#
#   project      : HydraTag
#   file         : test_escaping.py
#   file_relpath : tests/rewriter/test_escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Escape functions for host-code literals and HTML attribute values."""

from __future__ import annotations

import html

from hypothesis import given, settings
from hypothesis import strategies as st
from jinja2 import Environment

from hydratag.rewriter.escaping import (
    escape_html_attribute,
    escape_source_literal,
    quote_source_literal,
)
from tests.conftest import mark_rewriter, parametrize
from tests.strategies_hydratag import BLACKLIST_CATEGORIES


@mark_rewriter
@parametrize(
    "text,expected",
    [
        ("plain", "plain"),
        ("it's", "it\\'s"),
        ('say "hi"', 'say \\"hi\\"'),
        ("C:\\dir\\", "C:\\\\dir\\\\"),
        ("nul\0", "nul\\0"),
        ("", ""),
    ],
)
def test_escape_source_literal(text: str, expected: str) -> None:
    """Backslashes, quotes and NUL are backslash-escaped."""
    assert escape_source_literal(text) == expected


@mark_rewriter
def test_trailing_backslash_cannot_close_the_literal() -> None:
    """A value ending in a backslash still yields a terminated literal."""
    assert quote_source_literal("a\\") == "'a\\\\'"


@mark_rewriter
def test_escape_html_attribute() -> None:
    """The five HTML-significant characters are replaced by entities."""
    assert (
        escape_html_attribute("""<a href="x">Tom & 'Jerry'</a>""")
        == "&lt;a href=&quot;x&quot;&gt;Tom &amp; &#039;Jerry&#039;&lt;/a&gt;"
    )


@mark_rewriter
def test_escape_html_attribute_escapes_existing_entities() -> None:
    """Entities in the input are escaped again, not passed through."""
    assert escape_html_attribute("&amp;") == "&amp;amp;"


@mark_rewriter
@settings(max_examples=200, deadline=None)
@given(
    text=st.text(
        alphabet=st.characters(
            blacklist_categories=BLACKLIST_CATEGORIES, blacklist_characters="\r\x00"
        )
    )
)
def test_quoted_literal_evaluates_to_itself_in_jinja(text: str) -> None:
    """A quoted literal read back by the Jinja2 lexer yields the original text."""
    env = Environment(keep_trailing_newline=True)
    rendered = env.from_string("{{ " + quote_source_literal(text) + " }}").render()
    assert rendered == text


@mark_rewriter
@settings(max_examples=200, deadline=None)
@given(text=st.text())
def test_html_attribute_escaping_round_trips(text: str) -> None:
    """Escaped attribute text contains no quote or angle bracket and unescapes losslessly."""
    escaped = escape_html_attribute(text)
    assert not any(c in escaped for c in "<>\"'")
    assert html.unescape(escaped) == text
