# topmark:header:start
#
#   project      : HydraTag
#   file         : escaping.py
#   file_relpath : src/hydratag/rewriter/escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Escape functions used when re-emitting attribute values.

Each function covers exactly one embedding context. They compose in a fixed order:

1. A literal component argument is passed through `escape_source_literal` and
   placed inside a quoted string literal of the host-code args mapping.
2. At render time the host engine serializes the mapping to JSON and escapes
   the JSON text for a double-quoted HTML attribute (see
   `hydratag.rewriter.dialects`).

Literal HTML attributes (and a literal ``class``) only ever go through
`escape_html_attribute`. Expression values are never escaped.
"""

from __future__ import annotations

from typing import Final

# PHP addslashes(): backslash, single quote, double quote and NUL.
_SOURCE_LITERAL_TABLE: Final[dict[int, str]] = {
    ord("\\"): "\\\\",
    ord("'"): "\\'",
    ord('"'): '\\"',
    ord("\0"): "\\0",
}

# PHP htmlspecialchars(..., ENT_QUOTES) entity spelling.
_HTML_ATTRIBUTE_TABLE: Final[dict[int, str]] = {
    ord("&"): "&amp;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
    ord('"'): "&quot;",
    ord("'"): "&#039;",
}


def escape_source_literal(text: str) -> str:
    """Escape text for a quoted string literal in host template code.

    Quote characters inside ``text`` cannot terminate the surrounding literal,
    and a trailing backslash cannot swallow the closing quote.

    Args:
        text (str): Raw literal value.

    Returns:
        str: The escaped text (without surrounding quotes).
    """
    return text.translate(_SOURCE_LITERAL_TABLE)


def quote_source_literal(text: str) -> str:
    """Return ``text`` as a single-quoted host-code string literal."""
    return f"'{escape_source_literal(text)}'"


def escape_html_attribute(text: str) -> str:
    """Escape text for a double- or single-quoted HTML attribute value.

    Args:
        text (str): Raw attribute value.

    Returns:
        str: Text with ``&``, ``<``, ``>``, ``"`` and ``'`` replaced by entities.
    """
    return text.translate(_HTML_ATTRIBUTE_TABLE)
