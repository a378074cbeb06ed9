# topmark:header:start
#
#   project      : HydraTag
#   file         : lexer.py
#   file_relpath : src/hydratag/rewriter/lexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag boundary scanner.

`tokenize` finds component tag boundaries in template source and returns them
in source order. Everything between two tokens is ordinary template text. The
scanner does not pair opening and closing tags; see `hydratag.rewriter.tree`.

Component tag names start with an uppercase letter, contain only alphanumerics
and at least one underscore-separated word (``User_Card``, ``Alert_Box_V2``).
Lowercase HTML tags and names without an underscore are never tokens.

Host code regions of the active dialect (``{{ ... }}`` and friends) are
skipped as a whole, so tag-shaped text inside an expression stays untouched.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from hydratag.config.logging import get_logger

if TYPE_CHECKING:
    from hydratag.config.logging import HydratagLogger
    from hydratag.rewriter.dialects import HostDialect

logger: HydratagLogger = get_logger(__name__)

TAG_NAME_PATTERN: Final[str] = r"[A-Z][a-zA-Z0-9]*(?:_[a-zA-Z0-9]+)+"

# One attribute as it may appear in an opening tag. Unquoted values stop at
# whitespace, ``>`` or a ``/>`` terminator.
_ATTRIBUTE_PATTERN: Final[str] = (
    r"""\s+:?\$?[a-zA-Z0-9_\-:]+(?:=(?:"[^"]*"|'[^']*'|(?:[^>\s/]|/(?!>))+))?"""
)

_OPEN_TAG_PATTERN: Final[str] = (
    rf"<(?P<name>{TAG_NAME_PATTERN})"
    rf"(?P<attributes>(?:{_ATTRIBUTE_PATTERN})*)"
    r"\s*(?P<self_closing>/?)>"
)
_CLOSE_TAG_PATTERN: Final[str] = rf"</(?P<close_name>{TAG_NAME_PATTERN})>"

TAG_NAME_RE: Final[re.Pattern[str]] = re.compile(rf"{TAG_NAME_PATTERN}\Z")


class TokenKind(str, Enum):
    """Kinds of component tag boundaries."""

    OPEN = "open"
    SELF_CLOSING = "self_closing"
    CLOSE = "close"


@dataclass(frozen=True, slots=True)
class TagToken:
    """A component tag boundary found in source text.

    Attributes:
        kind (TokenKind): Boundary kind.
        name (str): Component tag name.
        attributes (str): Raw attribute span (empty for closing tags).
        start (int): Offset of the ``<``.
        end (int): Offset just past the ``>``.
    """

    kind: TokenKind
    name: str
    attributes: str
    start: int
    end: int


def is_component_tag_name(name: str) -> bool:
    """Return True if ``name`` follows the component tag naming convention."""
    return TAG_NAME_RE.match(name) is not None


@functools.lru_cache(maxsize=None)
def _scanner_for(host: HostDialect) -> re.Pattern[str]:
    return re.compile(
        rf"(?P<opaque>{host.opaque_region.pattern})"
        rf"|(?P<open>{_OPEN_TAG_PATTERN})"
        rf"|(?P<close>{_CLOSE_TAG_PATTERN})",
        re.DOTALL,
    )


def tokenize(source: str, host: HostDialect) -> list[TagToken]:
    """Return the component tag boundaries in ``source``, in order.

    Args:
        source (str): Template source.
        host (HostDialect): Active dialect; its host code regions are skipped.

    Returns:
        list[TagToken]: Opening, self-closing and closing tag tokens.
    """
    tokens: list[TagToken] = []
    for m in _scanner_for(host).finditer(source):
        if m.group("opaque") is not None:
            continue
        if m.group("open") is not None:
            kind = TokenKind.SELF_CLOSING if m.group("self_closing") else TokenKind.OPEN
            tokens.append(
                TagToken(
                    kind=kind,
                    name=m.group("name"),
                    attributes=m.group("attributes"),
                    start=m.start(),
                    end=m.end(),
                )
            )
        else:
            tokens.append(
                TagToken(
                    kind=TokenKind.CLOSE,
                    name=m.group("close_name"),
                    attributes="",
                    start=m.start(),
                    end=m.end(),
                )
            )
    logger.trace("lexer: %d tag token(s) in %d chars", len(tokens), len(source))
    return tokens
