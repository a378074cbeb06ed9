# topmark:header:start
#
#   project      : HydraTag
#   file         : tree.py
#   file_relpath : src/hydratag/rewriter/tree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pair tag tokens into a small node tree.

Opening and closing tags are paired with a stack keyed on tag name:

- A closing tag pairs with the nearest open tag of the same name. Open tags
  above it on the stack were never closed; they fall back to literal text
  inside the new component's content.
- A closing tag with no open tag of that name is literal text.
- Open tags still on the stack at end of input are literal text.

Text nodes are slices of the original source, so everything that is not a
paired or self-closing component tag is reproduced byte for byte.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from hydratag.config.logging import get_logger
from hydratag.rewriter.lexer import TokenKind
from hydratag.rewriter.types import ComponentTagMatch

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hydratag.config.logging import HydratagLogger
    from hydratag.rewriter.lexer import TagToken

logger: HydratagLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class TextNode:
    """Template text passed through unchanged.

    Attributes:
        text (str): The text.
        token (TagToken | None): Set when the text is a component tag that
            found no partner; a later rewrite pass may still pair it.
    """

    text: str
    token: TagToken | None = field(default=None, compare=False)


@dataclass(slots=True)
class ComponentNode:
    """A recognized component tag and its child nodes.

    Attributes:
        match (ComponentTagMatch): The tag as found in the source.
        children (list[Node]): Parsed inner content (empty for self-closing tags).
    """

    match: ComponentTagMatch
    children: list[Node] = field(default_factory=list)


Node = Union[TextNode, ComponentNode]


@dataclass(slots=True)
class _Frame:
    token: TagToken
    children: list[Node] = field(default_factory=list)


def _unwind(frame: _Frame, source: str, into: list[Node]) -> None:
    """Append an unclosed open tag and its content to ``into`` as plain nodes."""
    logger.trace("tree: unclosed <%s> at %d kept as text", frame.token.name, frame.token.start)
    into.append(TextNode(source[frame.token.start : frame.token.end], frame.token))
    into.extend(frame.children)


def build_tree(source: str, tokens: Sequence[TagToken]) -> list[Node]:
    """Build the node list for ``source`` from its tag tokens.

    Args:
        source (str): Template source the tokens were scanned from.
        tokens (Sequence[TagToken]): Tag boundaries, in source order.

    Returns:
        list[Node]: Top-level nodes; concatenating all text in source order
            reproduces ``source``.
    """
    root: list[Node] = []
    stack: list[_Frame] = []
    pos: int = 0

    def current() -> list[Node]:
        return stack[-1].children if stack else root

    for token in tokens:
        if token.start > pos:
            current().append(TextNode(source[pos : token.start]))
        pos = token.end

        if token.kind is TokenKind.SELF_CLOSING:
            current().append(
                ComponentNode(
                    ComponentTagMatch(
                        tag_name=token.name,
                        raw_attributes=token.attributes,
                        is_self_closing=True,
                    )
                )
            )
        elif token.kind is TokenKind.OPEN:
            stack.append(_Frame(token))
        else:
            depth: int | None = next(
                (i for i in range(len(stack) - 1, -1, -1) if stack[i].token.name == token.name),
                None,
            )
            if depth is None:
                logger.trace("tree: stray </%s> at %d kept as text", token.name, token.start)
                current().append(TextNode(source[token.start : token.end], token))
                continue
            while len(stack) > depth + 1:
                frame = stack.pop()
                _unwind(frame, source, stack[-1].children)
            frame = stack.pop()
            current().append(
                ComponentNode(
                    ComponentTagMatch(
                        tag_name=token.name,
                        raw_attributes=frame.token.attributes,
                        inner_content=source[frame.token.end : token.start],
                    ),
                    children=frame.children,
                )
            )

    if pos < len(source):
        current().append(TextNode(source[pos:]))

    while stack:
        frame = stack.pop()
        _unwind(frame, source, current())

    return root

