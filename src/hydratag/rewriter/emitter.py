# topmark:header:start
#
#   project      : HydraTag
#   file         : emitter.py
#   file_relpath : src/hydratag/rewriter/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Placeholder markup emitter.

Every component node becomes a ``div`` the client-side hydration runtime can
find and bring to life::

    <div class="_Component_Init <extra classes>"
         data-component-init-name="<TagName>"
         data-component-args="<escaped-JSON-or-[]>"
         <other html attrs...>><children></div>

The attribute names and the ``_Component_Init`` class token are an external
contract and must not change.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Final

from hydratag.config.logging import get_logger
from hydratag.constants import (
    CLASS_ATTRIBUTE,
    EMPTY_ARGS_PAYLOAD,
    INIT_ARGS_ATTRIBUTE,
    INIT_CLASS_TOKEN,
    INIT_NAME_ATTRIBUTE,
    PLACEHOLDER_ELEMENT,
)
from hydratag.rewriter.attributes import classify_attributes
from hydratag.rewriter.errors import NestingDepthError
from hydratag.rewriter.escaping import escape_html_attribute, quote_source_literal
from hydratag.rewriter.tree import TextNode
from hydratag.rewriter.types import AttributeKind

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from hydratag.config.logging import HydratagLogger
    from hydratag.rewriter.dialects import HostDialect
    from hydratag.rewriter.lexer import TagToken
    from hydratag.rewriter.tree import Node
    from hydratag.rewriter.types import ComponentTagMatch, ParsedAttribute

logger: HydratagLogger = get_logger(__name__)

_CLOSE_TAG: Final[str] = f"</{PLACEHOLDER_ELEMENT}>"


def _value_code(attribute: ParsedAttribute) -> str:
    """Return host code for an argument value."""
    if attribute.kind is AttributeKind.EXPRESSION:
        return attribute.value or ""
    if attribute.kind is AttributeKind.BOOLEAN_FLAG:
        return "true"
    return quote_source_literal(attribute.value or "")


def build_args_payload(component_args: Mapping[str, ParsedAttribute], host: HostDialect) -> str:
    """Return the ``data-component-args`` value for a set of component arguments.

    Literal values are escaped as host string literals; expression values are
    inserted as raw code. The mapping is serialized to JSON and escaped for the
    attribute by the host engine at render time.

    Args:
        component_args (Mapping[str, ParsedAttribute]): Arguments keyed by name.
        host (HostDialect): Active dialect.

    Returns:
        str: The payload, or ``[]`` when there are no arguments.
    """
    if not component_args:
        return EMPTY_ARGS_PAYLOAD
    entries = [
        (quote_source_literal(name), _value_code(attribute))
        for name, attribute in component_args.items()
    ]
    return host.args_payload(host.mapping(entries))


def build_class_value(class_attribute: ParsedAttribute | None, host: HostDialect) -> str:
    """Return the placeholder ``class`` value: the init token plus any source classes."""
    if class_attribute is None or class_attribute.kind is AttributeKind.BOOLEAN_FLAG:
        return INIT_CLASS_TOKEN
    if class_attribute.kind is AttributeKind.EXPRESSION:
        return f"{INIT_CLASS_TOKEN} {host.expression(class_attribute.value or '')}"
    if not class_attribute.value:
        return INIT_CLASS_TOKEN
    return f"{INIT_CLASS_TOKEN} {escape_html_attribute(class_attribute.value)}"


def render_html_attributes(html_attributes: Mapping[str, ParsedAttribute], host: HostDialect) -> str:
    """Render all HTML attributes except ``class``, each with a leading space."""
    parts: list[str] = []
    for key, attribute in html_attributes.items():
        if key == CLASS_ATTRIBUTE:
            continue
        if attribute.kind is AttributeKind.EXPRESSION:
            parts.append(f' {key}="{host.expression(attribute.value or "")}"')
        elif attribute.kind is AttributeKind.BOOLEAN_FLAG:
            parts.append(f" {key}")
        else:
            parts.append(f' {key}="{escape_html_attribute(attribute.value or "")}"')
    return "".join(parts)


@dataclass(frozen=True, slots=True)
class RenderedText:
    """Output of one rewrite pass.

    Attributes:
        text (str): The compiled text.
        components (int): Number of component tags replaced.
        pending (list[TagToken]): Tags that found no partner, at their offsets
            in ``text``. Only these can pair up in a later pass; placeholder
            markup is never scanned again.
    """

    text: str
    components: int
    pending: list[TagToken] = field(default_factory=list)


class PlaceholderEmitter:
    """Serialize a node tree, replacing component nodes with placeholder markup.

    Args:
        host (HostDialect): Active dialect.
        max_depth (int): Maximum component nesting depth.
    """

    def __init__(self, host: HostDialect, max_depth: int) -> None:
        self.host = host
        self.max_depth = max_depth

    def render(self, nodes: Sequence[Node]) -> RenderedText:
        """Return the compiled text for a node list.

        The tree is walked with an explicit stack, so deep nesting fails with
        `NestingDepthError` rather than exhausting the interpreter stack.

        Raises:
            NestingDepthError: If components nest deeper than ``max_depth``.
        """
        out: list[str] = []
        size: int = 0
        components: int = 0
        pending: list[TagToken] = []
        # One iterator per open level; the bottom one walks the top-level nodes.
        stack: list[Iterator[Node]] = [iter(nodes)]

        while stack:
            node: Node | None = next(stack[-1], None)
            if node is None:
                stack.pop()
                if stack:
                    out.append(_CLOSE_TAG)
                    size += len(_CLOSE_TAG)
                continue

            if isinstance(node, TextNode):
                if node.token is not None:
                    pending.append(
                        replace(node.token, start=size, end=size + len(node.text))
                    )
                out.append(node.text)
                size += len(node.text)
                continue

            depth: int = len(stack)
            if depth > self.max_depth:
                raise NestingDepthError(node.match.tag_name, depth, self.max_depth)
            components += 1
            opening: str = self._opening_tag(node.match, depth)
            out.append(opening)
            size += len(opening)
            if node.match.has_children:
                stack.append(iter(node.children))
            else:
                out.append(_CLOSE_TAG)
                size += len(_CLOSE_TAG)

        return RenderedText("".join(out), components, pending)

    def _opening_tag(self, match: ComponentTagMatch, depth: int) -> str:
        classified = classify_attributes(match.raw_attributes)
        html_attributes = classified.html_attributes

        logger.debug(
            "emitter: <%s> depth=%d args=%s attrs=%s",
            match.tag_name,
            depth,
            list(classified.component_args),
            list(html_attributes),
        )
        return (
            f"<{PLACEHOLDER_ELEMENT}"
            f' class="{build_class_value(html_attributes.get(CLASS_ATTRIBUTE), self.host)}"'
            f' {INIT_NAME_ATTRIBUTE}="{match.tag_name}"'
            f' {INIT_ARGS_ATTRIBUTE}="{build_args_payload(classified.component_args, self.host)}"'
            f"{render_html_attributes(html_attributes, self.host)}>"
        )
