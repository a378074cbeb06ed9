# topmark:header:start
#
#   project      : HydraTag
#   file         : types.py
#   file_relpath : src/hydratag/rewriter/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data model for the tag rewriter.

All values here are ephemeral: they are built while a single source string is
compiled and discarded once the placeholder markup has been emitted.

- `ParsedAttribute`: one attribute found on a component tag, tagged with its
  `AttributeKind`.
- `ClassifiedAttributes`: the partition of a tag's attributes into component
  arguments and placeholder HTML attributes.
- `ComponentTagMatch`: one recognized component tag (self-closing or paired).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class AttributeKind(str, Enum):
    """How an attribute value is escaped and re-emitted.

    Attributes:
        EXPRESSION: Host-template code, emitted verbatim and evaluated at render time.
        LITERAL: A plain string, escaped for the context it is emitted into.
        BOOLEAN_FLAG: A bare attribute name without a value (semantically ``true``).
    """

    EXPRESSION = "expression"
    LITERAL = "literal"
    BOOLEAN_FLAG = "boolean"


@dataclass(frozen=True, slots=True)
class ParsedAttribute:
    """One attribute found within a component tag.

    Attributes:
        key (str): Attribute name as written, minus a leading ``:`` binding prefix.
            A ``$`` argument prefix is kept; it is consumed by the partition step.
        kind (AttributeKind): Classification of the value.
        value (str | None): Raw payload for `EXPRESSION` / `LITERAL`; ``None`` for
            `BOOLEAN_FLAG`.
    """

    key: str
    kind: AttributeKind
    value: str | None = None

    def __post_init__(self) -> None:
        if (self.kind is AttributeKind.BOOLEAN_FLAG) != (self.value is None):
            raise ValueError(
                f"Attribute {self.key!r}: kind {self.kind.value} does not match value {self.value!r}"
            )

    @classmethod
    def expression(cls, key: str, code: str) -> ParsedAttribute:
        """Return an `EXPRESSION` attribute."""
        return cls(key=key, kind=AttributeKind.EXPRESSION, value=code)

    @classmethod
    def literal(cls, key: str, text: str) -> ParsedAttribute:
        """Return a `LITERAL` attribute."""
        return cls(key=key, kind=AttributeKind.LITERAL, value=text)

    @classmethod
    def flag(cls, key: str) -> ParsedAttribute:
        """Return a `BOOLEAN_FLAG` attribute."""
        return cls(key=key, kind=AttributeKind.BOOLEAN_FLAG)


@dataclass(frozen=True, slots=True)
class ClassifiedAttributes:
    """A tag's attributes split into two disjoint groups.

    Both mappings preserve the order in which the attributes were first seen.

    Attributes:
        component_args (Mapping[str, ParsedAttribute]): Arguments passed to the hydrated
            component as data, keyed by argument name (prefix stripped).
        html_attributes (Mapping[str, ParsedAttribute]): Attributes rendered onto the
            placeholder element, keyed by attribute name.
    """

    component_args: Mapping[str, ParsedAttribute] = field(default_factory=dict)
    html_attributes: Mapping[str, ParsedAttribute] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ComponentTagMatch:
    """One recognized component tag occurrence.

    Attributes:
        tag_name (str): Component name, e.g. ``User_Card``.
        raw_attributes (str): Unparsed attribute text of the opening tag.
        inner_content (str | None): Raw text between the opening and closing tag;
            ``None`` for self-closing tags.
        is_self_closing (bool): Whether the tag was written as ``<Name ... />``.
    """

    tag_name: str
    raw_attributes: str
    inner_content: str | None = None
    is_self_closing: bool = False

    @property
    def has_children(self) -> bool:
        """True if the tag is paired and its inner content is not blank."""
        return self.inner_content is not None and self.inner_content.strip() != ""
