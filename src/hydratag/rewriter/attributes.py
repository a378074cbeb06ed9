# topmark:header:start
#
#   project      : HydraTag
#   file         : attributes.py
#   file_relpath : src/hydratag/rewriter/attributes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute scanning, classification and partitioning.

Scanning is best-effort: the attribute span of a tag is searched for
``key`` / ``key=value`` tokens and anything that does not look like one is
skipped. Nothing in here raises on malformed input.

Classification rules, in order:

1. ``:key="code"`` is an expression; the value is host code, used verbatim.
2. A value wrapped in ``{{ ... }}`` or ``{!! ... !!}`` is an expression; the
   inner code (trimmed) is kept.
3. A key without ``=value`` is a boolean flag.
4. Anything else is a literal string.

Partitioning: ``$key`` and ``data-key`` become component arguments (prefix
stripped), every other key stays an HTML attribute of the placeholder.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from hydratag.config.logging import get_logger
from hydratag.constants import ARGUMENT_PREFIX, DATA_ARGUMENT_PREFIX, EXPRESSION_PREFIX
from hydratag.rewriter.types import ClassifiedAttributes, ParsedAttribute

if TYPE_CHECKING:
    from collections.abc import Mapping

    from hydratag.config.logging import HydratagLogger

logger: HydratagLogger = get_logger(__name__)

_ATTRIBUTE_RE: Final[re.Pattern[str]] = re.compile(
    r"""(?P<key>:?\$?[a-zA-Z0-9_\-:]+)"""
    r"""(?:=(?:"(?P<double>[^"]*)"|'(?P<single>[^']*)'|(?P<bare>[^>\s]+)))?"""
)

_EXPRESSION_DELIMITERS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"\{\{\s*(?P<code>\S.*?)\s*\}\}", re.DOTALL),
    re.compile(r"\{!!\s*(?P<code>\S.*?)\s*!!\}", re.DOTALL),
)


def unwrap_expression(value: str) -> str | None:
    """Return the inner code of a ``{{ code }}`` / ``{!! code !!}`` value, else None."""
    for pattern in _EXPRESSION_DELIMITERS:
        m = pattern.fullmatch(value)
        if m:
            return m.group("code")
    return None


def classify_attribute(key: str, value: str | None) -> ParsedAttribute:
    """Classify one scanned ``key`` / ``value`` pair.

    Args:
        key (str): Key as written, including any ``:`` or ``$`` prefix.
        value (str | None): Raw value text, or None when the key had no ``=value``.

    Returns:
        ParsedAttribute: The classified attribute. A ``:`` prefix is stripped from the key.
    """
    if key.startswith(EXPRESSION_PREFIX):
        key = key[len(EXPRESSION_PREFIX) :]
        if value is None:
            return ParsedAttribute.flag(key)
        return ParsedAttribute.expression(key, value)
    if value is not None:
        code = unwrap_expression(value)
        if code is not None:
            return ParsedAttribute.expression(key, code)
        return ParsedAttribute.literal(key, value)
    return ParsedAttribute.flag(key)


def parse_attributes(raw: str) -> dict[str, ParsedAttribute]:
    """Scan an attribute span into classified attributes.

    Later occurrences of a key overwrite earlier ones; a key keeps the position
    of its first occurrence.

    Args:
        raw (str): Attribute text of an opening tag.

    Returns:
        dict[str, ParsedAttribute]: Attributes keyed by their (``:``-stripped) key.
    """
    parsed: dict[str, ParsedAttribute] = {}
    for m in _ATTRIBUTE_RE.finditer(raw):
        value: str | None = m.group("double")
        if value is None:
            value = m.group("single")
        if value is None:
            value = m.group("bare")
        attribute = classify_attribute(m.group("key"), value)
        if not attribute.key:
            continue
        parsed[attribute.key] = attribute
    logger.trace("attributes: %r -> %s", raw, list(parsed))
    return parsed


def partition_attributes(attributes: Mapping[str, ParsedAttribute]) -> ClassifiedAttributes:
    """Split parsed attributes into component arguments and HTML attributes.

    Args:
        attributes (Mapping[str, ParsedAttribute]): Output of `parse_attributes`.

    Returns:
        ClassifiedAttributes: Disjoint argument / HTML attribute mappings.
    """
    component_args: dict[str, ParsedAttribute] = {}
    html_attributes: dict[str, ParsedAttribute] = {}
    for key, attribute in attributes.items():
        if key.startswith(ARGUMENT_PREFIX):
            name = key[len(ARGUMENT_PREFIX) :]
        elif key.startswith(DATA_ARGUMENT_PREFIX):
            name = key[len(DATA_ARGUMENT_PREFIX) :]
        else:
            html_attributes[key] = attribute
            continue
        if name:
            component_args[name] = attribute
        else:
            logger.debug("attributes: dropping argument with empty name (%r)", key)
    return ClassifiedAttributes(component_args=component_args, html_attributes=html_attributes)


def classify_attributes(raw: str) -> ClassifiedAttributes:
    """Scan, classify and partition an attribute span in one step."""
    return partition_attributes(parse_attributes(raw))
