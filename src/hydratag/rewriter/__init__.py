# topmark:header:start
#
#   project      : HydraTag
#   file         : __init__.py
#   file_relpath : src/hydratag/rewriter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Component tag rewriter.

The rewriter is a pure text transform, organized as a small pipeline:

- `lexer`: find component tag boundaries, skipping host code regions.
- `tree`: pair opening and closing tags into a node tree.
- `attributes`: parse and classify the attributes of one tag.
- `emitter`: serialize the tree, replacing components with placeholder markup.
- `compiler`: run rewrite passes to a fixpoint (`TagRewriter`, `compile`).

Host-engine specifics live in `dialects`; escaping helpers in `escaping`.
"""

from __future__ import annotations

from hydratag.rewriter.compiler import CompileResult, TagRewriter, compile
from hydratag.rewriter.dialects import Dialect
from hydratag.rewriter.errors import HydratagError, NestingDepthError
from hydratag.rewriter.types import (
    AttributeKind,
    ClassifiedAttributes,
    ComponentTagMatch,
    ParsedAttribute,
)

__all__ = [
    "AttributeKind",
    "ClassifiedAttributes",
    "CompileResult",
    "ComponentTagMatch",
    "Dialect",
    "HydratagError",
    "NestingDepthError",
    "ParsedAttribute",
    "TagRewriter",
    "compile",
]
