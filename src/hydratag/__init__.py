# topmark:header:start
#
#   project      : HydraTag
#   file         : __init__.py
#   file_relpath : src/hydratag/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HydraTag package.

HydraTag is a template precompiler for component-based server-rendered UIs. It
rewrites custom component tags such as ``<User_Card $id="42" />`` into
placeholder ``div`` elements that a client-side runtime hydrates, and exposes
both a CLI and a small typed API for automation.
"""

from __future__ import annotations

from hydratag.rewriter import (
    AttributeKind,
    ClassifiedAttributes,
    CompileResult,
    ComponentTagMatch,
    Dialect,
    HydratagError,
    NestingDepthError,
    ParsedAttribute,
    TagRewriter,
    compile,
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
