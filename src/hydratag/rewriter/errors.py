# topmark:header:start
#
#   project      : HydraTag
#   file         : errors.py
#   file_relpath : src/hydratag/rewriter/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the tag rewriter.

The rewriter is a best-effort text transform: malformed or unrecognized
markup is passed through as text and never raises. The only fatal condition
is component nesting deeper than the configured limit.
"""

from __future__ import annotations


class HydratagError(Exception):
    """Base class for all HydraTag errors."""


class NestingDepthError(HydratagError):
    """Component nesting exceeds the configured maximum depth.

    Attributes:
        tag_name (str): Name of the component at which the limit was exceeded.
        depth (int): Nesting depth of that component (1 = top level).
        max_depth (int): The configured limit.
    """

    def __init__(self, tag_name: str, depth: int, max_depth: int) -> None:
        self.tag_name = tag_name
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Component <{tag_name}> is nested {depth} levels deep "
            f"(maximum nesting depth is {max_depth})"
        )
