# topmark:header:start
#
#   project      : HydraTag
#   file         : jinja.py
#   file_relpath : src/hydratag/integrations/jinja.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Jinja2 integration.

`ComponentTagExtension` compiles component tags on the fly, before Jinja2
lexes a template, so templates can use component tags directly::

    from jinja2 import Environment

    env = Environment(extensions=["hydratag.integrations.jinja.ComponentTagExtension"])
    env.hydratag_max_depth = 16  # optional
    env.from_string('<User_Card :$user="user" />').render(user={"id": 42})
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jinja2.ext import Extension

from hydratag.config.logging import get_logger
from hydratag.constants import DEFAULT_MAX_DEPTH
from hydratag.rewriter.compiler import TagRewriter
from hydratag.rewriter.dialects import Dialect

if TYPE_CHECKING:
    from jinja2 import Environment

    from hydratag.config.logging import HydratagLogger

logger: HydratagLogger = get_logger(__name__)


class ComponentTagExtension(Extension):
    """Rewrite component tags in every template source loaded by the environment.

    The nesting limit is read from ``environment.hydratag_max_depth`` each
    time a template is compiled.
    """

    def __init__(self, environment: Environment) -> None:
        super().__init__(environment)
        environment.extend(hydratag_max_depth=DEFAULT_MAX_DEPTH)

    def preprocess(self, source: str, name: str | None, filename: str | None = None) -> str:
        """Return ``source`` with component tags compiled (jinja dialect).

        Raises:
            NestingDepthError: If components nest deeper than the configured limit.
        """
        max_depth: int = self.environment.hydratag_max_depth  # type: ignore[attr-defined]
        logger.debug("jinja: preprocessing template %s", name or "<string>")
        return TagRewriter(dialect=Dialect.JINJA, max_depth=max_depth).compile(source)
