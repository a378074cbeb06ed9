# topmark:header:start
#
#   project      : HydraTag
#   file         : compiler.py
#   file_relpath : src/hydratag/rewriter/compiler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag rewriter entry points.

The source is tokenized once. A rewrite pass pairs tags into a node tree and
serializes the tree with every component node replaced by placeholder markup.

`TagRewriter.compile` repeats rewrite passes until a pass finds no component
tag left to rewrite. A tag that only pairs up once an enclosing or crossing tag
has been rewritten is picked up by a later pass, so that compiling the output
again never changes it. Later passes only see the tags left unpaired by the
previous one; generated placeholder markup is never scanned for tags.

Example:
    ```python
    from hydratag import compile

    compile('<User_Card $id="42" />', dialect="blade")
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from hydratag.config.logging import get_logger
from hydratag.constants import DEFAULT_MAX_DEPTH
from hydratag.rewriter.dialects import Dialect, get_host_dialect
from hydratag.rewriter.emitter import PlaceholderEmitter
from hydratag.rewriter.lexer import tokenize
from hydratag.rewriter.tree import build_tree

if TYPE_CHECKING:
    from hydratag.config.logging import HydratagLogger
    from hydratag.config.model import Config
    from hydratag.rewriter.dialects import HostDialect
    from hydratag.rewriter.emitter import RenderedText
    from hydratag.rewriter.lexer import TagToken

logger: HydratagLogger = get_logger(__name__)

# Upper bound on rewrite passes for one source. Each pass after the first only
# sees tags that were shadowed by a crossing tag in the previous pass.
MAX_PASSES: Final[int] = 32


@dataclass(frozen=True, slots=True)
class CompileResult:
    """Outcome of compiling one template file.

    Attributes:
        path (Path): The source file.
        original (str): File contents as read.
        compiled (str): Compiled template text.
        components (int): Number of component tags rewritten.
    """

    path: Path
    original: str
    compiled: str
    components: int

    @property
    def changed(self) -> bool:
        """True if compiling altered the file contents."""
        return self.compiled != self.original


class TagRewriter:
    """Reusable component tag rewriter.

    Args:
        config (Config | None): Frozen configuration to take the dialect and
            nesting limit from. Defaults apply when ``None``.
        dialect (Dialect | str | None): Overrides the configured dialect.
        max_depth (int | None): Overrides the configured nesting limit.

    Raises:
        ValueError: If the dialect is unknown or ``max_depth`` is smaller than 1.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        dialect: Dialect | str | None = None,
        max_depth: int | None = None,
    ) -> None:
        if dialect is None:
            dialect = config.dialect if config is not None else Dialect.JINJA
        if max_depth is None:
            max_depth = config.max_depth if config is not None else DEFAULT_MAX_DEPTH
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1 (got {max_depth})")

        self.host: HostDialect = get_host_dialect(dialect)
        self.max_depth: int = max_depth
        self._emitter = PlaceholderEmitter(self.host, max_depth)

    @property
    def dialect(self) -> Dialect:
        """The active host dialect."""
        return self.host.dialect

    def compile(self, source: str) -> str:
        """Return ``source`` with every component tag replaced by placeholder markup.

        Text that is not part of a recognized component tag is reproduced
        unchanged, including malformed or unmatched tags.

        Args:
            source (str): Template source.

        Returns:
            str: Compiled template text.

        Raises:
            NestingDepthError: If components nest deeper than ``max_depth``.
        """
        return self._compile(source)[0]

    def _compile(self, source: str) -> tuple[str, int]:
        text: str = source
        tokens: list[TagToken] = tokenize(source, self.host)
        total: int = 0
        for n in range(1, MAX_PASSES + 1):
            rendered: RenderedText = self._emitter.render(build_tree(text, tokens))
            logger.trace(
                "compile: pass %d rewrote %d component tag(s)", n, rendered.components
            )
            if rendered.components == 0:
                break
            text, tokens = rendered.text, rendered.pending
            total += rendered.components
        else:
            logger.warning(
                "compile: component tags still found after %d passes; output may not be stable",
                MAX_PASSES,
            )
        logger.debug(
            "compile: %d component tag(s) rewritten (dialect=%s)", total, self.dialect.value
        )
        return text, total

    def compile_file(self, path: Path | str) -> CompileResult:
        """Read a UTF-8 template file and compile it.

        The file is not modified.

        Args:
            path (Path | str): Template file.

        Returns:
            CompileResult: Original and compiled text.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid UTF-8.
            NestingDepthError: If components nest deeper than ``max_depth``.
        """
        path = Path(path)
        # newline="" keeps line endings byte for byte
        with path.open("r", encoding="utf-8", newline="") as fh:
            original: str = fh.read()
        compiled, components = self._compile(original)
        return CompileResult(path=path, original=original, compiled=compiled, components=components)


def compile(  # noqa: A001 - mirrors the rewriter operation name
    source: str,
    *,
    dialect: Dialect | str = Dialect.JINJA,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """Compile template source with a one-off `TagRewriter`.

    Args:
        source (str): Template source.
        dialect (Dialect | str): Host template dialect.
        max_depth (int): Maximum component nesting depth.

    Returns:
        str: Compiled template text.

    Raises:
        ValueError: If the dialect is unknown or ``max_depth`` is smaller than 1.
        NestingDepthError: If components nest deeper than ``max_depth``.
    """
    return TagRewriter(dialect=dialect, max_depth=max_depth).compile(source)
