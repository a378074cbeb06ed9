# topmark:header:start
#
#   project      : HydraTag
#   file         : console_api.py
#   file_relpath : src/hydratag/cli/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output surface the HydraTag commands write through.

Commands only depend on this protocol, so tests and other front ends can
supply their own console. Compiled text is written with ``nl=False`` to keep
it byte for byte.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """What a command needs from a console: stdout text, stderr notices, styling."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write program output (reports, compiled templates, TOML) to stdout."""
        ...

    def warn(self, text: str) -> None:
        """Write a one-line notice to stderr."""
        ...

    def error(self, text: str) -> None:
        """Write a one-line error to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` with Click styling applied when color is on."""
        ...
