# topmark:header:start
#
#   project      : HydraTag
#   file         : colored_enum.py
#   file_relpath : src/hydratag/utils/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enum members that carry a colorizer for human-facing output.

`ColoredStrEnum` keeps the member value a plain string (so hashing, equality
and ``repr`` behave as usual) and stores a colorizer next to it::

    class Outcome(ColoredStrEnum):
        OK = ("ok", chalk.green)

    Outcome.OK.value          # 'ok'
    Outcome.OK.color("done")  # green 'done'
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display (compatible with ``yachalk.ChalkBuilder``)."""

    def __call__(self, *args: object, sep: str = " ") -> str: ...


class ColoredStrEnum(str, Enum):
    """String enum whose members carry an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """The textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The colorizer associated with the member."""
        return self._color
