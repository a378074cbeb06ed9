# topmark:header:start
#
#   project      : HydraTag
#   file         : dialects.py
#   file_relpath : src/hydratag/rewriter/dialects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host template dialects.

The placeholder markup is the same for every host engine. What differs is the
host code embedded in it:

- the evaluation placeholder used for expression-bound attributes,
- the mapping literal that collects component arguments,
- the payload expression that turns that mapping into HTML-attribute-safe JSON
  at render time, and
- the delimiters of host code regions that must never be scanned for tags.

Two dialects ship with HydraTag: ``blade`` (Laravel Blade, PHP) and ``jinja``
(Jinja2).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Final


class Dialect(str, Enum):
    """Supported host template engines."""

    BLADE = "blade"
    JINJA = "jinja"

    @classmethod
    def parse(cls, value: str | Dialect) -> Dialect:
        """Return the dialect for a (case-insensitive) name.

        Args:
            value (str | Dialect): Dialect name or member.

        Returns:
            Dialect: The matching member.

        Raises:
            ValueError: If ``value`` names no known dialect.
        """
        if isinstance(value, Dialect):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown dialect '{value}'. Must be one of: {choices}") from None


@dataclass(frozen=True, slots=True)
class HostDialect:
    """Host-code fragments emitted for one template engine.

    Attributes:
        dialect (Dialect): The dialect this syntax belongs to.
        opaque_region (re.Pattern[str]): Matches host code regions (echoes, comments,
            statements) in template text; tags inside them are left alone.
        expression_format (str): ``str.format`` pattern for an evaluation placeholder.
        mapping_entry (Callable[[str, str], str]): Renders one ``key``/``value`` code pair.
        mapping_format (str): ``str.format`` pattern wrapping the joined entries.
        payload_format (str): ``str.format`` pattern turning a mapping expression into
            escaped JSON at render time.
    """

    dialect: Dialect
    opaque_region: re.Pattern[str]
    expression_format: str
    mapping_entry: Callable[[str, str], str]
    mapping_format: str
    payload_format: str

    def expression(self, code: str) -> str:
        """Return an evaluation placeholder for host code."""
        return self.expression_format.format(code=code)

    def mapping(self, entries: Sequence[tuple[str, str]]) -> str:
        """Return a mapping literal from ``(key_code, value_code)`` pairs."""
        body = ", ".join(self.mapping_entry(key, value) for key, value in entries)
        return self.mapping_format.format(entries=body)

    def args_payload(self, mapping_code: str) -> str:
        """Return the render-time JSON payload for a mapping expression."""
        return self.payload_format.format(mapping=mapping_code)


# A quoted string literal inside host code; quoted ``}}`` or ``%}`` do not end a region.
_QUOTED: Final[str] = r"'(?:[^'\\]|\\.)*'" + r'|"(?:[^"\\]|\\.)*"'
_CODE: Final[str] = rf"""(?:{_QUOTED}|[^'"])*?"""

BLADE: Final[HostDialect] = HostDialect(
    dialect=Dialect.BLADE,
    opaque_region=re.compile(
        rf"\{{\{{--.*?--\}}\}}|\{{!!{_CODE}!!\}}|\{{\{{{_CODE}\}}\}}", re.DOTALL
    ),
    expression_format="{{{{ {code} }}}}",
    mapping_entry=lambda key, value: f"{key} => {value}",
    mapping_format="[{entries}]",
    payload_format="{{!! htmlspecialchars(json_encode({mapping}), ENT_QUOTES, 'UTF-8') !!}}",
)

# Jinja2 only escapes ``{{ }}`` output under autoescape; ``| e`` escapes plain
# strings and leaves Markup alone.
JINJA: Final[HostDialect] = HostDialect(
    dialect=Dialect.JINJA,
    opaque_region=re.compile(
        rf"\{{#.*?#\}}|\{{%{_CODE}%\}}|\{{\{{{_CODE}\}}\}}", re.DOTALL
    ),
    expression_format="{{{{ ({code}) | e }}}}",
    mapping_entry=lambda key, value: f"{key}: {value}",
    mapping_format="{{{entries}}}",
    payload_format="{{{{ {mapping} | tojson | forceescape }}}}",
)

_DIALECTS: Final[dict[Dialect, HostDialect]] = {
    Dialect.BLADE: BLADE,
    Dialect.JINJA: JINJA,
}


def get_host_dialect(dialect: Dialect | str) -> HostDialect:
    """Return the host syntax for a dialect (member or name).

    Raises:
        ValueError: If ``dialect`` names no known dialect.
    """
    return _DIALECTS[Dialect.parse(dialect)]
