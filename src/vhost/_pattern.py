"""Hostname pattern compiler.

Turns a hostname specification into an anchored, case-insensitive
``HostPattern``:

- literal strings have regex metacharacters escaped and each ``*``
  replaced by a group matching one non-empty DNS label (no dots)
- pre-built patterns keep their expression source verbatim
- the result is always anchored at both ends

Patterns are compiled with ``google-re2`` for guaranteed linear-time
matching. RE2 rejects backreferences and lookaround; a pre-built pattern
that uses them is not rejected here but fails with ``PatternError`` the
first time it runs against a hostname.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import re2

from vhost._errors import ArgumentError, PatternError
from vhost._types import PatternLike

if TYPE_CHECKING:
    from vhost._types import HostSpec

logger = logging.getLogger(__name__)

# Metacharacters escaped in literal hostname specifications.
_ESCAPED = ".+?^=!:${}()|[]/\\"
_ESCAPE_TABLE = str.maketrans({c: "\\" + c for c in _ESCAPED})

WILDCARD = "*"
WILDCARD_GROUP = "([^.]+)"


def escape_hostname(value: str) -> str:
    """Escape a literal hostname and expand its ``*`` wildcards."""
    return value.translate(_ESCAPE_TABLE).replace(WILDCARD, WILDCARD_GROUP)


def is_end_anchored(source: str) -> bool:
    """True if ``source`` ends with a ``$`` anchor rather than a literal ``$``.

    Counts the backslashes immediately before the final ``$``. An odd
    count means the dollar itself is escaped.
    """
    if not source.endswith("$"):
        return False
    backslashes = 0
    i = len(source) - 2
    while i >= 0 and source[i] == "\\":
        backslashes += 1
        i -= 1
    return backslashes % 2 == 0


def anchor(source: str) -> str:
    """Force leading and trailing anchors onto an expression source."""
    if not source.startswith("^"):
        source = "^" + source
    if not is_end_anchored(source):
        source += "$"
    return source


@dataclass(frozen=True, slots=True)
class HostPattern:
    """Compiled, anchored, case-insensitive hostname pattern.

    Immutable after construction and safe to share between requests.
    The source is anchored on construction, so ``HostPattern("a.b")``
    and ``HostPattern("^a.b$")`` behave the same.
    """

    source: str
    _compiled: re2.Pattern[str] | None = field(init=False, repr=False, compare=False)
    _error: str | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        source = anchor(self.source)
        object.__setattr__(self, "source", source)
        try:
            compiled = re2.compile("(?i)" + source)
        except re2.error as e:
            logger.debug("deferring failure of host pattern %r: %s", source, e)
            object.__setattr__(self, "_compiled", None)
            object.__setattr__(self, "_error", str(e))
            return
        object.__setattr__(self, "_compiled", compiled)
        object.__setattr__(self, "_error", None)

    @property
    def pattern(self) -> str:
        """The anchored expression source."""
        return self.source

    def match(self, hostname: str) -> tuple[str | None, ...] | None:
        """Run the pattern against a hostname.

        Returns the capture groups (excluding the whole match), with
        ``None`` for groups that did not participate, or ``None`` when
        the hostname does not match.

        Raises:
            PatternError: If the source could not be compiled by RE2.
        """
        if self._compiled is None:
            raise PatternError(self.source, self._error or "not compiled")
        m = self._compiled.search(hostname)
        if m is None:
            return None
        return m.groups()


def compile_host_pattern(spec: HostSpec) -> HostPattern:
    """Compile a hostname specification into a ``HostPattern``.

    A ``HostPattern`` is returned unchanged. Other pre-built patterns
    contribute their ``.pattern`` source as-is; strings are escaped and
    wildcard-expanded first.

    Raises:
        ArgumentError: If ``spec`` is neither a string nor a pattern.
    """
    if isinstance(spec, HostPattern):
        return spec
    if isinstance(spec, str):
        source = escape_hostname(spec)
    elif isinstance(spec, PatternLike) and isinstance(spec.pattern, str):
        source = spec.pattern
    else:
        msg = f"hostname must be a string or pattern, got {type(spec).__name__}"
        raise ArgumentError(msg)

    compiled = HostPattern(source)
    logger.debug("compiled host pattern %r from %r", compiled.source, spec)
    return compiled
