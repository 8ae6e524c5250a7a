"""Glob patterns over dotted package names.

Syntax (per dot-separated segment):
    **   any number of segments, including none
    *    exactly one segment
    ?    one character inside a segment

Boundary forms:
    **.controller.**   any name with a segment named controller
    app.**             app itself and everything below it
    **.orders          orders and anything ending in .orders
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_ANY_PREFIX = r"(?:.*\.)?"
_ANY_SUFFIX = r"(?:\..*)?"


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Package pattern compiled to an anchored regex.

    Attributes:
        original: Pattern as written
        regex: Equivalent compiled regex
    """

    original: str
    regex: re.Pattern[str]

    def match(self, name: str) -> bool:
        """True if the dotted name matches.

        Raises:
            TypeError: If name is None
        """
        if name is None:
            raise TypeError("name must not be None")
        return self.regex.fullmatch(name) is not None

    def __str__(self) -> str:
        return self.original

    def __repr__(self) -> str:
        return f"CompiledPattern({self.original!r})"


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a package pattern.

    FAIL-FIRST: empty patterns and empty segments ("a..b", ".a", "a.")
    raise ValueError.

    Args:
        pattern: Glob over dotted names

    Returns:
        CompiledPattern

    Raises:
        ValueError: If pattern is empty or malformed
    """
    if not pattern:
        raise ValueError("pattern must not be empty")

    segments = pattern.split(".")
    if not all(segments):
        raise ValueError(f"invalid pattern '{pattern}': empty segment")

    if segments == ["**"]:
        return CompiledPattern(original=pattern, regex=re.compile(r".*"))

    last = len(segments) - 1
    parts: list[str] = []
    needs_dot = False
    for i, segment in enumerate(segments):
        if segment == "**":
            # Leading: optional prefix ending in a dot. Elsewhere: optional
            # dotted tail; a following segment still needs its own dot.
            parts.append(_ANY_PREFIX if i == 0 else _ANY_SUFFIX)
            needs_dot = 0 < i < last
            continue
        if needs_dot:
            parts.append(r"\.")
        parts.append(_translate_segment(segment))
        needs_dot = True

    regex = re.compile("".join(parts))
    return CompiledPattern(original=pattern, regex=regex)


def _translate_segment(segment: str) -> str:
    """Translate wildcards inside one segment to regex."""
    out: list[str] = []
    i = 0
    while i < len(segment):
        char = segment[i]
        if segment.startswith("**", i):
            out.append(".*")
            i += 2
            continue
        if char == "*":
            out.append(r"[^.]+")
        elif char == "?":
            out.append(r"[^.]")
        else:
            out.append(re.escape(char))
        i += 1
    return "".join(out)


def matches_any(name: str, patterns: tuple[CompiledPattern, ...]) -> bool:
    """True if name matches at least one pattern."""
    return any(p.match(name) for p in patterns)
