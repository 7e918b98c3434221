"""
Path-style glob patterns for logger names

Syntax::

    *        any run of characters except '/'
    ?        any single character except '/'
    [a-z]    character class, '^' right after '[' negates it
    \\c      the literal character c

Logger names are dot-separated, so '*' spans name segments. A malformed
pattern (unterminated or empty class, trailing backslash) never matches.
"""

import logging
import re
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


class BadPatternError(ValueError):
    """Raised internally for a syntactically invalid glob pattern"""


def _class_char(pattern: str, i: int) -> Tuple[str, int]:
    if i >= len(pattern):
        raise BadPatternError(pattern)
    char = pattern[i]
    if char in "-]":
        raise BadPatternError(pattern)
    if char == "\\":
        i += 1
        if i >= len(pattern):
            raise BadPatternError(pattern)
        char = pattern[i]
    return char, i + 1


def _translate_class(pattern: str, i: int) -> Tuple[str, int]:
    negate = i < len(pattern) and pattern[i] == "^"
    if negate:
        i += 1

    ranges: List[Tuple[str, str]] = []
    while True:
        if i >= len(pattern):
            raise BadPatternError(pattern)
        if pattern[i] == "]" and ranges:
            i += 1
            break
        lo, i = _class_char(pattern, i)
        hi = lo
        if i < len(pattern) and pattern[i] == "-":
            hi, i = _class_char(pattern, i + 1)
        ranges.append((lo, hi))

    # inverted ranges are legal and match nothing
    body = "".join(
        re.escape(lo) if lo == hi else f"{re.escape(lo)}-{re.escape(hi)}"
        for lo, hi in ranges
        if lo <= hi
    )
    if not body:
        return (r"[\s\S]" if negate else "(?!)"), i
    return (f"[^{body}]" if negate else f"[{body}]"), i


def translate(pattern: str) -> str:
    """Translate a glob pattern to an equivalent regular expression"""
    parts = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        i += 1
        if char == "*":
            while i < len(pattern) and pattern[i] == "*":
                i += 1
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        elif char == "\\":
            if i >= len(pattern):
                raise BadPatternError(pattern)
            parts.append(re.escape(pattern[i]))
            i += 1
        elif char == "[":
            part, i = _translate_class(pattern, i)
            parts.append(part)
        else:
            parts.append(re.escape(char))
    return "".join(parts)


class GlobPattern:
    """A compiled glob pattern"""

    def __init__(self, pattern: str):
        self.pattern = pattern
        self._regex: Optional[re.Pattern]
        try:
            self._regex = re.compile(translate(pattern), re.DOTALL)
        except BadPatternError:
            logger.debug("Ignoring malformed glob pattern %r", pattern)
            self._regex = None

    @property
    def valid(self) -> bool:
        return self._regex is not None

    def matches(self, name: str) -> bool:
        if self._regex is None:
            return False
        return self._regex.fullmatch(name) is not None

    def __repr__(self) -> str:
        return f"GlobPattern({self.pattern!r})"
