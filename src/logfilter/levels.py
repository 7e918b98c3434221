"""
Severity levels and level keyword parsing for filtering rules
"""

import logging
from enum import IntEnum
from typing import FrozenSet, Iterable

from .errors import UnsupportedKeywordError


class Level(IntEnum):
    """Totally ordered log severity, least severe first"""

    DEBUG = -1
    INFO = 0
    WARN = 1
    ERROR = 2
    DPANIC = 3
    PANIC = 4
    FATAL = 5

    @classmethod
    def from_logging(cls, levelno: int) -> "Level":
        """
        Map a stdlib logging level number onto the severity scale.

        Custom levels up to ERROR map to the next standard level above them;
        levels between ERROR and CRITICAL stay ERROR, so only CRITICAL and
        above map to FATAL.
        """
        if levelno <= logging.DEBUG:
            return cls.DEBUG
        if levelno <= logging.INFO:
            return cls.INFO
        if levelno <= logging.WARNING:
            return cls.WARN
        if levelno < logging.CRITICAL:
            return cls.ERROR
        return cls.FATAL

    def to_logging(self) -> int:
        """Closest stdlib logging level number"""
        return _TO_LOGGING[self]


_TO_LOGGING = {
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.DPANIC: logging.CRITICAL,
    Level.PANIC: logging.CRITICAL,
    Level.FATAL: logging.CRITICAL,
}

ALL_LEVELS: FrozenSet[Level] = frozenset(Level)


def levels_from(level: Level) -> FrozenSet[Level]:
    """The given level and every more severe one"""
    return frozenset(lvl for lvl in Level if lvl >= level)


def parse_level_token(token: str) -> FrozenSet[Level]:
    """Parse one level keyword: ``info``, ``info+``, ``*`` or empty"""
    keyword = token.lower()
    if keyword in ("", "*"):
        return ALL_LEVELS

    or_above = keyword.endswith("+")
    name = keyword[:-1] if or_above else keyword
    try:
        level = Level[name.upper()]
    except KeyError:
        raise UnsupportedKeywordError(token) from None

    # str.upper() folds some non-ASCII letters onto ASCII ones ("ınfo")
    if name != level.name.lower():
        raise UnsupportedKeywordError(token)

    return levels_from(level) if or_above else frozenset((level,))


def parse_levels(tokens: Iterable[str]) -> FrozenSet[Level]:
    """Union of the level sets selected by each keyword"""
    enabled: FrozenSet[Level] = frozenset()
    for token in tokens:
        enabled |= parse_level_token(token)
    return enabled
