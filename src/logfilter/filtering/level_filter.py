"""
Level-based predicates
"""

from .base import Fields, LogEntry, Predicate
from ..levels import Level


class ExactLevel(Predicate):
    """Admit entries with exactly the given level"""

    def __init__(self, level: Level):
        self.level = Level(level)

    def evaluate(self, entry: LogEntry, fields: Fields = None) -> bool:
        return entry.level == self.level

    def __repr__(self) -> str:
        return f"ExactLevel({self.level.name})"


class MinimumLevel(Predicate):
    """Admit entries at the given level or more severe"""

    def __init__(self, level: Level):
        self.level = Level(level)

    def evaluate(self, entry: LogEntry, fields: Fields = None) -> bool:
        return entry.level >= self.level

    def __repr__(self) -> str:
        return f"MinimumLevel({self.level.name})"
