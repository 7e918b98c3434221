"""
Custom function-based predicates
"""

from typing import Callable

from .base import Fields, LogEntry, Predicate


class CustomFilter(Predicate):
    """Predicate backed by a plain function of (entry, fields)"""

    def __init__(
        self,
        filter_func: Callable[[LogEntry, Fields], bool],
        name: str = "custom",
    ):
        self.filter_func = filter_func
        self.name = name

    def evaluate(self, entry: LogEntry, fields: Fields = None) -> bool:
        return bool(self.filter_func(entry, fields))

    def __repr__(self) -> str:
        return f"CustomFilter({self.name!r})"
