"""
Boolean combinators over predicates
"""

from typing import Optional, Tuple

from .base import Fields, LogEntry, Predicate


class _Constant(Predicate):
    def __init__(self, value: bool):
        self.value = value

    def evaluate(self, entry: LogEntry, fields: Fields = None) -> bool:
        return self.value

    def __repr__(self) -> str:
        return "ALWAYS_TRUE" if self.value else "ALWAYS_FALSE"


ALWAYS_TRUE: Predicate = _Constant(True)
ALWAYS_FALSE: Predicate = _Constant(False)


class AnyOf(Predicate):
    """True if at least one predicate is true. None members are skipped."""

    def __init__(self, *predicates: Optional[Predicate]):
        self.predicates: Tuple[Predicate, ...] = tuple(
            p for p in predicates if p is not None
        )

    def evaluate(self, entry: LogEntry, fields: Fields = None) -> bool:
        for predicate in self.predicates:
            if predicate.evaluate(entry, fields):
                return True
        return False

    def __repr__(self) -> str:
        return f"AnyOf({', '.join(map(repr, self.predicates))})"


class AllOf(Predicate):
    """
    True if every predicate is true.

    None members are skipped, and a list with no predicates left is false
    rather than vacuously true, so an empty clause never admits everything.
    """

    def __init__(self, *predicates: Optional[Predicate]):
        self.predicates: Tuple[Predicate, ...] = tuple(
            p for p in predicates if p is not None
        )

    def evaluate(self, entry: LogEntry, fields: Fields = None) -> bool:
        if not self.predicates:
            return False
        for predicate in self.predicates:
            if not predicate.evaluate(entry, fields):
                return False
        return True

    def __repr__(self) -> str:
        return f"AllOf({', '.join(map(repr, self.predicates))})"


class Not(Predicate):
    """Negate a single predicate"""

    def __init__(self, predicate: Predicate):
        self.predicate = predicate

    def evaluate(self, entry: LogEntry, fields: Fields = None) -> bool:
        return not self.predicate.evaluate(entry, fields)

    def __repr__(self) -> str:
        return f"Not({self.predicate!r})"
