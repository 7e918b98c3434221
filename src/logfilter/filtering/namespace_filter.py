"""
Namespace-based filtering on hierarchical logger names
"""

import threading
from typing import Dict, List, Sequence

from .base import Fields, LogEntry, Predicate
from .combinators import ALWAYS_FALSE, ALWAYS_TRUE
from .patterns import GlobPattern

EXCLUDE_PREFIX = "-"


class NamespaceFilter(Predicate):
    """
    Match logger names against inclusion and exclusion glob patterns.

    A name matches when at least one inclusion pattern matches and no
    exclusion pattern does. Verdicts are memoized per logger name; the
    cache is owned by this instance and guarded by its lock.
    """

    def __init__(self, patterns: Sequence[str]):
        self.patterns = [p for p in patterns if p]
        self.include: List[GlobPattern] = []
        self.exclude: List[GlobPattern] = []
        for pattern in self.patterns:
            if pattern.startswith(EXCLUDE_PREFIX):
                self.exclude.append(GlobPattern(pattern[len(EXCLUDE_PREFIX):]))
            else:
                self.include.append(GlobPattern(pattern))

        self._cache: Dict[str, bool] = {}
        self._lock = threading.Lock()

    def matches(self, name: str) -> bool:
        with self._lock:
            verdict = self._cache.get(name)
            if verdict is None:
                verdict = self._compute(name)
                self._cache[name] = verdict
            return verdict

    def _compute(self, name: str) -> bool:
        included = any(p.matches(name) for p in self.include)
        excluded = any(p.matches(name) for p in self.exclude)
        return included and not excluded

    def evaluate(self, entry: LogEntry, fields: Fields = None) -> bool:
        return self.matches(entry.logger_name)

    def cache_size(self) -> int:
        with self._lock:
            return len(self._cache)

    def __repr__(self) -> str:
        return f"NamespaceFilter({','.join(self.patterns)!r})"


def by_namespaces(spec: str) -> Predicate:
    """
    Compile a comma-separated list of glob patterns into a predicate.

    Patterns starting with '-' exclude matching names, e.g.
    ``"foo*,-foo.foo"`` admits ``foo`` and ``foo.bar`` but not ``foo.foo``.
    """
    if not spec:
        return ALWAYS_FALSE

    patterns = [p for p in spec.split(",") if p]
    has_exclude = any(p.startswith(EXCLUDE_PREFIX) for p in patterns)
    if "*" in patterns and not has_exclude:
        return ALWAYS_TRUE

    return NamespaceFilter(patterns)
