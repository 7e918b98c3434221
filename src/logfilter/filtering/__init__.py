"""
Composable predicates deciding which log entries reach a sink
"""

from .base import Fields, LogEntry, Predicate
from .combinators import ALWAYS_FALSE, ALWAYS_TRUE, AllOf, AnyOf, Not
from .custom_filter import CustomFilter
from .level_filter import ExactLevel, MinimumLevel
from .namespace_filter import NamespaceFilter, by_namespaces
from .patterns import GlobPattern

__all__ = [
    "ALWAYS_FALSE",
    "ALWAYS_TRUE",
    "AllOf",
    "AnyOf",
    "CustomFilter",
    "ExactLevel",
    "Fields",
    "GlobPattern",
    "LogEntry",
    "MinimumLevel",
    "NamespaceFilter",
    "Not",
    "Predicate",
    "by_namespaces",
]
