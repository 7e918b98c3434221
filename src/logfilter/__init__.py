"""
Log Filter Library

Rule-based admission filtering for log entries by level and logger namespace,
usable as a sink decorator or as a standard library logging filter/handler.
"""

__version__ = "0.1.0"

from .config import FilterConfig, get_default_config, set_default_config
from .core import FilteringSink, Sink, check_any_level
from .errors import RuleParseError, RuleSyntaxError, UnsupportedKeywordError
from .filtering import (
    ALWAYS_FALSE,
    ALWAYS_TRUE,
    AllOf,
    AnyOf,
    CustomFilter,
    ExactLevel,
    LogEntry,
    MinimumLevel,
    NamespaceFilter,
    Not,
    Predicate,
    by_namespaces,
)
from .handlers import (
    FilteringHandler,
    HandlerSink,
    RuleFilter,
    logger_has_enabled_level,
    wrap_handler,
)
from .levels import ALL_LEVELS, Level, parse_level_token, parse_levels
from .rules import must_parse_rules, parse_rule, parse_rules

__all__ = [
    "ALL_LEVELS",
    "ALWAYS_FALSE",
    "ALWAYS_TRUE",
    "AllOf",
    "AnyOf",
    "CustomFilter",
    "ExactLevel",
    "FilterConfig",
    "FilteringHandler",
    "FilteringSink",
    "HandlerSink",
    "Level",
    "LogEntry",
    "MinimumLevel",
    "NamespaceFilter",
    "Not",
    "Predicate",
    "RuleFilter",
    "RuleParseError",
    "RuleSyntaxError",
    "Sink",
    "UnsupportedKeywordError",
    "by_namespaces",
    "check_any_level",
    "get_default_config",
    "logger_has_enabled_level",
    "must_parse_rules",
    "parse_level_token",
    "parse_levels",
    "parse_rule",
    "parse_rules",
    "set_default_config",
    "wrap_handler",
]
