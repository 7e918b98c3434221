"""
Compact rule language for building filters from configuration strings

A rule string holds whitespace-separated rules of the form
``[levels:]namespaces``::

    *                       everything
    debug:*                 debug entries from any logger
    info,warn:myns.*        info or warn entries from loggers under myns.
    error+:*                error and anything more severe
    foo*,-foo.foo           any level, foo* loggers except foo.foo

An entry is admitted when it satisfies at least one rule.
"""

import logging
from typing import List

from .errors import RuleParseError, RuleSyntaxError
from .filtering import AllOf, AnyOf, ExactLevel, Predicate, by_namespaces
from .levels import ALL_LEVELS, parse_levels

logger = logging.getLogger(__name__)

LEVEL_SEPARATOR = ":"


def parse_rule(rule: str) -> Predicate:
    """Compile a single ``[levels:]namespaces`` rule"""
    left, sep, right = rule.partition(LEVEL_SEPARATOR)
    if not sep:
        left, right = "", rule
    elif not left or not right:
        raise RuleSyntaxError(rule)

    levels = parse_levels(left.split(","))
    namespaces = by_namespaces(right)
    if levels == ALL_LEVELS:
        return namespaces

    level_filter = AnyOf(*(ExactLevel(level) for level in sorted(levels)))
    return AllOf(level_filter, namespaces)


def parse_rules(text: str) -> Predicate:
    """
    Compile a rule string into a predicate.

    Raises RuleSyntaxError or UnsupportedKeywordError (both RuleParseError)
    on invalid input. An empty string yields a predicate admitting nothing.
    """
    clauses: List[Predicate] = []
    for rule in text.split():
        clause = parse_rule(rule)
        logger.debug("Compiled filter rule %r as %r", rule, clause)
        clauses.append(clause)
    return AnyOf(*clauses)


def must_parse_rules(text: str) -> Predicate:
    """
    Like parse_rules, but treat a bad rule string as a fatal configuration
    fault and exit. Meant for process startup only.
    """
    try:
        return parse_rules(text)
    except RuleParseError as e:
        logger.critical("Invalid log filter rules %r: %s", text, e)
        raise SystemExit(f"invalid log filter rules: {e}") from e
