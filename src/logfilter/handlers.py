"""
Integration with the standard library logging module
"""

import logging
from typing import Any, Iterator, List, Optional, Tuple

from .config import FilterConfig, get_default_config
from .core import Sink
from .filtering import ALWAYS_FALSE, Fields, LogEntry, Predicate
from .levels import Level

CONTEXT_PREFIX = "ctx_"


def entry_from_record(record: logging.LogRecord) -> LogEntry:
    """Build the filter view of a stdlib log record (message left unformatted)"""
    return LogEntry(
        level=Level.from_logging(record.levelno),
        logger_name=_logger_name(record.name),
        message=str(record.msg),
    )


def fields_from_record(record: logging.LogRecord) -> List[Tuple[str, Any]]:
    """Context fields attached to a record as ctx_* attributes"""
    return [
        (key[len(CONTEXT_PREFIX):], value)
        for key, value in vars(record).items()
        if key.startswith(CONTEXT_PREFIX)
    ]


def _logger_name(name: str) -> str:
    # the stdlib root logger is the unnamed logger
    return "" if name == "root" else name


class HandlerSink(Sink):
    """Expose a logging.Handler through the Sink interface"""

    def __init__(self, handler: logging.Handler, context: Fields = None):
        self.handler = handler
        self.context: Tuple[Tuple[str, Any], ...] = tuple(context or ())

    def enabled(self, level: Level) -> bool:
        return level.to_logging() >= self.handler.level

    def write(self, entry: LogEntry, fields: Fields) -> Any:
        record = logging.LogRecord(
            name=entry.logger_name or "root",
            level=entry.level.to_logging(),
            pathname="",
            lineno=0,
            msg=entry.message,
            args=(),
            exc_info=None,
        )
        for key, value in self.context + tuple(fields or ()):
            setattr(record, f"{CONTEXT_PREFIX}{key}", value)
        self.handler.handle(record)

    def with_fields(self, fields: Fields) -> "HandlerSink":
        return HandlerSink(self.handler, self.context + tuple(fields or ()))

    def flush(self) -> Any:
        self.handler.flush()

    def __repr__(self) -> str:
        return f"HandlerSink({self.handler!r})"


class RuleFilter(logging.Filter):
    """logging.Filter that admits records accepted by a predicate"""

    def __init__(self, predicate: Predicate, name: str = ""):
        super().__init__(name)
        self.predicate = predicate

    def check(self, entry: LogEntry) -> bool:
        return self.predicate.evaluate(entry, None)

    def filter(self, record: logging.LogRecord) -> bool:
        return self.predicate.evaluate(
            entry_from_record(record), fields_from_record(record)
        )


class FilteringHandler(logging.Handler):
    """Forward admitted records to a wrapped handler"""

    def __init__(self, target: logging.Handler, predicate: Optional[Predicate] = None):
        super().__init__()
        self.target = target
        self.predicate = predicate if predicate is not None else ALWAYS_FALSE

    def check(self, entry: LogEntry) -> bool:
        """Admission check without fields"""
        return self.predicate.evaluate(entry, None)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            if self.predicate.evaluate(
                entry_from_record(record), fields_from_record(record)
            ):
                self.target.handle(record)
        except Exception:
            self.handleError(record)

    def flush(self) -> None:
        self.target.flush()

    def close(self) -> None:
        try:
            self.target.close()
        finally:
            super().close()


def wrap_handler(
    handler: logging.Handler, config: Optional[FilterConfig] = None
) -> FilteringHandler:
    """Wrap a handler with the rules from the given or default configuration"""
    config = config or get_default_config()
    return FilteringHandler(handler, config.build_predicate())


def _effective_handlers(logger: logging.Logger) -> Iterator[logging.Handler]:
    current: Optional[logging.Logger] = logger
    while current is not None:
        yield from current.handlers
        if not current.propagate:
            break
        current = current.parent


def _handler_admits(handler: logging.Handler, entry: LogEntry) -> bool:
    if entry.level.to_logging() < handler.level:
        return False
    for log_filter in handler.filters:
        if isinstance(log_filter, RuleFilter) and not log_filter.check(entry):
            return False
    if isinstance(handler, FilteringHandler):
        return handler.check(entry)
    return True


def logger_has_enabled_level(logger: logging.Logger) -> bool:
    """
    Whether the logger would emit at least one level somewhere.

    Takes the logger's level, the RuleFilters on the logger and its handlers,
    and the FilteringHandlers it propagates to into account. PANIC and FATAL
    are never suppressed and are not considered.
    """
    name = _logger_name(logger.name)
    rule_filters = [f for f in logger.filters if isinstance(f, RuleFilter)]
    handlers = list(_effective_handlers(logger))

    for level in Level:
        if level >= Level.PANIC:
            continue
        if not logger.isEnabledFor(level.to_logging()):
            continue
        entry = LogEntry(level=level, logger_name=name)
        if not all(f.check(entry) for f in rule_filters):
            continue
        if any(_handler_admits(h, entry) for h in handlers):
            return True
    return False
