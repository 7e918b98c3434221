"""
Filtering decorator for log sinks
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from .config import FilterConfig, get_default_config
from .filtering import ALWAYS_FALSE, Fields, LogEntry, Predicate
from .levels import Level


class Sink(ABC):
    """Downstream log writer wrapped by a FilteringSink"""

    @abstractmethod
    def enabled(self, level: Level) -> bool:
        """Whether the sink accepts entries at this level"""
        pass

    @abstractmethod
    def write(self, entry: LogEntry, fields: Fields) -> Any:
        """Write one entry with its fields"""
        pass

    @abstractmethod
    def with_fields(self, fields: Fields) -> "Sink":
        """Return a sink that adds the given context fields to every write"""
        pass

    @abstractmethod
    def flush(self) -> Any:
        """Flush buffered entries, if any"""
        pass


class FilteringSink(Sink):
    """
    Forward entries to the wrapped sink only when the predicate admits them.

    FilteringSink is itself a Sink, so decorators can be stacked. Errors
    raised by the wrapped sink propagate unchanged.
    """

    def __init__(self, next_sink: Sink, predicate: Optional[Predicate] = None):
        self.next = next_sink
        self.predicate = predicate if predicate is not None else ALWAYS_FALSE

    @classmethod
    def from_config(
        cls, next_sink: Sink, config: Optional[FilterConfig] = None
    ) -> "FilteringSink":
        """Wrap a sink with the predicate described by a FilterConfig"""
        config = config or get_default_config()
        return cls(next_sink, config.build_predicate())

    def check(self, entry: LogEntry) -> bool:
        """Cheap pre-write admission check, evaluated without fields"""
        return self.predicate.evaluate(entry, None)

    def write(self, entry: LogEntry, fields: Fields) -> Any:
        if not self.predicate.evaluate(entry, fields):
            return None
        return self.next.write(entry, fields)

    def with_fields(self, fields: Fields) -> "FilteringSink":
        return FilteringSink(self.next.with_fields(fields), self.predicate)

    def enabled(self, level: Level) -> bool:
        # level gate only; namespace rules are enforced by check()
        return self.next.enabled(level)

    def flush(self) -> Any:
        return self.next.flush()

    def __repr__(self) -> str:
        return f"FilteringSink({self.next!r}, {self.predicate!r})"


def check_any_level(sink: FilteringSink, logger_name: str = "") -> bool:
    """
    Whether at least one level is admitted for the given logger name.

    PANIC and FATAL are skipped since they are never suppressed.
    """
    for level in Level:
        if level >= Level.PANIC:
            continue
        if sink.check(LogEntry(level=level, logger_name=logger_name)):
            return True
    return False
