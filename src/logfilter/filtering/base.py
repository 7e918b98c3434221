"""
Base classes for the predicate algebra
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

from ..levels import Level

# Key/value pairs written along with an entry. None during a pre-write check.
Fields = Optional[Sequence[Tuple[str, Any]]]


@dataclass(frozen=True)
class LogEntry:
    """A log event as seen by the filters"""

    level: Level
    logger_name: str = ""
    message: str = ""


class Predicate(ABC):
    """Pure admission decision over an entry and its fields"""

    @abstractmethod
    def evaluate(self, entry: LogEntry, fields: Fields = None) -> bool:
        """Return True if the entry should be forwarded"""
        pass

    def __call__(self, entry: LogEntry, fields: Fields = None) -> bool:
        return self.evaluate(entry, fields)
