"""
Tests for the filtering sink decorator
"""

from unittest.mock import MagicMock

import pytest

from logfilter.config import FilterConfig
from logfilter.core import FilteringSink, Sink, check_any_level
from logfilter.filtering import ALWAYS_TRUE, CustomFilter, LogEntry, by_namespaces
from logfilter.levels import Level
from logfilter.rules import parse_rules


class TestFilteringSink:
    def setup_method(self):
        self.next_sink = MagicMock(spec=Sink)
        self.sink = FilteringSink(self.next_sink, by_namespaces("demo*"))

    def test_check(self):
        assert self.sink.check(LogEntry(Level.DEBUG, "demo")) is True
        assert self.sink.check(LogEntry(Level.DEBUG, "other")) is False
        self.next_sink.write.assert_not_called()

    def test_write_forwards_admitted_entries(self):
        entry = LogEntry(Level.INFO, "demo.child", "hello")
        fields = [("user", "alice")]
        result = self.sink.write(entry, fields)

        self.next_sink.write.assert_called_once_with(entry, fields)
        assert result is self.next_sink.write.return_value

    def test_write_drops_rejected_entries(self):
        result = self.sink.write(LogEntry(Level.INFO, "other"), [])
        assert result is None
        self.next_sink.write.assert_not_called()

    def test_write_errors_propagate(self):
        self.next_sink.write.side_effect = IOError("disk full")
        with pytest.raises(IOError, match="disk full"):
            self.sink.write(LogEntry(Level.INFO, "demo"), [])

    def test_write_sees_fields(self):
        def has_fields(entry, fields):
            return bool(fields)

        sink = FilteringSink(self.next_sink, CustomFilter(has_fields))
        entry = LogEntry(Level.INFO, "demo")

        assert sink.check(entry) is False
        sink.write(entry, [("request_id", "abc")])
        self.next_sink.write.assert_called_once_with(entry, [("request_id", "abc")])

    def test_with_fields_shares_predicate(self):
        child = self.sink.with_fields([("service", "api")])

        self.next_sink.with_fields.assert_called_once_with([("service", "api")])
        assert isinstance(child, FilteringSink)
        assert child.next is self.next_sink.with_fields.return_value
        assert child.predicate is self.sink.predicate

    def test_enabled_delegates_without_filtering(self):
        self.next_sink.enabled.return_value = True
        assert self.sink.enabled(Level.DEBUG) is True
        self.next_sink.enabled.assert_called_once_with(Level.DEBUG)

        self.next_sink.enabled.return_value = False
        assert self.sink.enabled(Level.ERROR) is False

    def test_flush_delegates(self):
        assert self.sink.flush() is self.next_sink.flush.return_value
        self.next_sink.flush.assert_called_once_with()

    def test_flush_errors_propagate(self):
        self.next_sink.flush.side_effect = OSError("closed")
        with pytest.raises(OSError):
            self.sink.flush()

    def test_missing_predicate_drops_everything(self):
        sink = FilteringSink(self.next_sink)
        assert sink.check(LogEntry(Level.FATAL, "demo")) is False
        sink.write(LogEntry(Level.FATAL, "demo"), [])
        self.next_sink.write.assert_not_called()

    def test_decorators_can_be_stacked(self):
        inner = FilteringSink(self.next_sink, parse_rules("error+:*"))
        outer = FilteringSink(inner, by_namespaces("demo*"))

        outer.write(LogEntry(Level.ERROR, "demo"), [])
        outer.write(LogEntry(Level.INFO, "demo"), [])
        outer.write(LogEntry(Level.ERROR, "other"), [])

        assert self.next_sink.write.call_count == 1

    def test_from_config(self):
        sink = FilteringSink.from_config(
            self.next_sink, FilterConfig(rules="warn+:app.*")
        )
        assert sink.check(LogEntry(Level.WARN, "app.db")) is True
        assert sink.check(LogEntry(Level.INFO, "app.db")) is False

    def test_from_disabled_config_admits_everything(self):
        sink = FilteringSink.from_config(
            self.next_sink, FilterConfig(rules="error:nothing", enabled=False)
        )
        assert sink.predicate is ALWAYS_TRUE


class TestCheckAnyLevel:
    def test_some_level_enabled(self):
        sink = FilteringSink(MagicMock(spec=Sink), parse_rules("error:app.db"))
        assert check_any_level(sink, "app.db") is True
        assert check_any_level(sink, "app.web") is False

    def test_panic_and_fatal_are_ignored(self):
        sink = FilteringSink(MagicMock(spec=Sink), parse_rules("panic+:*"))
        assert check_any_level(sink, "app") is False

        sink = FilteringSink(MagicMock(spec=Sink), parse_rules("dpanic:*"))
        assert check_any_level(sink, "app") is True

    def test_nothing_enabled(self):
        assert check_any_level(FilteringSink(MagicMock(spec=Sink), parse_rules(""))) is False

    def test_root_logger(self):
        sink = FilteringSink(MagicMock(spec=Sink), parse_rules("*"))
        assert check_any_level(sink) is True
