"""Tests for the in-memory log buffer behind the System Logs page."""
import logging

import pytest

from enrichment_monitor.dash_ui.data.log_buffer import (
    BUFFER_SIZE,
    LOG_BUFFER,
    DashLogHandler,
    filter_entries,
    install_log_handler,
)


@pytest.fixture
def buffer_logger():
    """A package child logger feeding a freshly cleared buffer."""
    LOG_BUFFER.clear()
    install_log_handler()
    yield logging.getLogger("enrichment_monitor.tests.buffer")
    LOG_BUFFER.clear()


class TestDashLogHandler:

    def test_records_are_buffered_newest_first(self, buffer_logger):
        buffer_logger.info("first")
        buffer_logger.warning("second")
        assert [e["message"] for e in list(LOG_BUFFER)[:2]] == ["second", "first"]

    def test_entry_fields(self, buffer_logger):
        buffer_logger.error("Toggle for unknown job id %r ignored", "x")
        entry = LOG_BUFFER[0]
        assert entry["level"] == "ERROR"
        assert entry["module"] == "enrichment_monitor.tests.buffer"
        assert entry["message"] == "Toggle for unknown job id 'x' ignored"
        assert len(entry["timestamp"]) == len("2024-04-25 10:00:00")

    def test_buffer_is_bounded(self):
        assert LOG_BUFFER.maxlen == BUFFER_SIZE

    def test_reinstall_replaces_handler(self, buffer_logger):
        install_log_handler()
        package_logger = logging.getLogger("enrichment_monitor")
        handlers = [h for h in package_logger.handlers if isinstance(h, DashLogHandler)]
        assert len(handlers) == 1


class TestFilterEntries:

    ENTRIES = [
        {"level": "DEBUG", "message": "a"},
        {"level": "INFO", "message": "b"},
        {"level": "WARNING", "message": "c"},
        {"level": "ERROR", "message": "d"},
    ]

    @pytest.mark.parametrize("min_level", [None, "", "ALL"])
    def test_all_keeps_everything(self, min_level):
        assert filter_entries(self.ENTRIES, min_level) == self.ENTRIES

    def test_threshold(self):
        kept = filter_entries(self.ENTRIES, "WARNING")
        assert [e["message"] for e in kept] == ["c", "d"]

    def test_returns_new_list(self):
        assert filter_entries(self.ENTRIES, "ALL") is not self.ENTRIES
