# Area: Shared Tests
"""Tests for logging setup and protocol mode."""

import json
import sys
import logging

import pytest

from board_player._shared import (
    disable_protocol_mode,
    is_protocol_mode_enabled,
    level_for_verbosity,
    setup_logging,
    setup_verbosity,
)
from board_player._shared.logging_formatters import (
    JSONFormatter,
    ProtocolFilter,
    TerminalFormatter,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    disable_protocol_mode()
    pkg_logger = logging.getLogger("board_player")
    for handler in list(pkg_logger.handlers):
        handler.close()
    pkg_logger.handlers.clear()


def make_record(level=logging.INFO, msg="hello"):
    return logging.LogRecord("board_player.test", level, __file__, 1, msg, None, None)


class TestVerbosity:
    """Tests for the -v count mapping."""

    @pytest.mark.parametrize("verbose,level", [
        (0, logging.WARNING),
        (1, logging.INFO),
        (2, logging.DEBUG),
        (5, logging.DEBUG),
    ])
    def test_level_for_verbosity(self, verbose, level):
        assert level_for_verbosity(verbose) == level

    def test_single_v_enables_protocol_mode(self):
        setup_verbosity(1, log_file_path="")
        assert is_protocol_mode_enabled()

    def test_double_v_disables_protocol_mode(self):
        setup_verbosity(1, log_file_path="")
        setup_verbosity(2, log_file_path="")
        assert not is_protocol_mode_enabled()
        assert logging.getLogger("board_player").level == logging.DEBUG


class TestSetupLogging:
    """Tests for setup_logging handlers."""

    def test_empty_path_has_terminal_handler_only(self):
        setup_logging(log_file_path="")
        handlers = logging.getLogger("board_player").handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, TerminalFormatter)

    def test_file_handler_writes_json(self, tmp_path):
        """Test that the file handler writes one JSON object per record."""
        path = tmp_path / "logs" / "player.log"
        setup_logging(log_file_path=str(path), level=logging.INFO)
        logging.getLogger("board_player.test").info("game started")
        for handler in logging.getLogger("board_player").handlers:
            handler.flush()

        entry = json.loads(path.read_text().splitlines()[-1])
        assert entry["level"] == "INFO"
        assert entry["logger"] == "board_player.test"
        assert entry["message"] == "game started"

    def test_printed_record_goes_to_file_only(self, tmp_path, capsys):
        """Test that a line already printed to stdout is not echoed again."""
        path = tmp_path / "player.log"
        setup_logging(log_file_path=str(path), level=logging.INFO)
        logging.getLogger("board_player.test").info("O won", extra={"printed": True})
        for handler in logging.getLogger("board_player").handlers:
            handler.flush()

        assert "O won" not in capsys.readouterr().out
        entry = json.loads(path.read_text().splitlines()[-1])
        assert entry["message"] == "O won"

    def test_does_not_propagate(self):
        setup_logging(log_file_path="")
        assert logging.getLogger("board_player").propagate is False


class TestFormatters:
    """Tests for formatter and filter classes."""

    def test_protocol_filter_follows_mode(self):
        record = make_record()
        assert ProtocolFilter().filter(record) is True
        setup_verbosity(1, log_file_path="")
        assert ProtocolFilter().filter(record) is False

    def test_protocol_filter_drops_printed_records(self):
        record = make_record()
        record.printed = True
        assert ProtocolFilter().filter(record) is False

    def test_terminal_formatter_leaves_record_untouched(self):
        """Test that coloring does not leak into other handlers."""
        record = make_record(logging.WARNING)
        text = TerminalFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert "\033[33m" in text
        assert record.levelname == "WARNING"

    def test_json_formatter_includes_exception(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = logging.LogRecord(
                "board_player.test", logging.ERROR, __file__, 1, "oops", None, sys.exc_info()
            )
        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "oops"
        assert "ValueError" in data["exception"]
