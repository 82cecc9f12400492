"""Tests for the logging system."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from symbolic_math import logging_system
from symbolic_math import Expression, Symbol, LogLevel, configure_logging, set_log_level, get_logger


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    for handler in get_logger().logger.handlers:
        handler.close()
    configure_logging(LogLevel.MODERATE)


class TestLogging:
    """Debug output from evaluation and rendering."""

    def test_verbose_reports_failed_evaluation(self, capsys):
        configure_logging(LogLevel.VERBOSE)
        x = Symbol("x")
        Expression(x + 1).evaluate()
        assert "undefined symbol" in capsys.readouterr().out

    def test_verbose_reports_unnamed_symbol(self, capsys):
        configure_logging(LogLevel.VERBOSE)
        Expression(Symbol("q")).render()
        assert "no name for symbol q" in capsys.readouterr().out

    def test_default_level_is_quiet(self, capsys):
        configure_logging(LogLevel.MODERATE)
        Expression(Symbol("x")).evaluate()
        assert capsys.readouterr().out == ""

    def test_recursive_override_warns(self, capsys):
        configure_logging(LogLevel.MINIMAL)
        x = Symbol("x")
        Expression(x + 1 + 1, traversal='recursive', max_recursive_depth=2)
        assert "recursion limit" in capsys.readouterr().out

    def test_leaving_silent_restores_output(self, capsys):
        """Raising the level after SILENT attaches a console handler again."""
        configure_logging(LogLevel.SILENT)
        set_log_level(LogLevel.VERBOSE)
        Expression(Symbol("x")).evaluate()
        assert "undefined symbol" in capsys.readouterr().out

    def test_set_log_level_keeps_single_console_handler(self):
        configure_logging(LogLevel.MODERATE)
        set_log_level(LogLevel.VERBOSE)
        set_log_level(LogLevel.MINIMAL)
        assert len(get_logger().logger.handlers) == 1

    def test_concurrent_get_logger_builds_one_logger(self):
        """Lazy creation from many threads yields one shared instance."""
        logging_system._global_logger = None
        with ThreadPoolExecutor(max_workers=8) as pool:
            loggers = list(pool.map(lambda _: get_logger(), range(64)))
        assert all(logger is loggers[0] for logger in loggers)
        assert len(loggers[0].logger.handlers) == 1

    def test_set_log_level(self):
        set_log_level(LogLevel.SILENT)
        assert get_logger().log_level == LogLevel.SILENT

    def test_log_file(self, tmp_path):
        path = tmp_path / "run.log"
        configure_logging(LogLevel.VERBOSE, log_to_file=True, log_file_path=str(path))
        Expression(Symbol("x")).evaluate()
        get_logger().logger.handlers[-1].flush()
        assert "undefined symbol" in path.read_text()
