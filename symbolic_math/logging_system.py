"""
Logging System for Symbolic Math

Centralized logging with verbosity levels. The expression code only emits
debug messages (failed evaluations, unnamed symbols during rendering,
traversal selection), so nothing is printed unless the level is VERBOSE.
"""

import logging
import sys
import threading
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Verbosity levels"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Warnings and essential info
    MODERATE = 2    # Default
    DETAILED = 3
    VERBOSE = 4     # Everything, including debug details


class SymbolicMathLogger:
    """
    Centralized logger for expression building and evaluation
    """

    def __init__(self, log_level: LogLevel = LogLevel.MODERATE,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.log_file_path = log_file_path

        self.logger = logging.getLogger('symbolic_math')
        self.logger.setLevel(logging.DEBUG)
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
        self.logger.propagate = False

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"symbolic_math_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            self.log_file_path = log_file_path
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Always logged - critical errors and failures"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[SymbolicMathLogger] = None
_logger_lock = threading.Lock()


def get_logger() -> SymbolicMathLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        with _logger_lock:
            if _global_logger is None:
                _global_logger = SymbolicMathLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level, rebuilding handlers so SILENT can be left"""
    global _global_logger
    with _logger_lock:
        previous = _global_logger
        if previous is None:
            _global_logger = SymbolicMathLogger(log_level=level)
        else:
            _global_logger = SymbolicMathLogger(
                log_level=level,
                log_to_file=previous.log_to_file,
                log_file_path=previous.log_file_path
            )


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> SymbolicMathLogger:
    """Configure the global logging system"""
    global _global_logger
    with _logger_lock:
        _global_logger = SymbolicMathLogger(
            log_level=log_level,
            log_to_file=log_to_file,
            log_file_path=log_file_path
        )
        return _global_logger


def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
