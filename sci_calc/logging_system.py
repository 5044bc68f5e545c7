"""
Logging System for the Calculator

This module provides a centralized logging system with different verbosity levels
so that the expression engine can report what it did without cluttering the terminal.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the calculator"""
    SILENT = 0      # No output
    MINIMAL = 1     # Handlers attached, nothing routine
    MODERATE = 2    # General information
    DETAILED = 3    # Per-operation summaries
    VERBOSE = 4     # All information including simplifier traces


class CalculatorLogger:
    """
    Centralized logger for the calculator with level-aware filtering
    """

    def __init__(self, log_level: LogLevel = LogLevel.MODERATE,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        # Create logger
        self.logger = logging.getLogger('sci_calc')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()  # Remove any existing handlers

        # Create formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # Console handler
        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler (optional)
        if log_to_file:
            if log_file_path is None:
                log_file_path = f"sci_calc_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def is_enabled(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def info(self, message: str, *args, required_level: LogLevel = LogLevel.MODERATE):
        """General information with configurable level; args are formatted lazily"""
        if self.is_enabled(required_level):
            self.logger.info(message, *args)

    def debug(self, message: str, *args):
        """Debug information - only in verbose mode"""
        if self.is_enabled(LogLevel.VERBOSE):
            self.logger.debug("DEBUG: " + message, *args)


# Global logger instance
_global_logger: Optional[CalculatorLogger] = None


def get_logger() -> CalculatorLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = CalculatorLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = CalculatorLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> CalculatorLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = CalculatorLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_info(message: str, *args, level: LogLevel = LogLevel.MODERATE):
    """Log info message at specified level"""
    get_logger().info(message, *args, required_level=level)


def log_debug(message: str, *args):
    """Log debug message"""
    get_logger().debug(message, *args)
