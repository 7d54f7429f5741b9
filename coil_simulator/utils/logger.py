"""
Coil Simulator - Logging System
===============================
Logging with console/file output and performance tracking.

Author: Coil Build Lab
Version: 1.0.0
"""

import logging
import os
import sys
import time
from datetime import datetime
from typing import Optional, Dict, Any, Callable
from functools import wraps
import threading
from contextlib import contextmanager


LOGGER_NAME = 'CoilSimulator'


def _safe_isatty(stream) -> bool:
    """Return True if stream looks like a tty; never raise."""
    try:
        return bool(getattr(stream, "isatty", lambda: False)())
    except (AttributeError, ValueError, OSError):
        return False


def _get_console_stream():
    """
    Embedding hosts can set sys.stdout/sys.stderr to None.
    Returning None is fine: logging.StreamHandler(None) falls back to sys.stderr.
    """
    for name in ("stderr", "__stderr__", "stdout", "__stdout__"):
        s = getattr(sys, name, None)
        if s is not None:
            return s
    return None


class CoilSimulatorFormatter(logging.Formatter):
    """Formatter with optional color support."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m',
    }

    def __init__(self, use_colors: bool = True, stream=None):
        super().__init__()
        if stream is None:
            stream = _get_console_stream()
        self.use_colors = bool(use_colors and _safe_isatty(stream))

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        level = record.levelname
        message = record.getMessage()

        thread_name = threading.current_thread().name
        thread_info = f"[{thread_name}]" if thread_name != 'MainThread' else ""

        location = f"[{record.module}.{record.funcName}:{record.lineno}]"
        if self.use_colors:
            color = self.COLORS.get(level, '')
            reset = self.COLORS['RESET']
            formatted = f"{timestamp} {color}{level:8s}{reset} {thread_info}{location} {message}"
        else:
            formatted = f"{timestamp} {level:8s} {thread_info}{location} {message}"

        if record.exc_info:
            formatted += '\n' + self.formatException(record.exc_info)

        return formatted


class PerformanceTracker:
    """Tracks timings of simulator operations."""

    def __init__(self):
        self.timings: Dict[str, list] = {}
        self.lock = threading.Lock()

    def record_timing(self, operation: str, duration_s: float):
        with self.lock:
            self.timings.setdefault(operation, []).append(duration_s)

    def get_stats(self, operation: str) -> Dict[str, float]:
        """Get statistics for an operation."""
        with self.lock:
            times = self.timings.get(operation)
            if not times:
                return {'count': 0, 'total': 0, 'mean': 0, 'min': 0, 'max': 0}
            return {
                'count': len(times),
                'total': sum(times),
                'mean': sum(times) / len(times),
                'min': min(times),
                'max': max(times)
            }

    def get_all_stats(self) -> Dict[str, Dict[str, float]]:
        with self.lock:
            operations = list(self.timings)
        return {op: self.get_stats(op) for op in operations}

    def clear(self):
        with self.lock:
            self.timings.clear()


class CoilSimulatorLogger:
    """Main logger class for the coil simulator."""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls, *args, **kwargs):
        """Singleton pattern for global logger access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._initialized = False
            return cls._instance

    def __init__(self,
                 log_dir: Optional[str] = None,
                 log_level: int = logging.DEBUG,
                 console_level: int = logging.WARNING,
                 enable_file_logging: bool = False,
                 enable_performance_tracking: bool = True):
        if self._initialized:
            return

        self._initialized = True
        self.log_dir = log_dir
        self.log_level = log_level
        self.console_level = console_level
        self.enable_file_logging = enable_file_logging
        self.current_log_file: Optional[str] = None

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(log_level)
        self.logger.handlers = []  # Clear any existing handlers

        stream = _get_console_stream()
        console_handler = logging.StreamHandler(stream)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(CoilSimulatorFormatter(use_colors=True, stream=stream))
        self.logger.addHandler(console_handler)

        if enable_file_logging:
            self._setup_file_handler()

        self.performance = PerformanceTracker() if enable_performance_tracking else None

    @classmethod
    def reset(cls):
        """Drop the singleton so the next construction reconfigures handlers."""
        with cls._lock:
            if cls._instance is not None:
                for handler in list(cls._instance.logger.handlers):
                    handler.close()
                cls._instance.logger.handlers = []
            cls._instance = None

    def _setup_file_handler(self):
        """Setup file logging handler."""
        if not self.log_dir:
            self.log_dir = os.path.join(
                os.path.expanduser('~'),
                '.coil_simulator',
                'logs'
            )

        os.makedirs(self.log_dir, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        log_file = os.path.join(self.log_dir, f'coil_simulator_{timestamp}.log')

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.log_level)
        file_handler.setFormatter(CoilSimulatorFormatter(use_colors=False))
        self.logger.addHandler(file_handler)

        self.current_log_file = log_file
        self.logger.info(f"Log file created: {log_file}")

    def set_log_level(self, level: int):
        self.logger.setLevel(level)
        self.log_level = level

    def set_console_level(self, level: int):
        for handler in self.logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)
        self.console_level = level

    # Logging methods
    def debug(self, message: str, *args, **kwargs):
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        self.logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self.logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        self.logger.error(message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs):
        self.logger.exception(message, *args, **kwargs)

    def log_build(self, params: Dict[str, Any]):
        """Log the inputs of a simulation run."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.debug("Simulating build: %s", ", ".join(f"{k}={v}" for k, v in params.items()))

    def log_result(self, resistance: float, heat_flux: float, thermal_class: str):
        self.debug("Result: R=%.4fΩ, flux=%.2fmW/mm², class=%s", resistance, heat_flux, thermal_class)


# Global logger instance
_logger: Optional[CoilSimulatorLogger] = None


def get_logger() -> CoilSimulatorLogger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = CoilSimulatorLogger()
    return _logger


def initialize_logger(log_dir: Optional[str] = None,
                      log_level: int = logging.DEBUG,
                      console_level: int = logging.WARNING,
                      enable_file_logging: bool = False) -> CoilSimulatorLogger:
    """(Re)initialize the global logger with custom settings."""
    global _logger
    CoilSimulatorLogger.reset()
    _logger = CoilSimulatorLogger(
        log_dir=log_dir,
        log_level=log_level,
        console_level=console_level,
        enable_file_logging=enable_file_logging
    )
    return _logger


def timed_function(operation_name: Optional[str] = None):
    """Decorator to time function execution."""
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger()
            op_name = operation_name or func.__name__
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = time.perf_counter() - start
                logger.error(f"{op_name} failed after {duration:.3f}s: {e}")
                raise
            duration = time.perf_counter() - start
            if logger.performance:
                logger.performance.record_timing(op_name, duration)
            logger.debug(f"{op_name} completed in {duration:.3f}s")
            return result
        return wrapper
    return decorator


@contextmanager
def log_section(section_name: str):
    """Context manager for logging a section of code."""
    logger = get_logger()
    logger.info(f"--- {section_name} ---")
    start = time.perf_counter()
    try:
        yield
    except Exception as e:
        duration = time.perf_counter() - start
        logger.error(f"--- {section_name} failed after {duration:.3f}s: {e} ---")
        raise
    duration = time.perf_counter() - start
    logger.info(f"--- {section_name} completed in {duration:.3f}s ---")


__all__ = [
    'LOGGER_NAME',
    'CoilSimulatorLogger',
    'CoilSimulatorFormatter',
    'PerformanceTracker',
    'get_logger',
    'initialize_logger',
    'timed_function',
    'log_section',
]
