"""
Logging configuration for the DADVISOR profiling core.
Provides structured logging tagged with the questionnaire session ID.
"""

import logging
import sys
import os
import functools
from typing import Optional
from datetime import datetime
import uuid
from contextvars import ContextVar

# Session ID for tracing one questionnaire run across modules
session_id: ContextVar[Optional[str]] = ContextVar('session_id', default=None)

_logging_configured = False


class SessionFilter(logging.Filter):
    """Add the current session ID to log records"""
    def filter(self, record):
        record.session_id = session_id.get() or 'N/A'
        return True


class StructuredFormatter(logging.Formatter):
    """Structured log formatter with session ID"""
    def format(self, record):
        # Format: [TIMESTAMP] [LEVEL] [SESSION_ID] [MODULE] MESSAGE
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        sid = getattr(record, 'session_id', 'N/A')
        line = f"[{timestamp}] [{record.levelname}] [{sid}] [{record.name}] {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure application-wide logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
    """
    global _logging_configured

    if _logging_configured:
        return

    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    formatter = StructuredFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(SessionFilter())
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(SessionFilter())
        root_logger.addHandler(file_handler)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return logging.getLogger(name)


def set_session_id(sid: Optional[str] = None) -> str:
    """
    Set the session ID for the current context.
    Generates a new ID if None is provided.
    """
    if sid is None:
        sid = str(uuid.uuid4())
    session_id.set(sid)
    return sid


def log_function_call(func):
    """Decorator to log function entry/exit"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        logger.debug(f"Entering {func.__name__}")
        try:
            result = func(*args, **kwargs)
            logger.debug(f"Exiting {func.__name__}")
            return result
        except Exception as e:
            logger.error(f"Error in {func.__name__}: {e}", exc_info=True)
            raise
    return wrapper
