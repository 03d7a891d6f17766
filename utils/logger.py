"""Logging utilities for the capital city scraper."""

import logging
import sys
import time
import functools
from pathlib import Path
from typing import Optional
from config.settings import get_config

ROOT_LOGGER_NAME = "capitals"


def setup_logger(
    name: str,
    log_file: Optional[Path] = None,
    level: Optional[str] = None,
    log_format: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with console and optional file output.

    Args:
        name: Logger name
        log_file: Path to log file (optional, overrides config)
        level: Logging level (optional, overrides config)
        log_format: Log format string (optional, overrides config)

    Returns:
        Configured logger instance
    """
    config = get_config()

    if level is None:
        level = config.get('logging.level', 'INFO')
    if log_format is None:
        log_format = config.get(
            'logging.format',
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper() if isinstance(level, str) else 'INFO'))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.get('logging.log_to_file', False):
        if log_file is None:
            log_file_name = config.get('logging.log_file', 'capitals.log')
            log_file = config.get_path('paths.base_dir') / log_file_name

        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get an existing logger or create a new one with default configuration.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger = setup_logger(name)

    return logger


def set_level(level: str) -> None:
    """Change the level of every logger already handed out by get_logger."""
    for logger in logging.Logger.manager.loggerDict.values():
        if isinstance(logger, logging.Logger) and logger.handlers:
            logger.setLevel(getattr(logging, level.upper()))


def _format_elapsed(elapsed: float) -> str:
    if elapsed < 1:
        return f"{elapsed*1000:.0f}ms"
    return f"{elapsed:.1f}s"


def timed_operation(operation_name: str):
    """
    Decorator to log operation timing.

    Args:
        operation_name: Human-readable operation name for logging
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            start_time = time.time()

            try:
                result = func(*args, **kwargs)
                logger.debug(f"⏱ {operation_name}: {_format_elapsed(time.time() - start_time)}")
                return result
            except Exception as e:
                elapsed = time.time() - start_time
                logger.warning(f"⚠ {operation_name} failed after {elapsed:.1f}s: {str(e)[:100]}")
                raise
        return wrapper
    return decorator


def log_milestone(message: str, elapsed_time: Optional[float] = None, prefix: str = "✓"):
    """
    Log a milestone with optional timing information.

    Args:
        message: Milestone message
        elapsed_time: Optional elapsed time in seconds
        prefix: Prefix symbol (default ✓)
    """
    logger = get_logger(ROOT_LOGGER_NAME)
    timing_str = f" ({_format_elapsed(elapsed_time)})" if elapsed_time is not None else ""

    logger.info(f"{prefix} {message}{timing_str}")
