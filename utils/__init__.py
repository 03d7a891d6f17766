"""Utilities package initialization."""

from .logger import setup_logger, get_logger, set_level, timed_operation, log_milestone
from .file_utils import (
    dump_json,
    save_json,
    load_json,
    load_html_directory,
    records_to_json
)

__all__ = [
    'setup_logger',
    'get_logger',
    'set_level',
    'timed_operation',
    'log_milestone',
    'dump_json',
    'save_json',
    'load_json',
    'load_html_directory',
    'records_to_json'
]
