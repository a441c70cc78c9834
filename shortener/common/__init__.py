"""Common utilities for URL shortener."""

from .validators import is_valid_url, extract_domain
from .url_builder import build_short_url
from .logging_config import setup_logging, get_logger
from .rwlock import ReadWriteLock

__all__ = [
    "is_valid_url",
    "extract_domain",
    "build_short_url",
    "setup_logging",
    "get_logger",
    "ReadWriteLock",
]
