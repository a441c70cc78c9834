"""Core business logic for URL shortener."""

from .shortcode import encode, decode
from .service import URLShortenerService
from .errors import ShortenerError, InvalidURLError, NotFoundError

__all__ = [
    "encode",
    "decode",
    "URLShortenerService",
    "ShortenerError",
    "InvalidURLError",
    "NotFoundError",
]
