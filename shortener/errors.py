"""Exceptions raised by the URL shortener core."""


class ShortenerError(Exception):
    """Base exception for all URL shortener errors."""
    pass


class InvalidURLError(ShortenerError, ValueError):
    """The URL failed the scheme/host validity check."""
    pass


class NotFoundError(ShortenerError, LookupError):
    """No mapping exists for the requested code or URL."""
    pass
