"""Storage layer for URL shortener."""

from .base import URLShortenerStoreBase
from .memory import InMemoryStore
from .models import DomainStat

__all__ = ["URLShortenerStoreBase", "InMemoryStore", "DomainStat"]
