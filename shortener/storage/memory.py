"""In-memory store implementation for URL shortener."""

import logging
from typing import Optional, List, Dict, Any

from .base import URLShortenerStoreBase
from .models import DomainStat
from ..common.rwlock import ReadWriteLock
from ..common.validators import extract_domain
from ..errors import NotFoundError


class InMemoryStore(URLShortenerStoreBase):
    """Thread-safe in-memory store for URL mappings and domain counts.

    Writes (next_id, save_mapping) are exclusive, reads share the lock.
    Nothing is ever evicted.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize an empty store.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._lock = ReadWriteLock()
        self._id_counter = 0
        self._code_to_url: Dict[str, str] = {}
        self._url_to_code: Dict[str, str] = {}
        self._domain_counts: Dict[str, int] = {}

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._code_to_url)

    def next_id(self) -> int:
        with self._lock.write_locked():
            self._id_counter += 1
            return self._id_counter

    def save_mapping(self, code: str, url: str) -> None:
        domain = self.extract_domain(url)

        with self._lock.write_locked():
            self._code_to_url[code] = url
            self._url_to_code[url] = code

            if domain:
                self._domain_counts[domain] = self._domain_counts.get(domain, 0) + 1

        self.logger.debug(f"Saved mapping {code} -> {url} (domain={domain!r})")

    def get_url(self, code: str) -> str:
        with self._lock.read_locked():
            url = self._code_to_url.get(code)

        if url is None:
            raise NotFoundError(f"Short code '{code}' not found")
        return url

    def get_code(self, url: str) -> str:
        with self._lock.read_locked():
            code = self._url_to_code.get(url)

        if code is None:
            raise NotFoundError(f"URL '{url}' not found")
        return code

    def get_top_domains(self, limit: int) -> List[DomainStat]:
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        with self._lock.read_locked():
            snapshot = list(self._domain_counts.items())

        # Count descending, then domain ascending on ties
        snapshot.sort(key=lambda item: (-item[1], item[0]))

        return [DomainStat(domain=domain, count=count) for domain, count in snapshot[:limit]]

    def get_statistics(self) -> Dict[str, Any]:
        with self._lock.read_locked():
            return {
                "total_urls": len(self._code_to_url),
                "total_domains": len(self._domain_counts),
                "last_id": self._id_counter,
            }

    def health_check(self) -> bool:
        return True

    @staticmethod
    def extract_domain(url: str) -> str:
        """Return the URL's host, or an empty string if it cannot be parsed."""
        return extract_domain(url)
