"""Business logic service for URL shortener."""

import logging
from typing import Optional, Dict, Any, List

from .shortcode import encode
from .errors import InvalidURLError, NotFoundError
from .storage.base import URLShortenerStoreBase
from .storage.memory import InMemoryStore
from .storage.models import DomainStat
from .common.validators import is_valid_url


class URLShortenerService:
    """Service layer for URL shortening business logic.

    The duplicate check and the insert in shorten() are separate store
    operations. Two concurrent first-time calls with the same URL can both
    miss the check and each get a distinct code; both codes resolve to the
    URL. Sequential callers always get the same code back.
    """

    def __init__(
        self,
        store: Optional[URLShortenerStoreBase] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize URL shortener service.

        Args:
            store: Store instance (a new InMemoryStore if not given)
            logger: Optional logger
        """
        self.logger = logger or logging.getLogger(__name__)
        self.store = store if store is not None else InMemoryStore(logger=self.logger)

    def shorten(self, long_url: str) -> str:
        """Create or reuse the short code for a URL.

        Args:
            long_url: The original long URL

        Returns:
            The short code

        Raises:
            InvalidURLError: If the URL is not an absolute http(s) URL with a host
        """
        is_valid, error = is_valid_url(long_url)
        if not is_valid:
            self.logger.warning(f"Rejected URL {long_url!r}: {error}")
            raise InvalidURLError(f"Invalid URL: {error}")

        try:
            code = self.store.get_code(long_url)
            self.logger.debug(f"Reusing short code {code} for {long_url}")
            return code
        except NotFoundError:
            pass

        code = encode(self.store.next_id())
        self.store.save_mapping(code, long_url)

        self.logger.info(f"Created short URL: {code} -> {long_url}")
        return code

    def resolve(self, code: str) -> str:
        """Get the original URL for a short code.

        Raises:
            NotFoundError: If the code is unknown
        """
        try:
            url = self.store.get_url(code)
        except NotFoundError:
            self.logger.warning(f"Short code not found: {code}")
            raise

        self.logger.debug(f"Resolved URL: {code} -> {url}")
        return url

    def get_top_domains(self, limit: int) -> List[DomainStat]:
        return self.store.get_top_domains(limit)

    def get_statistics(self) -> Dict[str, Any]:
        """Get service statistics."""
        return self.store.get_statistics()

    def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        store_healthy = self.store.health_check()

        return {
            "store": store_healthy,
            "overall": store_healthy,
        }
