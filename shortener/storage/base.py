"""Abstract base class for URL shortener store implementations."""

from abc import ABC, abstractmethod
from typing import List, Dict, Any

from .models import DomainStat


class URLShortenerStoreBase(ABC):
    """Abstract base class for URL shortener store operations."""

    @abstractmethod
    def next_id(self) -> int:
        """Issue the next identifier.

        Returns:
            A value strictly greater than every identifier issued before
        """
        pass

    @abstractmethod
    def save_mapping(self, code: str, url: str) -> None:
        """Store the code to URL association in both directions.

        Overwrites any existing association and counts the URL's domain.
        Callers are responsible for checking prior existence.

        Args:
            code: The short code
            url: The original long URL
        """
        pass

    @abstractmethod
    def get_url(self, code: str) -> str:
        """Get the original URL for a short code.

        Args:
            code: The short code to lookup

        Returns:
            The original URL

        Raises:
            NotFoundError: If no mapping exists for code
        """
        pass

    @abstractmethod
    def get_code(self, url: str) -> str:
        """Get the short code for an original URL.

        Args:
            url: The exact URL string to lookup

        Returns:
            The short code

        Raises:
            NotFoundError: If no mapping exists for url
        """
        pass

    @abstractmethod
    def get_top_domains(self, limit: int) -> List[DomainStat]:
        """Get the most frequently shortened domains.

        Args:
            limit: Maximum number of entries to return

        Returns:
            Stats sorted by count descending, then domain ascending
        """
        pass

    @abstractmethod
    def get_statistics(self) -> Dict[str, Any]:
        """Get store statistics.

        Returns:
            Dictionary with total_urls, total_domains and last_id
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """Check if the store is healthy.

        Returns:
            True if healthy, False otherwise
        """
        pass
