"""Data models for URL shortener."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DomainStat:
    """Occurrence count for one domain, derived at query time."""

    domain: str
    count: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "domain": self.domain,
            "count": self.count,
        }
