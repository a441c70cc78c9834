"""Validation utilities for URL shortener."""

from urllib.parse import urlsplit
from typing import Tuple


ALLOWED_SCHEMES = ("http", "https")


def _has_control_chars(value: str) -> bool:
    return any(ord(c) < 0x20 or ord(c) == 0x7f for c in value)


def extract_domain(url: str) -> str:
    """Extract the host component of a URL.

    Subdomains are kept; scheme, userinfo, port and path are dropped.
    The host is returned as written, without lowercasing.

    Args:
        url: The URL to parse

    Returns:
        The host, or an empty string if the URL cannot be parsed
    """
    if not isinstance(url, str) or _has_control_chars(url):
        return ""

    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        return ""

    host = netloc.rpartition("@")[2]

    # IPv6 literal, e.g. [::1]:8080
    if host.startswith("["):
        return host[1:].partition("]")[0]

    return host.partition(":")[0]


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a URL.

    The URL must be absolute, use the http or https scheme exactly as
    written, and have a non-empty host.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if _has_control_chars(url):
        return False, "URL contains control characters"

    try:
        result = urlsplit(url)
        # Raises for a non-numeric or out-of-range port
        result.port
    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"

    # urlsplit lowercases the scheme, so compare against the raw prefix
    raw_scheme = url.partition(":")[0]
    if not result.scheme or raw_scheme not in ALLOWED_SCHEMES:
        return False, "URL must use http or https protocol"

    host = extract_domain(url)
    if not host:
        return False, "URL must have a valid domain"

    if any(c.isspace() for c in host):
        return False, "URL host contains whitespace"

    return True, ""
