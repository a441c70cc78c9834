#!/usr/bin/env python3
"""
Command-line client for a running URL shortener service.

The store lives in the server's memory, so every command goes over HTTP.

Usage:
    url-shortener-cli shorten <url>
    url-shortener-cli resolve <code>
    url-shortener-cli metrics [--limit N]
    url-shortener-cli stats
    url-shortener-cli health
    url-shortener-cli decode <code>
"""

import argparse
import json
import os
import sys
from typing import Any, Dict, Optional

import requests

from .shortcode import decode

DEFAULT_SERVICE_URL = "http://localhost:8080"


class URLShortenerCLI:
    """Command-line interface for URL shortener."""

    def __init__(self, base_url: str, timeout: float = 5.0, session: Optional[requests.Session] = None):
        """Initialize CLI.

        Args:
            base_url: Base URL of the running service
            timeout: Per-request timeout in seconds
            session: Optional requests session (for connection reuse)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _print_ok(self, payload: Dict[str, Any]) -> int:
        print(json.dumps({"success": True, **payload}, indent=2))
        return 0

    def _print_error(self, error: str) -> int:
        print(json.dumps({"success": False, "error": error}, indent=2), file=sys.stderr)
        return 1

    @staticmethod
    def _error_detail(response: requests.Response) -> str:
        try:
            return response.json().get("detail", response.text)
        except ValueError:
            return response.text

    def shorten(self, url: str) -> int:
        """Shorten a URL."""
        try:
            response = self.session.post(
                f"{self.base_url}/api/v1/shorten",
                json={"url": url},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return self._print_error(f"Request failed: {e}")

        if response.status_code != 200:
            return self._print_error(self._error_detail(response))

        data = response.json()
        return self._print_ok({
            "code": data["code"],
            "short_url": data["short_url"],
            "original_url": url,
        })

    def resolve(self, code: str) -> int:
        """Get original URL for a short code without following the redirect."""
        try:
            response = self.session.get(
                f"{self.base_url}/{code}",
                allow_redirects=False,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return self._print_error(f"Request failed: {e}")

        if response.status_code == 404:
            return self._print_error(f"Short code '{code}' not found")
        if not response.is_redirect:
            return self._print_error(f"Unexpected status {response.status_code}")

        return self._print_ok({
            "code": code,
            "original_url": response.headers["Location"],
        })

    def metrics(self, limit: Optional[int] = None) -> int:
        """Show the most frequently shortened domains."""
        params = {"limit": limit} if limit is not None else None
        try:
            response = self.session.get(
                f"{self.base_url}/api/v1/metrics",
                params=params,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return self._print_error(f"Request failed: {e}")

        if response.status_code != 200:
            return self._print_error(self._error_detail(response))

        return self._print_ok(response.json())

    def stats(self) -> int:
        """Show service statistics."""
        try:
            response = self.session.get(f"{self.base_url}/api/v1/stats", timeout=self.timeout)
        except requests.RequestException as e:
            return self._print_error(f"Request failed: {e}")

        if response.status_code != 200:
            return self._print_error(self._error_detail(response))

        return self._print_ok({"statistics": response.json()})

    def health(self) -> int:
        """Check service health."""
        try:
            response = self.session.get(f"{self.base_url}/api/v1/health", timeout=self.timeout)
        except requests.RequestException as e:
            return self._print_error(f"Service unreachable: {e}")

        if response.status_code != 200:
            return self._print_error(f"Unexpected status {response.status_code}")

        health = response.json()
        print(json.dumps({"success": True, "health": health}, indent=2))
        return 0 if health.get("status") == "healthy" else 1

    def decode(self, code: str) -> int:
        """Show the identifier a short code was issued for (offline)."""
        try:
            identifier = decode(code)
        except ValueError as e:
            return self._print_error(str(e))

        return self._print_ok({"code": code, "id": identifier})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="URL Shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url

  # Look up the original URL
  %(prog)s resolve 1C

  # Top 5 domains
  %(prog)s metrics --limit 5

  # Check health
  %(prog)s health
        """
    )

    parser.add_argument(
        "--base-url",
        default=os.getenv("URL_SHORTENER_URL", DEFAULT_SERVICE_URL),
        help=f"Service base URL (default: from URL_SHORTENER_URL env or {DEFAULT_SERVICE_URL})"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=5.0,
        help="Request timeout in seconds"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")

    resolve_parser = subparsers.add_parser("resolve", help="Get original URL")
    resolve_parser.add_argument("code", help="Short code to lookup")

    metrics_parser = subparsers.add_parser("metrics", help="Show top domains")
    metrics_parser.add_argument("--limit", type=int, default=None, help="Number of domains to return")

    subparsers.add_parser("stats", help="Show service statistics")
    subparsers.add_parser("health", help="Check service health")

    decode_parser = subparsers.add_parser("decode", help="Decode a short code to its identifier")
    decode_parser.add_argument("code", help="Short code to decode")

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = URLShortenerCLI(base_url=args.base_url, timeout=args.timeout)

    if args.command == "shorten":
        return cli.shorten(args.url)
    elif args.command == "resolve":
        return cli.resolve(args.code)
    elif args.command == "metrics":
        return cli.metrics(args.limit)
    elif args.command == "stats":
        return cli.stats()
    elif args.command == "health":
        return cli.health()
    elif args.command == "decode":
        return cli.decode(args.code)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
