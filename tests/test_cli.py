"""Tests for the command-line client."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from shortener.cli import URLShortenerCLI, build_parser, main


def _response(status_code=200, payload=None, headers=None, is_redirect=False):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload or {}
    response.headers = headers or {}
    response.is_redirect = is_redirect
    response.text = json.dumps(payload or {})
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def cli(session):
    return URLShortenerCLI(base_url="http://localhost:8080/", session=session)


class TestCLI:
    """Test CLI commands against a mocked HTTP session."""

    def test_shorten(self, cli, session, capsys):
        session.post.return_value = _response(payload={"short_url": "http://localhost:8080/1", "code": "1"})

        assert cli.shorten("https://example.com") == 0

        session.post.assert_called_once_with(
            "http://localhost:8080/api/v1/shorten",
            json={"url": "https://example.com"},
            timeout=5.0,
        )
        output = json.loads(capsys.readouterr().out)
        assert output["success"] is True
        assert output["code"] == "1"

    def test_shorten_rejected(self, cli, session, capsys):
        session.post.return_value = _response(400, {"detail": "Invalid URL: URL is required"})

        assert cli.shorten("") == 1
        assert "Invalid URL" in capsys.readouterr().err

    def test_shorten_unreachable(self, cli, session, capsys):
        session.post.side_effect = requests.ConnectionError("refused")

        assert cli.shorten("https://example.com") == 1
        assert "Request failed" in capsys.readouterr().err

    def test_resolve(self, cli, session, capsys):
        session.get.return_value = _response(
            301, headers={"Location": "https://example.com/a"}, is_redirect=True
        )

        assert cli.resolve("1") == 0

        session.get.assert_called_once_with(
            "http://localhost:8080/1", allow_redirects=False, timeout=5.0
        )
        assert json.loads(capsys.readouterr().out)["original_url"] == "https://example.com/a"

    def test_resolve_not_found(self, cli, session, capsys):
        session.get.return_value = _response(404, {"detail": "not found"})

        assert cli.resolve("zzz") == 1
        assert "not found" in capsys.readouterr().err

    def test_metrics(self, cli, session, capsys):
        payload = {"top_domains": [{"domain": "udemy.com", "count": 6}]}
        session.get.return_value = _response(payload=payload)

        assert cli.metrics(limit=1) == 0

        session.get.assert_called_once_with(
            "http://localhost:8080/api/v1/metrics", params={"limit": 1}, timeout=5.0
        )
        assert json.loads(capsys.readouterr().out)["top_domains"] == payload["top_domains"]

    def test_stats(self, cli, session, capsys):
        session.get.return_value = _response(payload={"total_urls": 2, "total_domains": 1, "last_id": 2})

        assert cli.stats() == 0
        assert json.loads(capsys.readouterr().out)["statistics"]["total_urls"] == 2

    def test_health_unhealthy(self, cli, session):
        session.get.return_value = _response(payload={"status": "unhealthy", "store": "unhealthy"})

        assert cli.health() == 1

    def test_decode(self, cli, capsys):
        assert cli.decode("g8") == 0
        assert json.loads(capsys.readouterr().out)["id"] == 1000

    def test_decode_invalid(self, cli, capsys):
        assert cli.decode("g-8") == 1


class TestArgumentParsing:
    """Test argument parsing."""

    def test_metrics_limit(self):
        args = build_parser().parse_args(["metrics", "--limit", "5"])
        assert args.command == "metrics"
        assert args.limit == 5

    def test_base_url_from_env(self, monkeypatch):
        monkeypatch.setenv("URL_SHORTENER_URL", "http://sho.rt")
        args = build_parser().parse_args(["stats"])
        assert args.base_url == "http://sho.rt"

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_main_decode(self, capsys):
        assert main(["decode", "1C"]) == 0
        assert json.loads(capsys.readouterr().out)["id"] == 100
