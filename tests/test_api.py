"""Tests for API endpoints."""

import pytest


class TestShortenEndpoint:
    """Test POST /api/v1/shorten."""

    async def test_shorten_url(self, client, sample_urls):
        response = await client.post(
            "/api/v1/shorten",
            json={"url": sample_urls[0]}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["code"] == "1"
        assert data["short_url"] == "http://localhost:8080/" + data["code"]

    async def test_shorten_duplicate_url(self, client, sample_urls):
        """Same URL returns the same code."""
        first = await client.post("/api/v1/shorten", json={"url": sample_urls[0]})
        second = await client.post("/api/v1/shorten", json={"url": sample_urls[0]})

        assert first.json()["code"] == second.json()["code"]

    @pytest.mark.parametrize("url", ["not-a-valid-url", "ftp://example.com", "http://", ""])
    async def test_shorten_invalid_url(self, client, url):
        response = await client.post("/api/v1/shorten", json={"url": url})

        assert response.status_code == 400
        assert "Invalid URL" in response.json()["detail"]

    async def test_shorten_invalid_json(self, client):
        response = await client.post(
            "/api/v1/shorten",
            content="invalid json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400

    async def test_shorten_missing_url(self, client):
        response = await client.post("/api/v1/shorten", json={"link": "https://example.com"})

        assert response.status_code == 400

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH"])
    async def test_shorten_wrong_method(self, client, method):
        response = await client.request(method, "/api/v1/shorten")

        assert response.status_code == 405

    async def test_shorten_with_path_prefix(self, app, client, config):
        app.state.config = config.model_copy(update={"path_prefix": "/s"})

        response = await client.post("/api/v1/shorten", json={"url": "https://example.com/p"})

        assert response.json()["short_url"] == "http://localhost:8080/s/1"

    async def test_shorten_internal_error(self, app, client):
        class BrokenService:
            def shorten(self, url):
                raise RuntimeError("boom")

        app.state.service = BrokenService()

        response = await client.post("/api/v1/shorten", json={"url": "https://example.com"})

        assert response.status_code == 500
        assert "boom" not in response.text


class TestMetricsEndpoint:
    """Test GET /api/v1/metrics."""

    async def test_metrics(self, client, domain_urls):
        for url in domain_urls:
            await client.post("/api/v1/shorten", json={"url": url})

        response = await client.get("/api/v1/metrics")

        assert response.status_code == 200
        assert response.json() == {
            "top_domains": [
                {"domain": "udemy.com", "count": 6},
                {"domain": "youtube.com", "count": 3},
                {"domain": "wikipedia.org", "count": 2},
            ]
        }

    async def test_metrics_limit(self, client, domain_urls):
        for url in domain_urls:
            await client.post("/api/v1/shorten", json={"url": url})

        response = await client.get("/api/v1/metrics", params={"limit": 10})

        top = response.json()["top_domains"]
        assert len(top) == 4
        assert top[-1] == {"domain": "stackoverflow.com", "count": 1}

    async def test_metrics_empty(self, client):
        response = await client.get("/api/v1/metrics")

        assert response.status_code == 200
        assert response.json() == {"top_domains": []}

    async def test_metrics_negative_limit(self, client):
        response = await client.get("/api/v1/metrics", params={"limit": -1})

        assert response.status_code == 400

    async def test_metrics_wrong_method(self, client):
        response = await client.post("/api/v1/metrics")

        assert response.status_code == 405


class TestRedirect:
    """Test GET /{short_code}."""

    async def test_redirect(self, client, sample_urls):
        create = await client.post("/api/v1/shorten", json={"url": sample_urls[1]})
        code = create.json()["code"]

        response = await client.get(f"/{code}", follow_redirects=False)

        assert response.status_code == 301
        assert response.headers["location"] == sample_urls[1]

    async def test_redirect_not_found(self, client):
        response = await client.get("/nonexistent", follow_redirects=False)

        assert response.status_code == 404

    async def test_root_healthcheck(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.text == "URL Shortener Service Healthcheck service is running"


class TestServiceEndpoints:
    """Test health and statistics."""

    async def test_health_check(self, client):
        response = await client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["store"] == "healthy"
        assert "timestamp" in data

    async def test_statistics(self, client, sample_urls):
        for url in sample_urls:
            await client.post("/api/v1/shorten", json={"url": url})

        response = await client.get("/api/v1/stats")

        assert response.status_code == 200
        assert response.json() == {"total_urls": 3, "total_domains": 3, "last_id": 3}
