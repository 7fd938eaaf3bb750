import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient
from sitefetch.main import app
from sitefetch.fetch.mock_fetcher import AsyncMockFetcher, MockFetcher

# Test client
client = TestClient(app)

class TestRunEndpoints:
    """Integration tests for the /run endpoints"""

    @pytest.mark.parametrize("mode", ["sequential", "offloaded", "concurrent"])
    def test_default_sites(self, mode):
        """Without a body every default site is fetched and reported in order"""
        response = client.post(f"/run/{mode}")

        assert response.status_code == 200
        data = response.json()
        assert data["mode"] == mode
        assert data["failures"] == 0

        sites = client.get("/sites").json()["sites"]
        assert [r["url"] for r in data["results"]] == sites

        lines = data["report"].split("\n")
        assert len(lines) == 9
        assert lines[0].startswith("https://www.yahoo.com/ downloaded: ")
        assert lines[-1].startswith("Total execution time ")

    @pytest.mark.parametrize("mode", ["sequential", "offloaded", "concurrent"])
    def test_custom_sites(self, mode):
        """Given URLs replace the default list"""
        response = client.post(f"/run/{mode}", json={"urls": ["https://a.test/", "https://b.test/"]})

        assert response.status_code == 200
        data = response.json()
        assert [r["url"] for r in data["results"]] == ["https://a.test/", "https://b.test/"]
        assert data["total_characters"] == sum(r["length"] for r in data["results"])

    def test_empty_site_list(self):
        """An empty list gives an empty report"""
        response = client.post("/run/concurrent", json={"urls": []})

        assert response.status_code == 200
        data = response.json()
        assert data["results"] == []
        assert data["report"].startswith("Total execution time ")

    def test_invalid_url(self):
        """URLs must be http or https"""
        response = client.post("/run/sequential", json={"urls": ["ftp://a.test/"]})

        assert response.status_code == 400
        assert "must start with http" in response.json()["detail"]

    def test_malformed_body(self):
        """URL list of the wrong type is a validation error"""
        response = client.post("/run/concurrent", json={"urls": "https://a.test/"})

        assert response.status_code == 422

    @patch('sitefetch.services.race.get_async_fetcher')
    def test_concurrent_failure_reported_inline(self, mock_fetcher):
        """A failing site shows up as an error line, the rest still report"""
        mock_fetcher.return_value = AsyncMockFetcher(failing=["https://b.test/"])

        response = client.post(
            "/run/concurrent",
            json={"urls": ["https://a.test/", "https://b.test/", "https://c.test/"]}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["failures"] == 1
        assert [r["ok"] for r in data["results"]] == [True, False, True]
        assert "https://b.test/ failed: Mock failure" in data["report"]

    @patch('sitefetch.services.race.get_fetcher')
    def test_sequential_unexpected_error(self, mock_fetcher):
        """Errors outside fetching become 500s"""
        mock_fetcher.side_effect = Exception("Fetcher setup failed")

        response = client.post("/run/sequential")

        assert response.status_code == 500
        assert "failed" in response.json()["detail"].lower()

class TestHealthEndpoints:
    """Test health and utility endpoints"""

    def test_health_endpoint(self):
        """Test health check endpoint"""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root_endpoint(self):
        """Test root endpoint"""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert "service" in data
        assert "endpoints" in data

    def test_sites_endpoint(self):
        """Default site list is exposed"""
        response = client.get("/sites")
        assert response.status_code == 200
        assert len(response.json()["sites"]) == 8
