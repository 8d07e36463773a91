"""Tests for the loading API."""

import pytest
from fastapi.testclient import TestClient

from repo_ingest import __version__
from repo_ingest.api.dependencies import get_loading_service
from repo_ingest.api.main import create_app
from repo_ingest.git.fetcher import GitFetcher
from repo_ingest.services.loading import LoadingService


@pytest.fixture
def client(settings, fetcher) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_loading_service] = lambda: LoadingService(
        settings=settings, fetcher=fetcher
    )
    return TestClient(app)


@pytest.mark.unit
class TestLoadingAPI:
    """Tests for the loading endpoints."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}

    def test_load_repository(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/loading/repositories",
            json={"url": "https://github.com/acme/widgets", "ignore_files": ["README.md"]},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["owner"] == "acme"
        assert body["repository_name"] == "widgets"
        assert body["count"] == 1
        assert body["documents"] == [{"content": "x=1", "metadata": {"source": "src/main.ts"}}]

    def test_ignore_patterns(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/loading/repositories",
            json={"url": "https://github.com/acme/widgets", "ignore_patterns": [r"\.md$"]},
        )
        assert response.status_code == 200
        assert [d["metadata"]["source"] for d in response.json()["documents"]] == ["src/main.ts"]

    def test_invalid_ignore_pattern(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/loading/repositories",
            json={"url": "https://github.com/acme/widgets", "ignore_patterns": ["("]},
        )
        assert response.status_code == 422

    def test_malformed_url(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/loading/repositories",
            json={"url": "https://github.com/acme"},
        )
        assert response.status_code == 422

    def test_fetch_failure(self, client: TestClient, settings, tmp_path) -> None:
        async def failing_transport(remote_url, destination, branch) -> None:
            raise RuntimeError("fatal: repository not found")

        client.app.dependency_overrides[get_loading_service] = lambda: LoadingService(
            settings=settings,
            fetcher=GitFetcher(tmp_path / "other", transport=failing_transport),
        )
        response = client.post(
            "/api/v1/loading/repositories",
            json={"url": "https://github.com/acme/widgets"},
        )
        assert response.status_code == 502

    def test_escalated_traversal_failure(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/loading/repositories",
            json={"url": "https://github.com/acme/widgets/tree/main/nope", "unknown": "error"},
        )
        assert response.status_code == 500
