"""
Tests for the HTTP API

The app is built with a temporary upload dir, the in-memory vector store,
a fake embedder and a fake timer so no background tick ever fires.
"""
import pytest
from fastapi.testclient import TestClient

from main import create_app
from startup import ComponentFactory


def _factory(config, embedder_factory, broken=False):
    class TestFactory(ComponentFactory):
        def create_embedder(self):
            if broken:
                raise RuntimeError("model unavailable")
            return embedder_factory()
    return TestFactory(config)


@pytest.fixture
def client(test_config, embedder_factory, timer_factory):
    """Client over a fully initialized app"""
    app = create_app(config=test_config, factory=_factory(test_config, embedder_factory),
                     timer_factory=timer_factory)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def degraded_client(test_config, embedder_factory, timer_factory):
    """Client over an app whose indexing engine failed to start"""
    app = create_app(config=test_config, factory=_factory(test_config, embedder_factory, broken=True),
                     timer_factory=timer_factory)
    with TestClient(app) as client:
        yield client


def _state(client):
    return client.app.state.app_state


def _wait_idle(client):
    assert _state(client).get_coordinator().wait_until_idle(10)


class TestHealthEndpoints:
    """Test / and /health"""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["health"] == "/health"

    def test_health(self, client, test_config):
        data = client.get("/health").json()

        assert data["status"] == "healthy"
        assert data["engine_available"] is True
        assert data["is_indexing"] is False
        assert data["upload_dir"] == str(test_config.paths.upload_dir.resolve())


class TestFileEndpoints:
    """Test namespace CRUD over HTTP"""

    def test_create_and_list(self, client):
        response = client.post("/rag/files/create", json={"path": "docs/a.md", "content": "# A"})
        assert response.status_code == 200
        assert response.json()["path"] == "docs/a.md"

        root = client.get("/rag/files").json()
        assert [(e["name"], e["is_dir"]) for e in root] == [("docs", True)]

        [entry] = client.get("/rag/files", params={"path": "docs"}).json()
        assert entry["name"] == "a.md"
        assert entry["format"] == "PlainText"
        assert entry["size"] == 3
        assert entry["version_count"] == 0

    def test_list_missing_directory(self, client):
        assert client.get("/rag/files", params={"path": "missing"}).status_code == 404

    def test_mkdir(self, client):
        response = client.post("/rag/mkdir", json={"path": "a/b"})

        assert response.status_code == 200
        assert client.get("/rag/files", params={"path": "a"}).json()[0]["path"] == "a/b"

    def test_mkdir_over_file_conflicts(self, client):
        client.post("/rag/files/create", json={"path": "a", "content": "x"})
        assert client.post("/rag/mkdir", json={"path": "a"}).status_code == 409

    def test_file_over_directory_conflicts(self, client):
        client.post("/rag/mkdir", json={"path": "a"})
        response = client.post("/rag/files/create", json={"path": "a", "content": "x"})
        assert response.status_code == 409

    def test_traversal_rejected(self, client):
        response = client.post("/rag/files/create", json={"path": "../escape.txt", "content": "x"})
        assert response.status_code == 400

    def test_malformed_body_is_400(self, client):
        assert client.post("/rag/mkdir", json={}).status_code == 400

    def test_delete(self, client):
        client.post("/rag/files/create", json={"path": "docs/a.txt", "content": "x"})

        response = client.delete("/rag/files/docs")

        assert response.status_code == 200
        assert client.get("/rag/files").json() == []

    def test_delete_missing(self, client):
        assert client.delete("/rag/files/missing.txt").status_code == 404

    def test_upload(self, client):
        response = client.post(
            "/rag/upload",
            params={"path": "inbox"},
            files=[
                ("files", ("a.txt", b"alpha", "text/plain")),
                ("files", ("b.md", b"# beta", "text/markdown")),
            ],
        )

        assert response.status_code == 200
        data = response.json()
        assert data["uploaded_files"] == ["a.txt", "b.md"]
        assert data["total_files_in_dir"] == 2
        assert data["reindex_triggered"] is False

    def test_upload_with_reindex(self, client):
        response = client.post(
            "/rag/upload",
            params={"reindex": "true"},
            files=[("files", ("a.txt", b"alpha", "text/plain"))],
        )
        assert response.json()["reindex_triggered"] is True
        _wait_idle(client)

        assert client.get("/rag/status").json()["total_files"] == 1


class TestVersionEndpoints:
    """Test history and rollback over HTTP"""

    def _write(self, client, content):
        client.post("/rag/files/create", json={"path": "a/b.txt", "content": content})

    def test_history_and_rollback_scenario(self, client):
        for content in ("v1", "v2", "v3"):
            self._write(client, content)

        history = client.get("/rag/files/a/b.txt/versions").json()
        assert [v["version"] for v in history["versions"]] == [1, 2]
        assert history["current_size"] == 2

        response = client.post("/rag/files/a/b.txt/rollback", json={"version": 1})
        assert response.status_code == 200
        assert response.json() == {"status": "rolled_back", "rolled_back_to": 1, "reindex_triggered": False}

        versions = client.get("/rag/files/a/b.txt/versions").json()["versions"]
        assert [v["version"] for v in versions] == [2, 3]
        assert versions[-1]["comment"] == "Auto-saved before rollback to v1"

    def test_versions_of_missing_file(self, client):
        assert client.get("/rag/files/missing.txt/versions").status_code == 404

    def test_rollback_unknown_version(self, client):
        self._write(client, "v1")
        response = client.post("/rag/files/a/b.txt/rollback", json={"version": 9})
        assert response.status_code == 404

    def test_rollback_with_reindex(self, client):
        self._write(client, "v1")
        self._write(client, "v2")

        response = client.post("/rag/files/a/b.txt/rollback", json={"version": 1, "reindex": True})

        assert response.json()["reindex_triggered"] is True
        _wait_idle(client)


class TestIndexingEndpoints:
    """Test indexing control, status and config"""

    def test_trigger_and_poll(self, client):
        client.post("/rag/files/create", json={"path": "a.txt", "content": "alpha"})
        client.post("/rag/files/create", json={"path": "bad.pdf", "content": "not a pdf"})

        response = client.post("/rag/index")
        assert response.status_code == 202
        _wait_idle(client)

        status = client.get("/rag/status").json()
        assert status["is_indexing"] is False
        assert status["total_files"] == 1
        assert status["failed_files"] == ["bad.pdf"]
        assert status["last_error"] == ""
        assert status["last_indexed_at"] is not None

    def test_trigger_while_indexing_conflicts(self, client):
        publisher = _state(client).get_status_publisher()
        assert publisher.begin_run()
        try:
            response = client.post("/rag/index")
        finally:
            publisher.end_run()

        assert response.status_code == 409

    def test_status_fields(self, client, test_config):
        status = client.get("/rag/status").json()

        assert status["auto_index_interval_minutes"] == 60
        assert status["upload_dir"] == str(test_config.paths.upload_dir)
        assert status["next_run_at"] is not None
        assert status["last_error"] == ""

    def test_update_config_rearms_timer(self, client, timer_factory):
        response = client.put("/rag/config", json={"auto_index_interval_minutes": 15})
        assert response.status_code == 200
        assert response.json()["auto_index_interval_minutes"] == 15

        client.put("/rag/config", json={"auto_index_interval_minutes": 60})

        assert [t.interval for t in timer_factory.armed] == [60 * 60]

    @pytest.mark.parametrize("value", [0, -1, True, "15", 1.5])
    def test_update_config_invalid(self, client, value):
        response = client.put("/rag/config", json={"auto_index_interval_minutes": value})

        assert response.status_code == 400
        assert client.get("/rag/status").json()["auto_index_interval_minutes"] == 60


class TestEngineUnavailable:
    """Test the degraded mode"""

    def test_indexing_endpoints_503(self, degraded_client):
        assert degraded_client.post("/rag/index").status_code == 503
        assert degraded_client.get("/rag/status").status_code == 503
        response = degraded_client.put("/rag/config", json={"auto_index_interval_minutes": 5})
        assert response.status_code == 503

    def test_file_management_works(self, degraded_client):
        degraded_client.post("/rag/files/create", json={"path": "a.txt", "content": "v1"})
        degraded_client.post("/rag/files/create", json={"path": "a.txt", "content": "v2"})

        response = degraded_client.post("/rag/files/a.txt/rollback", json={"version": 1, "reindex": True})

        assert response.status_code == 200
        assert response.json()["reindex_triggered"] is False

    def test_health_reports_degraded(self, degraded_client):
        data = degraded_client.get("/health").json()

        assert data["status"] == "degraded"
        assert data["engine_available"] is False
        assert "model unavailable" in data["detail"]
