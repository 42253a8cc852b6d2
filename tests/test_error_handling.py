from fastapi.testclient import TestClient

from conftest import CLASS
from main import app
import routers.class_stats


def test_unexpected_error_returns_generic_message(monkeypatch, caplog):
    def boom(*args, **kwargs):
        raise RuntimeError("connection reset by peer")

    monkeypatch.setattr(routers.class_stats, "calculate_class_stats", boom)

    with TestClient(app, raise_server_exceptions=False) as client:
        res = client.post("/api/class-stats", json=CLASS)

    assert res.status_code == 500
    assert res.json() == {"success": False, "message": "Internal server error"}
    assert "connection reset by peer" not in res.text
    assert "connection reset by peer" in caplog.text


def test_domain_errors_keep_their_status(client):
    res = client.post("/api/queries/respond", json={"queryId": 1, "response": "x"})

    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "Query not found"}
