from fastapi.testclient import TestClient

from backend.app import error_handlers


def test_root_banner(test_app_client):
    client, _ = test_app_client

    resp = client.get("/")

    assert resp.status_code == 200
    assert "running" in resp.text


def test_liveness(test_app_client):
    client, _ = test_app_client

    assert client.get("/health").json() == {"status": "ok"}


def test_readiness_without_redis(test_app_client):
    client, _ = test_app_client

    resp = client.get("/health/ready")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ready", "checks": {"database": True, "cache": False}}


def test_request_id_header(test_app_client):
    client, _ = test_app_client

    assert client.get("/health", headers={"X-Request-ID": "trace-123"}).headers["x-request-id"] == "trace-123"
    assert len(client.get("/health").headers["x-request-id"]) == 16


class RecordingLogger:
    def __init__(self):
        self.events: list[tuple[str, dict]] = []

    def _record(self, event, **kw):
        self.events.append((event, kw))

    info = warning = error = exception = _record


def test_unhandled_exception_log_keeps_request_id(test_app_client, monkeypatch):
    client, _ = test_app_client
    app = client.app

    @app.get("/explode")
    def explode():
        raise RuntimeError("kaboom")

    recorder = RecordingLogger()
    monkeypatch.setattr(error_handlers, "logger", recorder)

    raw_client = TestClient(app, raise_server_exceptions=False)
    resp = raw_client.get("/explode", headers={"X-Request-ID": "trace-500"})

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error", "status_code": 500}
    events = [kw for event, kw in recorder.events if event == "unhandled_exception"]
    assert events and events[0]["request_id"] == "trace-500"
