from fastapi.testclient import TestClient


def test_healthz(client: TestClient) -> None:
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_unknown_route_uses_envelope(client: TestClient) -> None:
    resp = client.get("/api/v2/nothing-here")
    assert resp.status_code == 404
    assert resp.json()["success"] is False


def test_metrics_exposed(client: TestClient) -> None:
    client.get("/healthz")
    resp = client.get("/metrics")
    assert resp.status_code == 200
