from fastapi.testclient import TestClient

from smartclass.db.mongodb import get_db
from smartclass.main import app


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_unknown_route_uses_message_shape(client):
    r = client.get("/timetables")
    assert r.status_code == 404
    assert r.json() == {"message": "Not Found"}


def test_malformed_json_is_a_400(client):
    r = client.post("/grades", content="{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert "message" in r.json()


def test_store_failure_is_a_generic_500(client):
    def broken_db():
        raise RuntimeError("connection refused")

    app.dependency_overrides[get_db] = broken_db
    r = TestClient(app, raise_server_exceptions=False).get("/grades")
    assert r.status_code == 500
    assert r.json() == {"message": "Internal server error"}
    assert "connection refused" not in r.text
