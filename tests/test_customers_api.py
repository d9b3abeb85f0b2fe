"""Tests for the customers JSON API, run against both store backends."""
import pytest

from app.crm import create_app
from app.crm.models import Base


@pytest.fixture(params=["database", "memory"])
def client(request, tmp_path, monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'test.db'}")
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("STORE_BACKEND", request.param)

    app = create_app()
    engine = app.extensions.get("sqlalchemy_engine")
    if engine is not None:
        Base.metadata.create_all(bind=engine)
    return app.test_client()


def _create(client, name, email):
    r = client.post("/customer", json={"name": name, "email": email})
    assert r.status_code == 201, r.json
    return r.json


def test_create_returns_active_customer(client):
    c = _create(client, "Ana", "ana@x.com")
    assert c["name"] == "Ana"
    assert c["email"] == "ana@x.com"
    assert c["status"] is True
    assert c["id"]
    assert c["created_at"]


def test_create_assigns_unique_ids(client):
    ids = {_create(client, f"Cliente {i}", f"c{i}@x.com")["id"] for i in range(5)}
    assert len(ids) == 5


def test_create_strips_whitespace(client):
    c = _create(client, "  Ana  ", " ana@x.com ")
    assert c["name"] == "Ana"
    assert c["email"] == "ana@x.com"


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "", "email": "ana@x.com"},
        {"name": "Ana", "email": ""},
        {"name": "   ", "email": "ana@x.com"},
        {"email": "ana@x.com"},
        {"name": "Ana"},
        {"name": 123, "email": "ana@x.com"},
        {},
    ],
)
def test_create_missing_fields_rejected(client, payload):
    r = client.post("/customer", json=payload)
    assert r.status_code == 400
    assert r.json["message"]
    assert client.get("/customers").json == []


def test_create_non_json_body_rejected(client):
    r = client.post("/customer", data="name=Ana", content_type="text/plain")
    assert r.status_code == 400
    assert "required" in r.json["message"].lower()

    r = client.post("/customer", json=["Ana", "ana@x.com"])
    assert r.status_code == 400


def test_list_empty(client):
    r = client.get("/customers")
    assert r.status_code == 200
    assert r.json == []


def test_list_returns_created_in_insertion_order(client):
    created = [_create(client, f"Cliente {i}", f"c{i}@x.com") for i in range(4)]
    listed = client.get("/customers").json
    assert len(listed) == 4
    assert [c["id"] for c in listed] == [c["id"] for c in created]
    assert listed == created


def test_delete_removes_customer(client):
    a = _create(client, "Ana", "ana@x.com")
    b = _create(client, "Bia", "bia@x.com")

    r = client.delete("/customer", query_string={"id": a["id"]})
    assert r.status_code == 204
    assert r.data == b""

    ids = [c["id"] for c in client.get("/customers").json]
    assert ids == [b["id"]]


def test_delete_unknown_id_rejected(client):
    a = _create(client, "Ana", "ana@x.com")

    r = client.delete("/customer", query_string={"id": "does-not-exist"})
    assert r.status_code == 400
    assert r.json["message"] == "Customer not found."
    assert [c["id"] for c in client.get("/customers").json] == [a["id"]]


def test_delete_without_id_rejected(client):
    r = client.delete("/customer")
    assert r.status_code == 400
    assert r.json["message"]


def test_delete_twice_rejected(client):
    a = _create(client, "Ana", "ana@x.com")
    assert client.delete("/customer", query_string={"id": a["id"]}).status_code == 204
    assert client.delete("/customer", query_string={"id": a["id"]}).status_code == 400


def test_end_to_end_flow(client):
    r = client.post("/customer", json={"name": "Ana", "email": "ana@x.com"})
    assert r.status_code == 201
    ana = r.json
    assert {"id", "name", "email", "status"} <= set(ana)
    assert (ana["name"], ana["email"], ana["status"]) == ("Ana", "ana@x.com", True)

    assert ana in client.get("/customers").json

    r = client.delete("/customer", query_string={"id": ana["id"]})
    assert r.status_code == 204

    assert all(c["id"] != ana["id"] for c in client.get("/customers").json)
