import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from services.member_service.app.main import app
from services.member_service.app.models.database import Base, get_db
from services.member_service.app.services.member import MemberService

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    """
    TestClient backed by a fresh in-memory database for every test.
    """
    Base.metadata.create_all(bind=engine)
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


def test_health_check(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}

def test_create_then_update_member(client: TestClient):
    """
    Create Alice, rename her to Alicia, and check the id is kept.
    """
    response = client.post("/api/v2/members", json={"name": "Alice"})
    assert response.status_code == 201
    assert response.json() == {"id": 1}

    response = client.post("/api/v2/members/1", json={"name": "Alicia"})
    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Alicia"}

def test_create_assigns_distinct_ids(client: TestClient):
    ids = [
        client.post("/api/v2/members", json={"name": name}).json()["id"]
        for name in ("Alice", "Bob", "Carol")
    ]
    assert len(set(ids)) == 3

@pytest.mark.parametrize("body", [{"name": ""}, {"name": "   "}, {}])
def test_create_rejects_missing_or_empty_name(client: TestClient, body: dict):
    response = client.post("/api/v2/members", json=body)

    assert response.status_code == 422
    assert "name" in response.json()["details"]["invalid_fields"]
    assert client.get("/api/v2/members").json() == {"count": 0, "data": []}

def test_rejected_create_allocates_no_id(client: TestClient):
    assert client.post("/api/v2/members", json={"name": ""}).status_code == 422

    response = client.post("/api/v2/members", json={"name": "Alice"})
    assert response.json() == {"id": 1}

def test_create_duplicate_name(client: TestClient):
    client.post("/api/v2/members", json={"name": "Alice"})

    response = client.post("/api/v2/members", json={"name": "Alice"})

    assert response.status_code == 409
    assert response.json()["details"] == {"name": "Alice"}
    assert client.get("/api/v2/members").json()["count"] == 1

def test_update_unknown_member(client: TestClient):
    response = client.post("/api/v2/members/42", json={"name": "Ghost"})

    assert response.status_code == 404
    assert response.json()["details"] == {"entity": "Member", "id": 42}
    assert client.get("/api/v1/members").json() == []

def test_update_rejects_empty_name(client: TestClient):
    client.post("/api/v2/members", json={"name": "Alice"})

    response = client.post("/api/v2/members/1", json={"name": ""})

    assert response.status_code == 422
    assert client.get("/api/v1/members").json() == [{"id": 1, "name": "Alice"}]

def test_update_to_taken_name(client: TestClient):
    client.post("/api/v2/members", json={"name": "Alice"})
    client.post("/api/v2/members", json={"name": "Bob"})

    response = client.post("/api/v2/members/2", json={"name": "Alice"})

    assert response.status_code == 409
    assert client.get("/api/v2/members").json()["data"] == [{"name": "Alice"}, {"name": "Bob"}]

def test_concurrent_duplicate_create(client: TestClient, monkeypatch: pytest.MonkeyPatch):
    """
    A second request that already passed the duplicate check still gets 409
    from the unique constraint.
    """
    client.post("/api/v2/members", json={"name": "Alice"})
    monkeypatch.setattr(MemberService, "_validate_duplicate_name", lambda *args, **kwargs: None)

    response = client.post("/api/v2/members", json={"name": "Alice"})

    assert response.status_code == 409
    assert response.json()["details"] == {"name": "Alice"}
    assert client.get("/api/v2/members").json()["count"] == 1

def test_update_huge_id_not_found(client: TestClient):
    response = client.post("/api/v2/members/99999999999999999999", json={"name": "X"})

    assert response.status_code == 404

def test_create_name_length_limit(client: TestClient):
    assert client.post("/api/v2/members", json={"name": "a" * 100}).status_code == 201

    response = client.post("/api/v2/members", json={"name": "b" * 101})

    assert response.status_code == 422
    assert response.json()["details"] == {"invalid_fields": {"name": "too_long"}}

@pytest.mark.parametrize(
    "path, kwargs, field",
    [
        ("/api/v2/members/abc", {"json": {"name": "X"}}, "path.id"),
        ("/api/v2/members", {"json": {"name": 5}}, "body.name"),
        ("/api/v2/members", {"content": b"{not json", "headers": {"content-type": "application/json"}}, "body"),
    ],
)
def test_request_errors_use_error_response(client: TestClient, path: str, kwargs: dict, field: str):
    response = client.post(path, **kwargs)

    assert response.status_code == 422
    body = response.json()
    assert isinstance(body["detail"], str)
    assert any(key.startswith(field) for key in body["details"]["invalid_fields"])

def test_update_is_idempotent(client: TestClient):
    client.post("/api/v2/members", json={"name": "Alice"})

    first = client.post("/api/v2/members/1", json={"name": "Alicia"})
    second = client.post("/api/v2/members/1", json={"name": "Alicia"})

    assert first.json() == second.json() == {"id": 1, "name": "Alicia"}

def test_create_member_v1_ignores_client_id(client: TestClient):
    response = client.post("/api/v1/members", json={"id": 99, "name": "Alice"})

    assert response.status_code == 201
    assert response.json() == {"id": 1}

def test_create_member_v1_requires_name(client: TestClient):
    response = client.post("/api/v1/members", json={"id": 99})
    assert response.status_code == 422

def test_list_members(client: TestClient):
    for name in ("Alice", "Bob"):
        client.post("/api/v2/members", json={"name": name})

    assert client.get("/api/v1/members").json() == [
        {"id": 1, "name": "Alice"},
        {"id": 2, "name": "Bob"},
    ]
    assert client.get("/api/v2/members").json() == {
        "count": 2,
        "data": [{"name": "Alice"}, {"name": "Bob"}],
    }

def test_openapi_document(client: TestClient):
    schema = client.get("/openapi.json").json()

    assert schema["info"]["title"] == "Shop Member API"
    assert {"/api/v1/members", "/api/v2/members", "/api/v2/members/{id}"} <= set(schema["paths"])
    assert schema["paths"]["/api/v2/members"]["post"]["summary"] == "Register a member"
