from fastapi.testclient import TestClient

from backend_fastapi.api.deps import task_repository
from backend_fastapi.main import app
from fakes import InMemoryTaskRepository


class BrokenTaskRepository(InMemoryTaskRepository):
    def list(self):
        raise RuntimeError("database is locked")


def test_unexpected_error_returns_generic_message():
    app.dependency_overrides[task_repository] = BrokenTaskRepository
    try:
        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/tasks")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"message": "Error interno del servidor"}
    assert "locked" not in response.text


def test_unknown_route_uses_message_envelope(client):
    response = client.get("/users")

    assert response.status_code == 404
    assert response.json() == {"message": "Recurso no encontrado"}


def test_wrong_method_uses_message_envelope(client):
    response = client.post("/tasks/1", json={})

    assert response.status_code == 405
    assert response.json() == {"message": "Método no permitido"}


def test_missing_body_is_reported(client):
    response = client.post("/tasks")

    assert response.status_code == 422
    assert response.json()["errors"] == {"body": ["El campo body es obligatorio."]}
