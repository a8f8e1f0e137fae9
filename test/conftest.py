import os

# Use memory database for tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.api.deps import post_repository, task_repository
from backend_fastapi.main import app
from fakes import InMemoryPostRepository, InMemoryTaskRepository


@pytest.fixture
def task_repo():
    return InMemoryTaskRepository()


@pytest.fixture
def post_repo():
    return InMemoryPostRepository()


@pytest.fixture
def client(task_repo, post_repo):
    """TestClient con los repositorios reemplazados por versiones en memoria."""
    app.dependency_overrides[task_repository] = lambda: task_repo
    app.dependency_overrides[post_repository] = lambda: post_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
