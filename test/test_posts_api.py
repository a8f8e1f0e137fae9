"""Tests de la API de posts."""

import pytest

from core.domain.models.post import Post, PostStatus


@pytest.fixture
def existing_post(post_repo):
    return post_repo.save(
        Post(title="Original Title", content="Original content", excerpt="Resumen")
    )


def test_create_post(client, post_repo):
    response = client.post(
        "/posts",
        json={
            "title": "Test Post Title",
            "content": "This is test content for the post",
            "excerpt": "Test excerpt",
            "status": "published",
            "featured": True,
            "published_at": "2026-10-19T10:00:00+02:00",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Post creado correctamente"
    data = body["data"]
    assert data["title"] == "Test Post Title"
    assert data["status"] == "published"
    assert data["featured"] is True
    assert data["published_at"] == "2026-10-19T08:00:00"
    assert len(post_repo.list()) == 1


def test_create_post_defaults(client):
    response = client.post("/posts", json={"title": "Test Post", "content": "Test content"})

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "draft"
    assert data["featured"] is False
    assert data["excerpt"] is None
    assert data["published_at"] is None


def test_create_post_without_title_fails(client):
    response = client.post("/posts", json={"content": "Test content", "status": "published"})

    assert response.status_code == 422
    assert list(response.json()["errors"]) == ["title"]


def test_create_post_without_content_fails(client):
    response = client.post("/posts", json={"title": "Test Title", "status": "published"})

    assert response.status_code == 422
    assert list(response.json()["errors"]) == ["content"]


def test_create_post_with_invalid_status_fails(client):
    response = client.post(
        "/posts",
        json={"title": "Test Title", "content": "Test content", "status": "invalid_status"},
    )

    assert response.status_code == 422
    assert list(response.json()["errors"]) == ["status"]


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("featured", "quizás", "El campo featured debe ser verdadero o falso."),
        ("published_at", "no-es-fecha", "El campo published_at no es una fecha válida."),
    ],
)
def test_create_post_with_malformed_field_fails(client, field, value, message):
    response = client.post(
        "/posts", json={"title": "t", "content": "c", field: value}
    )

    assert response.status_code == 422
    assert response.json()["errors"] == {field: [message]}


def test_list_posts(client, post_repo):
    for i in range(3):
        post_repo.save(Post(title=f"Post {i}", content="c"))

    response = client.get("/posts")

    assert response.status_code == 200
    assert len(response.json()["data"]) == 3


def test_list_posts_empty(client):
    assert client.get("/posts").json() == {"data": []}


def test_show_post(client, existing_post):
    response = client.get(f"/posts/{existing_post.id}")

    assert response.status_code == 200
    assert response.json()["data"]["id"] == existing_post.id


def test_show_missing_post_returns_404(client):
    response = client.get("/posts/99999")

    assert response.status_code == 404
    assert response.json() == {"message": "Post no encontrado"}


def test_update_post(client, existing_post, post_repo):
    response = client.put(
        f"/posts/{existing_post.id}",
        json={"title": "Updated Title", "content": "Updated content", "status": "draft"},
    )

    assert response.status_code == 200
    stored = post_repo.get(existing_post.id)
    assert stored.title == "Updated Title"
    assert stored.content == "Updated content"
    assert stored.excerpt == "Resumen"


def test_update_post_publishes(client, existing_post):
    response = client.patch(
        f"/posts/{existing_post.id}",
        json={"status": "published", "published_at": "2026-10-19T09:00:00"},
    )

    data = response.json()["data"]
    assert data["status"] == "published"
    assert data["published_at"] == "2026-10-19T09:00:00"
    assert data["content"] == "Original content"


def test_update_post_rejects_null_content(client, existing_post, post_repo):
    response = client.put(f"/posts/{existing_post.id}", json={"content": None})

    assert response.status_code == 422
    assert response.json()["errors"] == {"content": ["El campo content es obligatorio."]}
    assert post_repo.get(existing_post.id).content == "Original content"


def test_update_missing_post_returns_404(client):
    response = client.put(
        "/posts/99999",
        json={"title": "Updated Title", "content": "Updated content", "status": "published"},
    )

    assert response.status_code == 404


def test_delete_post(client, existing_post, post_repo):
    response = client.delete(f"/posts/{existing_post.id}")

    assert response.status_code == 200
    assert response.json() == {
        "message": "Recurso eliminado exitosamente",
        "deleted_id": existing_post.id,
    }
    assert post_repo.get(existing_post.id) is None
    assert post_repo.list() == []


def test_deleted_post_is_gone(client, existing_post):
    client.delete(f"/posts/{existing_post.id}")

    show = client.get(f"/posts/{existing_post.id}")
    assert show.status_code == 404
    assert show.json() == {"message": "Post no encontrado"}

    second = client.delete(f"/posts/{existing_post.id}")
    assert second.status_code == 404
    assert second.json() == {"message": "Post no encontrado"}


def test_delete_missing_post_returns_404(client):
    assert client.delete("/posts/99999").status_code == 404


def test_show_post_with_non_numeric_id_returns_404(client):
    response = client.get("/posts/abc")

    assert response.status_code == 404
    assert response.json() == {"message": "Post no encontrado"}


@pytest.mark.parametrize("method", ["get", "put", "patch", "delete"])
def test_post_id_out_of_integer_range_returns_404(client, method):
    kwargs = {"json": {"title": "X"}} if method in {"put", "patch"} else {}

    response = client.request(method.upper(), "/posts/9223372036854775808", **kwargs)

    assert response.status_code == 404
    assert response.json() == {"message": "Post no encontrado"}


def test_status_enum_is_stored_as_member(client, post_repo):
    client.post("/posts", json={"title": "t", "content": "c", "status": "published"})

    assert post_repo.list()[0].status is PostStatus.PUBLISHED
