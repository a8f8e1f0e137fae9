from typing import List

from core.domain.ids import is_storable_id
from core.domain.models.post import Post, PostStatus
from core.domain.ports.post_repository import PostRepository
from infrastructure.peewee.model.models import PostModel, utcnow
from infrastructure.peewee.session.db import db, init_db


def _to_domain(model: PostModel) -> Post:
    return Post(
        id=model.id,
        title=model.title,
        content=model.content,
        excerpt=model.excerpt,
        status=PostStatus(model.status),
        featured=model.featured,
        published_at=model.published_at,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class PeeweePostRepository(PostRepository):
    def __init__(self):
        init_db([PostModel])

    def save(self, post: Post) -> Post:
        fields = {
            "title": post.title,
            "content": post.content,
            "excerpt": post.excerpt,
            "status": post.status.value,
            "featured": post.featured,
            "published_at": post.published_at,
        }
        with db.atomic():
            if post.id is None:
                return _to_domain(PostModel.create(**fields))

            model = PostModel.get(PostModel.id == post.id)
            for name, value in fields.items():
                setattr(model, name, value)
            model.updated_at = utcnow()
            model.save()
            return _to_domain(model)

    def get(self, post_id: int) -> Post | None:
        if not is_storable_id(post_id):
            return None
        model = PostModel.get_or_none(PostModel.id == post_id)
        if model is None:
            return None
        return _to_domain(model)

    def list(self) -> List[Post]:
        return [_to_domain(p) for p in PostModel.select().order_by(PostModel.id)]

    def delete(self, post_id: int) -> None:
        if not is_storable_id(post_id):
            return
        PostModel.delete().where(PostModel.id == post_id).execute()
