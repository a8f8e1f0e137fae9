from core.domain.ids import is_storable_id
from core.domain.models.post import Post, PostStatus
from core.domain.ports.post_repository import PostRepository
from infrastructure.sqlalchemy.session.db import get_session, init_db
from infrastructure.sqlalchemy.model.models import PostModel


def _to_domain(post_model: PostModel) -> Post:
    return Post(
        id=post_model.id,
        title=post_model.title,
        content=post_model.content,
        excerpt=post_model.excerpt,
        status=PostStatus(post_model.status),
        featured=post_model.featured,
        published_at=post_model.published_at,
        created_at=post_model.created_at,
        updated_at=post_model.updated_at,
    )


class SqlAlchemyPostRepository(PostRepository):
    def __init__(self) -> None:
        init_db()

    def save(self, post: Post) -> Post:
        session = get_session()
        try:
            if post.id is None:
                post_model = PostModel()
                session.add(post_model)
            else:
                post_model = session.get(PostModel, post.id)
                if post_model is None:
                    raise ValueError(f"No existe Post con id {post.id}")

            post_model.title = post.title
            post_model.content = post.content
            post_model.excerpt = post.excerpt
            post_model.status = post.status.value
            post_model.featured = post.featured
            post_model.published_at = post.published_at
            session.commit()
            session.refresh(post_model)
            return _to_domain(post_model)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get(self, post_id: int) -> Post | None:
        if not is_storable_id(post_id):
            return None
        session = get_session()
        try:
            post_model = session.get(PostModel, post_id)
            if post_model is None:
                return None
            return _to_domain(post_model)
        finally:
            session.close()

    def list(self) -> list[Post]:
        session = get_session()
        try:
            post_models = session.query(PostModel).order_by(PostModel.id).all()
            return [_to_domain(post_model) for post_model in post_models]
        finally:
            session.close()

    def delete(self, post_id: int) -> None:
        if not is_storable_id(post_id):
            return
        session = get_session()
        try:
            post_model = session.get(PostModel, post_id)
            if post_model is None:
                return
            session.delete(post_model)
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
