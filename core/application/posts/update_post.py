import logging
from dataclasses import replace
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.application.validation import empty_to_none, naive_utc, reject_null
from core.domain.errors import EntityNotFoundError
from core.domain.models.post import Post, PostStatus
from core.domain.ports.post_repository import PostRepository

logger = logging.getLogger(__name__)


class UpdatePostCommand(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = Field(default=None, min_length=1)
    excerpt: str | None = None
    status: PostStatus | None = None
    featured: bool | None = None
    published_at: datetime | None = None

    required_fields = field_validator("title", "content", "status", "featured")(reject_null)
    blank_excerpt = field_validator("excerpt")(empty_to_none)
    utc_published_at = field_validator("published_at")(naive_utc)


def apply_post_changes(post: Post, cmd: UpdatePostCommand) -> Post:
    supplied = cmd.model_fields_set
    return replace(
        post,
        title=cmd.title if "title" in supplied else post.title,
        content=cmd.content if "content" in supplied else post.content,
        excerpt=cmd.excerpt if "excerpt" in supplied else post.excerpt,
        status=cmd.status if "status" in supplied else post.status,
        featured=cmd.featured if "featured" in supplied else post.featured,
        published_at=cmd.published_at if "published_at" in supplied else post.published_at,
    )


class UpdatePostUseCase:
    def __init__(self, repository: PostRepository) -> None:
        self._repository = repository

    def execute(self, post_id: int, cmd: UpdatePostCommand) -> Post:
        post = self._repository.get(post_id)
        if post is None:
            logger.warning(f"🔍 Post {post_id} no encontrado para actualizar")
            raise EntityNotFoundError("Post", post_id)

        post = self._repository.save(apply_post_changes(post, cmd))
        logger.info(f"✏️ Post {post_id} actualizado: {sorted(cmd.model_fields_set)}")
        return post
