import logging
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.application.validation import empty_to_none, naive_utc
from core.domain.models.post import Post, PostStatus
from core.domain.ports.post_repository import PostRepository

logger = logging.getLogger(__name__)


class CreatePostCommand(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    excerpt: str | None = None
    status: PostStatus = PostStatus.DRAFT
    featured: bool = False
    published_at: datetime | None = None

    blank_excerpt = field_validator("excerpt")(empty_to_none)
    utc_published_at = field_validator("published_at")(naive_utc)


class CreatePostUseCase:
    def __init__(self, repository: PostRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreatePostCommand) -> Post:
        post = self._repository.save(
            Post(
                title=cmd.title,
                content=cmd.content,
                excerpt=cmd.excerpt,
                status=cmd.status,
                featured=cmd.featured,
                published_at=cmd.published_at,
            )
        )
        logger.info(f"✅ Post {post.id} creado ({post.status.value})")
        return post
