from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class PostStatus(Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


@dataclass(frozen=True, slots=True)
class Post:
    title: str
    content: str
    excerpt: str | None = None
    status: PostStatus = PostStatus.DRAFT
    featured: bool = False
    published_at: datetime | None = None
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
