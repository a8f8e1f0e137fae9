from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from core.domain.models.post import PostStatus
from core.domain.models.task import TaskStatus

T = TypeVar("T")


class TaskResource(BaseModel):
    """Representación pública de una tarea."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    status: TaskStatus
    created_at: datetime | None
    updated_at: datetime | None


class PostResource(BaseModel):
    """Representación pública de un post."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    excerpt: str | None
    status: PostStatus
    featured: bool
    published_at: datetime | None
    created_at: datetime | None
    updated_at: datetime | None


class DataResponse(BaseModel, Generic[T]):
    data: T


class CreatedResponse(DataResponse[T], Generic[T]):
    message: str


class DeletedResponse(BaseModel):
    message: str
    deleted_id: int


class ErrorResponse(BaseModel):
    message: str


class ValidationErrorResponse(ErrorResponse):
    errors: dict[str, list[str]]
