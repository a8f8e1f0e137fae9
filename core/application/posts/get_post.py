import logging

from core.domain.errors import EntityNotFoundError
from core.domain.models.post import Post
from core.domain.ports.post_repository import PostRepository

logger = logging.getLogger(__name__)


class GetPostUseCase:
    def __init__(self, repository: PostRepository) -> None:
        self._repository = repository

    def execute(self, post_id: int) -> Post:
        post = self._repository.get(post_id)
        if post is None:
            logger.warning(f"🔍 Post {post_id} no encontrado")
            raise EntityNotFoundError("Post", post_id)
        return post
