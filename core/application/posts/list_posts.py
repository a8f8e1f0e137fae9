from core.domain.models.post import Post
from core.domain.ports.post_repository import PostRepository


class ListPostsUseCase:
    def __init__(self, repository: PostRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Post]:
        return self._repository.list()
