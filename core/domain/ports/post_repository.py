from abc import ABC, abstractmethod

from core.domain.models.post import Post


class PostRepository(ABC):
    @abstractmethod
    def list(self) -> list[Post]:
        raise NotImplementedError

    @abstractmethod
    def save(self, post: Post) -> Post:
        raise NotImplementedError

    @abstractmethod
    def get(self, post_id: int) -> Post | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, post_id: int) -> None:
        raise NotImplementedError
