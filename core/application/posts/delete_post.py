import logging
from dataclasses import dataclass

from core.domain.errors import EntityNotFoundError
from core.domain.ports.post_repository import PostRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeletePostCommand:
    id: int


class DeletePostUseCase:
    def __init__(self, repository: PostRepository) -> None:
        self._repository = repository

    def execute(self, cmd: DeletePostCommand) -> None:
        post = self._repository.get(cmd.id)
        if post is None:
            logger.warning(f"🔍 Post {cmd.id} no encontrado para eliminar")
            raise EntityNotFoundError("Post", cmd.id)
        self._repository.delete(cmd.id)
        logger.info(f"🗑️ Post {cmd.id} eliminado")
