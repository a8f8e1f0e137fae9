import logging

from core.domain.errors import EntityNotFoundError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class GetTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int) -> Task:
        task = self._repository.get(task_id)
        if task is None:
            logger.warning(f"🔍 Tarea {task_id} no encontrada")
            raise EntityNotFoundError("Tarea", task_id)
        return task
