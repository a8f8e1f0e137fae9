import logging
from dataclasses import replace

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.application.validation import empty_to_none, reject_null
from core.domain.errors import EntityNotFoundError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class UpdateTaskCommand(BaseModel):
    """
    Actualización parcial: solo se aplican los campos presentes en la
    petición (`model_fields_set`).
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    status: TaskStatus | None = None

    required_fields = field_validator("title", "status")(reject_null)
    blank_description = field_validator("description")(empty_to_none)


def apply_task_changes(task: Task, cmd: UpdateTaskCommand) -> Task:
    supplied = cmd.model_fields_set
    return replace(
        task,
        title=cmd.title if "title" in supplied else task.title,
        description=cmd.description if "description" in supplied else task.description,
        status=cmd.status if "status" in supplied else task.status,
    )


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int, cmd: UpdateTaskCommand) -> Task:
        task = self._repository.get(task_id)
        if task is None:
            logger.warning(f"🔍 Tarea {task_id} no encontrada para actualizar")
            raise EntityNotFoundError("Tarea", task_id)

        task = self._repository.save(apply_task_changes(task, cmd))
        logger.info(f"✏️ Tarea {task_id} actualizada: {sorted(cmd.model_fields_set)}")
        return task
