import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.application.validation import empty_to_none
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class CreateTaskCommand(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDIENTE

    blank_description = field_validator("description")(empty_to_none)


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        task = self._repository.save(
            Task(
                title=cmd.title,
                description=cmd.description,
                status=cmd.status,
            )
        )
        logger.info(f"✅ Tarea {task.id} creada ({task.status.value})")
        return task
