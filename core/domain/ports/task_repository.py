from abc import ABC, abstractmethod

from core.domain.models.task import Task


class TaskRepository(ABC):
    @abstractmethod
    def list(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def save(self, task: Task) -> Task:
        """Inserta si `task.id` es None, actualiza en caso contrario."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> None:
        raise NotImplementedError
