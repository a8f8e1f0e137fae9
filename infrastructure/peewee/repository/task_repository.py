from typing import List

from core.domain.ids import is_storable_id
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel, utcnow
from infrastructure.peewee.session.db import db, init_db


def _to_domain(model: TaskModel) -> Task:
    return Task(
        id=model.id,
        title=model.title,
        description=model.description,
        status=TaskStatus(model.status),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class PeeweeTaskRepository(TaskRepository):
    def __init__(self):
        # Tables are created on init; there is no migration step.
        init_db([TaskModel])

    def save(self, task: Task) -> Task:
        with db.atomic():
            if task.id is None:
                model = TaskModel.create(
                    title=task.title,
                    description=task.description,
                    status=task.status.value,
                )
                return _to_domain(model)

            model = TaskModel.get(TaskModel.id == task.id)
            model.title = task.title
            model.description = task.description
            model.status = task.status.value
            model.updated_at = utcnow()
            model.save()
            return _to_domain(model)

    def get(self, task_id: int) -> Task | None:
        if not is_storable_id(task_id):
            return None
        model = TaskModel.get_or_none(TaskModel.id == task_id)
        if model is None:
            return None
        return _to_domain(model)

    def list(self) -> List[Task]:
        return [_to_domain(t) for t in TaskModel.select().order_by(TaskModel.id)]

    def delete(self, task_id: int) -> None:
        if not is_storable_id(task_id):
            return
        query = TaskModel.delete().where(TaskModel.id == task_id)
        query.execute()
