from core.domain.ids import is_storable_id
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.sqlalchemy.session.db import get_session, init_db
from infrastructure.sqlalchemy.model.models import TaskModel


def _to_domain(task_model: TaskModel) -> Task:
    return Task(
        id=task_model.id,
        title=task_model.title,
        description=task_model.description,
        status=TaskStatus(task_model.status),
        created_at=task_model.created_at,
        updated_at=task_model.updated_at,
    )


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self) -> None:
        init_db()

    def save(self, task: Task) -> Task:
        session = get_session()
        try:
            if task.id is None:
                task_model = TaskModel()
                session.add(task_model)
            else:
                task_model = session.get(TaskModel, task.id)
                if task_model is None:
                    raise ValueError(f"No existe Tarea con id {task.id}")

            task_model.title = task.title
            task_model.description = task.description
            task_model.status = task.status.value
            session.commit()
            session.refresh(task_model)
            return _to_domain(task_model)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get(self, task_id: int) -> Task | None:
        if not is_storable_id(task_id):
            return None
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return None
            return _to_domain(task_model)
        finally:
            session.close()

    def list(self) -> list[Task]:
        session = get_session()
        try:
            task_models = session.query(TaskModel).order_by(TaskModel.id).all()
            return [_to_domain(task_model) for task_model in task_models]
        finally:
            session.close()

    def delete(self, task_id: int) -> None:
        if not is_storable_id(task_id):
            return
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return
            session.delete(task_model)
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
