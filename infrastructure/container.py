import os
from functools import lru_cache

from core.domain.ports.post_repository import PostRepository
from core.domain.ports.task_repository import TaskRepository


def _orm() -> str:
    return os.getenv("ORM", "peewee").lower()


# Una instancia por proceso: crear el repositorio ejecuta init_db.
@lru_cache(maxsize=None)
def get_task_repository() -> TaskRepository:
    if _orm() == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.task_repository import (
            SqlAlchemyTaskRepository,
        )

        return SqlAlchemyTaskRepository()
    # Default to Peewee
    from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository

    return PeeweeTaskRepository()


@lru_cache(maxsize=None)
def get_post_repository() -> PostRepository:
    if _orm() == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.post_repository import (
            SqlAlchemyPostRepository,
        )

        return SqlAlchemyPostRepository()
    from infrastructure.peewee.repository.post_repository import PeeweePostRepository

    return PeeweePostRepository()
