from fastapi import Depends

from core.application.posts.create_post import CreatePostUseCase
from core.application.posts.delete_post import DeletePostUseCase
from core.application.posts.get_post import GetPostUseCase
from core.application.posts.list_posts import ListPostsUseCase
from core.application.posts.update_post import UpdatePostUseCase
from core.application.tasks.create_task import CreateTaskUseCase
from core.application.tasks.delete_task import DeleteTaskUseCase
from core.application.tasks.get_task import GetTaskUseCase
from core.application.tasks.list_tasks import ListTasksUseCase
from core.application.tasks.update_task import UpdateTaskUseCase
from core.domain.ports.post_repository import PostRepository
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import get_post_repository, get_task_repository


def task_repository() -> TaskRepository:
    return get_task_repository()


def post_repository() -> PostRepository:
    return get_post_repository()


def create_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository)


def list_tasks_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> ListTasksUseCase:
    return ListTasksUseCase(repository)


def get_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> GetTaskUseCase:
    return GetTaskUseCase(repository)


def update_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository)


def delete_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository)


def create_post_use_case(
    repository: PostRepository = Depends(post_repository),
) -> CreatePostUseCase:
    return CreatePostUseCase(repository)


def list_posts_use_case(
    repository: PostRepository = Depends(post_repository),
) -> ListPostsUseCase:
    return ListPostsUseCase(repository)


def get_post_use_case(
    repository: PostRepository = Depends(post_repository),
) -> GetPostUseCase:
    return GetPostUseCase(repository)


def update_post_use_case(
    repository: PostRepository = Depends(post_repository),
) -> UpdatePostUseCase:
    return UpdatePostUseCase(repository)


def delete_post_use_case(
    repository: PostRepository = Depends(post_repository),
) -> DeletePostUseCase:
    return DeletePostUseCase(repository)
