from fastapi import APIRouter, Depends, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas import (
    CreatedResponse,
    DataResponse,
    DeletedResponse,
    ErrorResponse,
    TaskResource,
    ValidationErrorResponse,
)
from core.application.tasks.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.tasks.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.tasks.get_task import GetTaskUseCase
from core.application.tasks.list_tasks import ListTasksUseCase
from core.application.tasks.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.ids import parse_entity_id

router = APIRouter(prefix="/tasks", tags=["tasks"])

_NOT_FOUND = {404: {"model": ErrorResponse}}
_INVALID = {422: {"model": ValidationErrorResponse}}


@router.post(
    "",
    response_model=CreatedResponse[TaskResource],
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
    summary="Crear una nueva tarea",
)
def create_task(
    cmd: CreateTaskCommand,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> CreatedResponse[TaskResource]:
    """
    Crea una nueva tarea.

    - **title**: Título de la tarea (obligatorio, máximo 255 caracteres).
    - **description**: Descripción opcional.
    - **status**: `pendiente`, `en progreso` o `completada` (por defecto `pendiente`).
    """
    task = use_case.execute(cmd)
    return CreatedResponse[TaskResource](
        data=TaskResource.model_validate(task),
        message="Tarea creada correctamente",
    )


@router.get(
    "",
    response_model=DataResponse[list[TaskResource]],
    summary="Listar todas las tareas",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> DataResponse[list[TaskResource]]:
    """
    Obtiene todas las tareas registradas.
    """
    tasks = use_case.execute()
    return DataResponse[list[TaskResource]](
        data=[TaskResource.model_validate(task) for task in tasks]
    )


@router.get(
    "/{task_id}",
    response_model=DataResponse[TaskResource],
    responses=_NOT_FOUND,
    summary="Mostrar una tarea",
)
def show_task(
    task_id: str,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> DataResponse[TaskResource]:
    task = use_case.execute(parse_entity_id(task_id, "Tarea"))
    return DataResponse[TaskResource](data=TaskResource.model_validate(task))


@router.put(
    "/{task_id}",
    response_model=DataResponse[TaskResource],
    responses={**_NOT_FOUND, **_INVALID},
    summary="Editar una tarea existente",
)
@router.patch(
    "/{task_id}",
    response_model=DataResponse[TaskResource],
    responses={**_NOT_FOUND, **_INVALID},
    summary="Editar parcialmente una tarea existente",
)
def update_task(
    task_id: str,
    cmd: UpdateTaskCommand,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> DataResponse[TaskResource]:
    """
    Modifica solo los campos enviados; el resto conserva su valor.

    - **task_id**: id de la tarea a modificar.
    """
    task = use_case.execute(parse_entity_id(task_id, "Tarea"), cmd)
    return DataResponse[TaskResource](data=TaskResource.model_validate(task))


@router.delete(
    "/{task_id}",
    response_model=DeletedResponse,
    responses=_NOT_FOUND,
    summary="Eliminar una tarea",
)
def delete_task(
    task_id: str,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> DeletedResponse:
    command = DeleteTaskCommand(id=parse_entity_id(task_id, "Tarea"))
    use_case.execute(command)
    return DeletedResponse(message="Tarea eliminada correctamente", deleted_id=command.id)
