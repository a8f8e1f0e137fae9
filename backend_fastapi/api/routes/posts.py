from fastapi import APIRouter, Depends, status

from backend_fastapi.api.deps import (
    create_post_use_case,
    delete_post_use_case,
    get_post_use_case,
    list_posts_use_case,
    update_post_use_case,
)
from backend_fastapi.api.schemas import (
    CreatedResponse,
    DataResponse,
    DeletedResponse,
    ErrorResponse,
    PostResource,
    ValidationErrorResponse,
)
from core.application.posts.create_post import CreatePostCommand, CreatePostUseCase
from core.application.posts.delete_post import DeletePostCommand, DeletePostUseCase
from core.application.posts.get_post import GetPostUseCase
from core.application.posts.list_posts import ListPostsUseCase
from core.application.posts.update_post import UpdatePostCommand, UpdatePostUseCase
from core.domain.ids import parse_entity_id

router = APIRouter(prefix="/posts", tags=["posts"])

_NOT_FOUND = {404: {"model": ErrorResponse}}
_INVALID = {422: {"model": ValidationErrorResponse}}


@router.post(
    "",
    response_model=CreatedResponse[PostResource],
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
    summary="Crear un nuevo post",
)
def create_post(
    cmd: CreatePostCommand,
    use_case: CreatePostUseCase = Depends(create_post_use_case),
) -> CreatedResponse[PostResource]:
    """
    Crea un nuevo post.

    - **title** y **content** son obligatorios.
    - **status**: `draft` o `published` (por defecto `draft`).
    - **featured**: destacado, por defecto `false`.
    - **published_at**: fecha de publicación opcional.
    """
    post = use_case.execute(cmd)
    return CreatedResponse[PostResource](
        data=PostResource.model_validate(post),
        message="Post creado correctamente",
    )


@router.get(
    "",
    response_model=DataResponse[list[PostResource]],
    summary="Listar todos los posts",
)
def list_posts(
    use_case: ListPostsUseCase = Depends(list_posts_use_case),
) -> DataResponse[list[PostResource]]:
    posts = use_case.execute()
    return DataResponse[list[PostResource]](
        data=[PostResource.model_validate(post) for post in posts]
    )


@router.get(
    "/{post_id}",
    response_model=DataResponse[PostResource],
    responses=_NOT_FOUND,
    summary="Mostrar un post",
)
def show_post(
    post_id: str,
    use_case: GetPostUseCase = Depends(get_post_use_case),
) -> DataResponse[PostResource]:
    post = use_case.execute(parse_entity_id(post_id, "Post"))
    return DataResponse[PostResource](data=PostResource.model_validate(post))


@router.put(
    "/{post_id}",
    response_model=DataResponse[PostResource],
    responses={**_NOT_FOUND, **_INVALID},
    summary="Editar un post existente",
)
@router.patch(
    "/{post_id}",
    response_model=DataResponse[PostResource],
    responses={**_NOT_FOUND, **_INVALID},
    summary="Editar parcialmente un post existente",
)
def update_post(
    post_id: str,
    cmd: UpdatePostCommand,
    use_case: UpdatePostUseCase = Depends(update_post_use_case),
) -> DataResponse[PostResource]:
    post = use_case.execute(parse_entity_id(post_id, "Post"), cmd)
    return DataResponse[PostResource](data=PostResource.model_validate(post))


@router.delete(
    "/{post_id}",
    response_model=DeletedResponse,
    responses=_NOT_FOUND,
    summary="Eliminar un post",
)
def delete_post(
    post_id: str,
    use_case: DeletePostUseCase = Depends(delete_post_use_case),
) -> DeletedResponse:
    """
    Elimina el post y devuelve su id como confirmación.
    """
    command = DeletePostCommand(id=parse_entity_id(post_id, "Post"))
    use_case.execute(command)
    return DeletedResponse(message="Recurso eliminado exitosamente", deleted_id=command.id)
