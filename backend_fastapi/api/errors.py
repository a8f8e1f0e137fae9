"""
Manejadores de excepciones de la API.

Todas las respuestas de error comparten el mismo sobre:
    - 422: {"message": <resumen>, "errors": {<campo>: [<mensaje>, ...]}}
    - 404 / 500 / otros: {"message": <resumen>}
"""

import logging
from collections.abc import Iterable
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.application.validation import field_errors, summary
from core.domain.errors import EntityNotFoundError

logger = logging.getLogger(__name__)

_NOT_FOUND_MESSAGES = {
    "Tarea": "Tarea no encontrada",
    "Post": "Post no encontrado",
}
_HTTP_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "Recurso no encontrado",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Método no permitido",
}
INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


def _validation_response(errors: Iterable[Any]) -> JSONResponse:
    mapped = field_errors(errors)
    return JSONResponse(
        status_code=422,
        content={"message": summary(mapped), "errors": mapped},
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    response = _validation_response(exc.errors())
    logger.warning(
        f"⚠️ Validación fallida en {request.method} {request.url.path}: "
        f"{response.body.decode()}"
    )
    return response


async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": _NOT_FOUND_MESSAGES.get(exc.entity, "Recurso no encontrado")},
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    message = _HTTP_MESSAGES.get(exc.status_code, str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        f"❌ Error no controlado en {request.method} {request.url.path}: {exc}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(EntityNotFoundError, not_found_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
