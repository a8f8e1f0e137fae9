"""
Reglas compartidas por los comandos de entrada y traducción de los errores
de pydantic al mapa `{campo: [mensajes]}` que devuelve la API.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from pydantic_core import PydanticCustomError

# Prefijos que FastAPI antepone al `loc` de cada error.
_ORIGENES = {"body", "path", "query", "header", "cookie"}

_MENSAJES: dict[str, str] = {
    "missing": "El campo {field} es obligatorio.",
    "string_too_short": "El campo {field} es obligatorio.",
    "string_too_long": "El campo {field} no debe tener más de {max_length} caracteres.",
    "string_type": "El campo {field} debe ser una cadena de texto.",
    "enum": "El valor seleccionado para {field} no es válido.",
    "bool_type": "El campo {field} debe ser verdadero o falso.",
    "bool_parsing": "El campo {field} debe ser verdadero o falso.",
    "int_type": "El campo {field} debe ser un número entero.",
    "int_parsing": "El campo {field} debe ser un número entero.",
    "json_invalid": "El cuerpo de la petición no es un JSON válido.",
    "model_attributes_type": "El cuerpo de la petición debe ser un objeto JSON.",
    "dict_type": "El cuerpo de la petición debe ser un objeto JSON.",
}
_MENSAJE_FECHA = "El campo {field} no es una fecha válida."


def empty_to_none(value: str | None) -> str | None:
    """Cadena vacía → None, para los campos de texto opcionales."""
    if value == "":
        return None
    return value


def reject_null(value: Any) -> Any:
    """
    En una actualización parcial un campo puede omitirse, pero no enviarse
    como null si el campo es obligatorio.
    """
    if value is None:
        raise PydanticCustomError("missing", "Field required")
    return value


def naive_utc(value: datetime | None) -> datetime | None:
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def field_name(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in _ORIGENES:
        parts = parts[1:]
    return ".".join(parts) or "body"


def error_field(error: Mapping[str, Any]) -> str:
    # El `loc` de un JSON mal formado apunta a una posición, no a un campo.
    if error.get("type") == "json_invalid":
        return "body"
    return field_name(error.get("loc", ()))


def message_for(error: Mapping[str, Any]) -> str:
    """Mensaje legible para un error individual de pydantic."""
    field = error_field(error)
    kind = error.get("type", "")
    ctx = dict(error.get("ctx") or {})

    # null en un campo de texto obligatorio equivale a no enviarlo.
    if kind == "string_type" and error.get("input") is None:
        kind = "missing"

    if kind.startswith("datetime"):
        template = _MENSAJE_FECHA
    else:
        template = _MENSAJES.get(kind)
    if template is None:
        return str(error.get("msg", "Valor no válido."))

    ctx.pop("field", None)
    return template.format(field=field, **ctx)


def field_errors(errors: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    """
    Agrupa los errores por campo, conservando el orden en que aparecen.

    Ejemplo:
        >>> field_errors([{"loc": ("body", "title"), "type": "missing"}])
        {'title': ['El campo title es obligatorio.']}
    """
    grouped: dict[str, list[str]] = {}
    for error in errors:
        message = message_for(error)
        messages = grouped.setdefault(error_field(error), [])
        if message not in messages:
            messages.append(message)
    return grouped


def summary(errors: Mapping[str, list[str]]) -> str:
    messages = [message for field_messages in errors.values() for message in field_messages]
    if not messages:
        return "Los datos proporcionados no son válidos."

    remaining = len(messages) - 1
    if remaining == 0:
        return messages[0]
    if remaining == 1:
        return f"{messages[0]} (y 1 error más)"
    return f"{messages[0]} (y {remaining} errores más)"
