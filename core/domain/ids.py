from core.domain.errors import EntityNotFoundError

# Rango de un INTEGER de 64 bits con signo (SQLite INTEGER, PostgreSQL BIGINT).
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def is_storable_id(value: int) -> bool:
    return MIN_ID <= value <= MAX_ID


def parse_entity_id(raw: str, entity: str) -> int:
    """
    Convierte el id recibido en la URL en un entero.

    Un id que no es un entero positivo, o que no cabe en la columna, no puede
    corresponder a ninguna fila: se trata como entidad inexistente.
    """
    if not (raw.isascii() and raw.isdigit()):
        raise EntityNotFoundError(entity, raw)
    value = int(raw)
    if not is_storable_id(value):
        raise EntityNotFoundError(entity, raw)
    return value
