class EntityNotFoundError(ValueError):
    """La entidad solicitada no existe en el repositorio."""

    def __init__(self, entity: str, entity_id: int | str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"No existe {entity} con id {entity_id}")
