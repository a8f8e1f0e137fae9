from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TaskStatus(Enum):
    PENDIENTE = "pendiente"
    EN_PROGRESO = "en progreso"
    COMPLETADA = "completada"


@dataclass(frozen=True, slots=True)
class Task:
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDIENTE
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
