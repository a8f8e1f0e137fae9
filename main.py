"""Arranque de la API de tareas y posts con uvicorn."""

import os

import uvicorn
from dotenv import load_dotenv

APP = "backend_fastapi.main:app"
SUPPORTED_ORMS = ("peewee", "sqlalchemy")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _settings() -> dict:
    """Opciones de uvicorn leídas del entorno (y del `.env`, si existe)."""
    load_dotenv()
    orm = os.getenv("ORM", "peewee").lower()
    if orm not in SUPPORTED_ORMS:
        raise SystemExit(
            f"ORM no soportado: {orm!r}. Valores posibles: {', '.join(SUPPORTED_ORMS)}"
        )
    return {
        "host": os.getenv("HOST", "127.0.0.1"),
        "port": int(os.getenv("PORT", "8000")),
        "reload": _as_bool(os.getenv("RELOAD", "true")),
        "log_level": os.getenv("LOG_LEVEL", "info").lower(),
        "orm": orm,
    }


def run() -> None:
    settings = _settings()
    orm = settings.pop("orm")
    prefix = os.getenv("API_PREFIX", "")

    print(
        f"API de tareas y posts en http://{settings['host']}:{settings['port']}{prefix} "
        f"(ORM: {orm}, recarga: {'sí' if settings['reload'] else 'no'})"
    )
    uvicorn.run(APP, **settings)


if __name__ == "__main__":
    run()
