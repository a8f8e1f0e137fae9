import os

from peewee import Model
from playhouse.db_url import connect

# Default to SQLite
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///test.db")

db = connect(DATABASE_URL)


def init_db(models: list[type[Model]]) -> None:
    """Abre la conexión (si hace falta) y crea las tablas que no existan."""
    db.connect(reuse_if_open=True)
    db.create_tables(models, safe=True)
