from datetime import datetime, timezone

from peewee import (
    AutoField,
    BooleanField,
    CharField,
    DateTimeField,
    Model,
    TextField,
)
from infrastructure.peewee.session.db import db


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseModel(Model):
    id = AutoField()
    created_at = DateTimeField(default=utcnow)
    updated_at = DateTimeField(default=utcnow)

    class Meta:
        database = db


class TaskModel(BaseModel):
    title = CharField(max_length=255)
    description = TextField(null=True)
    status = CharField(max_length=20, default="pendiente")

    class Meta:
        table_name = "tasks"


class PostModel(BaseModel):
    title = CharField(max_length=255)
    content = TextField()
    excerpt = TextField(null=True)
    status = CharField(max_length=20, default="draft")
    featured = BooleanField(default=False)
    published_at = DateTimeField(null=True)

    class Meta:
        table_name = "posts"
