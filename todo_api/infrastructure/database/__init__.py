# Database
from todo_api.infrastructure.database.base import (
    Base,
    create_db_engine,
    create_engine_from_settings,
    create_session_factory,
    init_db,
)
from todo_api.infrastructure.database.models import TodoModel, LabelModel, TodoLabelModel

__all__ = [
    "Base",
    "create_db_engine",
    "create_engine_from_settings",
    "create_session_factory",
    "init_db",
    "TodoModel",
    "LabelModel",
    "TodoLabelModel",
]
