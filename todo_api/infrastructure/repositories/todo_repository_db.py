"""Database implementation of TodoRepository"""
import asyncio
import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Set

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from todo_api.domain.entities.todo import Todo
from todo_api.domain.errors import NotFoundError, UnexpectedError, ValidationError
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.infrastructure.database.models import TodoLabelModel, TodoModel
from todo_api.infrastructure.database.upsert import build_upsert

logger = logging.getLogger(__name__)


class TodoRepositoryDB(TodoRepository):
    """Database implementation of TodoRepository

    Each call runs in its own session on a worker thread; ``save`` writes the
    todo row and its label associations in one transaction.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def _row_to_entity(self, row, label_ids: Iterable[str]) -> Todo:
        """Convert a todos row to Todo entity"""
        try:
            return Todo(
                id=str(row.id),
                text=row.text,
                completed=row.completed,
                label_ids=set(label_ids),
            )
        except ValidationError as e:
            raise UnexpectedError(f"Invalid todo row {row.id}: {e}") from e

    def _label_ids_by_todo(self, db: Session) -> Dict[str, Set[str]]:
        label_ids = defaultdict(set)
        for todo_id, label_id in db.execute(
            select(TodoLabelModel.todo_id, TodoLabelModel.label_id)
        ):
            label_ids[str(todo_id)].add(str(label_id))
        return label_ids

    async def save(self, todo: Todo) -> None:
        """Upsert todo and replace its label associations"""
        await asyncio.to_thread(self._save, todo)

    async def find(self, todo_id: str) -> Todo:
        """Get todo by ID"""
        return await asyncio.to_thread(self._find, todo_id)

    async def find_all(self) -> List[Todo]:
        """Get all todos, ordered by ID descending"""
        return await asyncio.to_thread(self._find_all)

    async def delete(self, todo: Todo) -> None:
        """Delete todo; association rows go with it through ON DELETE CASCADE"""
        await asyncio.to_thread(self._delete, todo)

    def _save(self, todo: Todo) -> None:
        try:
            with self.session_factory() as db:
                dialect = db.get_bind().dialect.name
                db.execute(
                    build_upsert(
                        TodoModel.__table__,
                        {"id": todo.id, "text": todo.text, "completed": todo.completed},
                        ["id"],
                        dialect,
                    )
                )
                db.execute(delete(TodoLabelModel).where(TodoLabelModel.todo_id == todo.id))
                if todo.label_ids:
                    db.execute(
                        insert(TodoLabelModel),
                        [
                            {"todo_id": todo.id, "label_id": label_id}
                            for label_id in sorted(todo.label_ids)
                        ],
                    )
                db.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to save todo %s: %s", todo.id, e)
            raise UnexpectedError(str(e)) from e

    def _find(self, todo_id: str) -> Todo:
        try:
            with self.session_factory() as db:
                row = db.execute(
                    select(TodoModel.id, TodoModel.text, TodoModel.completed).where(
                        TodoModel.id == todo_id
                    )
                ).first()
                if row is None:
                    raise NotFoundError(todo_id)
                label_ids = db.execute(
                    select(TodoLabelModel.label_id).where(TodoLabelModel.todo_id == todo_id)
                ).scalars().all()
        except SQLAlchemyError as e:
            logger.error("Failed to find todo %s: %s", todo_id, e)
            raise UnexpectedError(str(e)) from e
        return self._row_to_entity(row, (str(label_id) for label_id in label_ids))

    def _find_all(self) -> List[Todo]:
        try:
            with self.session_factory() as db:
                rows = db.execute(
                    select(TodoModel.id, TodoModel.text, TodoModel.completed).order_by(
                        TodoModel.id.desc()
                    )
                ).all()
                label_ids = self._label_ids_by_todo(db)
        except SQLAlchemyError as e:
            logger.error("Failed to list todos: %s", e)
            raise UnexpectedError(str(e)) from e
        return [self._row_to_entity(row, label_ids.get(str(row.id), ())) for row in rows]

    def _delete(self, todo: Todo) -> None:
        try:
            with self.session_factory() as db:
                result = db.execute(delete(TodoModel).where(TodoModel.id == todo.id))
                if result.rowcount == 0:
                    raise NotFoundError(todo.id)
                db.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to delete todo %s: %s", todo.id, e)
            raise UnexpectedError(str(e)) from e
