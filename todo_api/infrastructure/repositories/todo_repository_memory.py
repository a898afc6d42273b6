"""In-memory implementation of TodoRepository"""
import copy
import logging
from typing import Dict, List

from todo_api.domain.entities.todo import Todo
from todo_api.domain.errors import NotFoundError
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.infrastructure.repositories.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class TodoRepositoryMemory(TodoRepository):
    """Todo repository implementation with in-memory storage

    Entities are copied on the way in and out; callers never hold a
    reference into the store.
    """

    def __init__(self):
        self._todos: Dict[str, Todo] = {}
        self._lock = ReadWriteLock()

    async def save(self, todo: Todo) -> None:
        """Insert or replace todo"""
        with self._lock.write():
            self._todos[todo.id] = copy.deepcopy(todo)
        logger.debug("Saved todo %s", todo.id)

    async def find(self, todo_id: str) -> Todo:
        """Get todo by ID"""
        with self._lock.read():
            todo = self._todos.get(todo_id)
            if todo is None:
                raise NotFoundError(todo_id)
            return copy.deepcopy(todo)

    async def find_all(self) -> List[Todo]:
        """Get all todos in insertion order"""
        with self._lock.read():
            return [copy.deepcopy(todo) for todo in self._todos.values()]

    async def delete(self, todo: Todo) -> None:
        """Delete todo"""
        with self._lock.write():
            if todo.id not in self._todos:
                raise NotFoundError(todo.id)
            del self._todos[todo.id]
        logger.debug("Deleted todo %s", todo.id)
