"""Todo repository interface"""
from abc import ABC, abstractmethod
from typing import List

from todo_api.domain.entities.todo import Todo


class TodoRepository(ABC):
    """Interface for todo repository"""

    @abstractmethod
    async def save(self, todo: Todo) -> None:
        """Insert the todo or replace the stored one with the same ID"""
        pass

    @abstractmethod
    async def find(self, todo_id: str) -> Todo:
        """Get todo by ID

        Raises:
            NotFoundError: If no todo has this ID
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Todo]:
        """Get all todos"""
        pass

    @abstractmethod
    async def delete(self, todo: Todo) -> None:
        """Delete todo

        Raises:
            NotFoundError: If the todo is not stored
        """
        pass
