"""Todo use cases"""
import logging
from typing import Iterable, List, Optional

from todo_api.application.dto.todo_dto import TodoCreateDTO, TodoResponseDTO, TodoUpdateDTO
from todo_api.domain.entities.todo import Todo
from todo_api.domain.errors import NotFoundError, RepositoryError, UnexpectedError, ValidationError
from todo_api.domain.repositories.label_repository import LabelRepository
from todo_api.domain.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


class TodoUseCases:
    """Use cases for todo operations"""

    def __init__(self, todo_repository: TodoRepository, label_repository: LabelRepository):
        self.todo_repository = todo_repository
        self.label_repository = label_repository

    async def create_todo(self, todo_data: TodoCreateDTO) -> TodoResponseDTO:
        """Create a new todo"""
        todo = Todo.new(todo_data.text, [str(label_id) for label_id in todo_data.label_ids])
        await self._check_labels_exist(todo.label_ids)

        await self.todo_repository.save(todo)
        logger.info("Created todo %s", todo.id)
        return self._todo_to_dto(todo)

    async def get_todo(self, todo_id: str) -> TodoResponseDTO:
        """Get todo by ID"""
        todo = await self.todo_repository.find(todo_id)
        return self._todo_to_dto(todo)

    async def get_all_todos(self, label_id: Optional[str] = None) -> List[TodoResponseDTO]:
        """Get all todos, optionally only those carrying ``label_id``"""
        todos = await self.todo_repository.find_all()
        if label_id is not None:
            todos = [todo for todo in todos if todo.has_label(label_id)]
        return [self._todo_to_dto(todo) for todo in todos]

    async def update_todo(self, todo_id: str, todo_data: TodoUpdateDTO) -> TodoResponseDTO:
        """Update todo"""
        todo = await self.todo_repository.find(todo_id)

        # Update only provided fields
        if todo_data.text is not None:
            todo.set_text(todo_data.text)
        if todo_data.completed is not None:
            todo.set_completed(todo_data.completed)
        if todo_data.label_ids is not None:
            todo.set_label_ids([str(label_id) for label_id in todo_data.label_ids])
            await self._check_labels_exist(todo.label_ids)

        await self.todo_repository.save(todo)
        logger.info("Updated todo %s", todo.id)
        return self._todo_to_dto(todo)

    async def delete_todo(self, todo_id: str) -> None:
        """Delete todo

        Raises NotFoundError when the lookup fails. A failure of the delete
        itself, after the lookup succeeded, surfaces as UnexpectedError.
        """
        todo = await self.todo_repository.find(todo_id)
        try:
            await self.todo_repository.delete(todo)
        except RepositoryError as e:
            raise UnexpectedError(f"Failed to delete todo {todo_id}: {e}") from e
        logger.info("Deleted todo %s", todo_id)

    async def _check_labels_exist(self, label_ids: Iterable[str]) -> None:
        for label_id in sorted(label_ids):
            try:
                await self.label_repository.find(label_id)
            except NotFoundError:
                raise ValidationError("label_ids", f"Label '{label_id}' does not exist")

    def _todo_to_dto(self, todo: Todo) -> TodoResponseDTO:
        """Convert Todo entity to TodoResponseDTO"""
        return TodoResponseDTO(
            id=todo.id,
            text=todo.text,
            completed=todo.completed,
            label_ids=sorted(todo.label_ids),
        )
