"""Label use cases"""
import logging
from typing import List

from todo_api.application.dto.label_dto import LabelCreateDTO, LabelResponseDTO, LabelUpdateDTO
from todo_api.domain.entities.label import Label
from todo_api.domain.errors import RepositoryError, UnexpectedError, ValidationError
from todo_api.domain.repositories.label_repository import LabelRepository
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.domain.services.label_service import LabelService

logger = logging.getLogger(__name__)


class LabelUseCases:
    """Use cases for label operations"""

    def __init__(self, label_repository: LabelRepository, todo_repository: TodoRepository):
        self.label_repository = label_repository
        self.todo_repository = todo_repository
        self.label_service = LabelService(label_repository)

    async def create_label(self, label_data: LabelCreateDTO) -> LabelResponseDTO:
        """Create a new label with a name no other label uses"""
        label = Label.new(label_data.name)
        await self._check_not_duplicated(label)

        await self.label_repository.save(label)
        logger.info("Created label %s", label.id)
        return self._label_to_dto(label)

    async def get_label(self, label_id: str) -> LabelResponseDTO:
        label = await self.label_repository.find(label_id)
        return self._label_to_dto(label)

    async def get_all_labels(self) -> List[LabelResponseDTO]:
        labels = await self.label_repository.find_all()
        return [self._label_to_dto(label) for label in labels]

    async def update_label(self, label_id: str, label_data: LabelUpdateDTO) -> LabelResponseDTO:
        """Rename label"""
        label = await self.label_repository.find(label_id)
        if label_data.name is not None:
            label.set_name(label_data.name)
            await self._check_not_duplicated(label)

        await self.label_repository.save(label)
        logger.info("Updated label %s", label.id)
        return self._label_to_dto(label)

    async def delete_label(self, label_id: str) -> None:
        """Delete label and detach it from every todo carrying it"""
        label = await self.label_repository.find(label_id)
        try:
            await self.label_repository.delete(label)
        except RepositoryError as e:
            raise UnexpectedError(f"Failed to delete label {label_id}: {e}") from e

        # The database cascades association rows; the in-memory store does not
        for todo in await self.todo_repository.find_all():
            if todo.has_label(label_id):
                todo.set_label_ids(todo.label_ids - {label_id})
                await self.todo_repository.save(todo)
        logger.info("Deleted label %s", label_id)

    async def _check_not_duplicated(self, label: Label) -> None:
        if await self.label_service.is_duplicated(label):
            raise ValidationError("name", f"Label name '{label.name}' is already used")

    def _label_to_dto(self, label: Label) -> LabelResponseDTO:
        """Convert Label entity to LabelResponseDTO"""
        return LabelResponseDTO(id=label.id, name=label.name)
