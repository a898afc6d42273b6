"""Label repository interface"""
from abc import ABC, abstractmethod
from typing import List, Optional

from todo_api.domain.entities.label import Label


class LabelRepository(ABC):
    """Interface for label repository"""

    @abstractmethod
    async def save(self, label: Label) -> None:
        """Insert the label or replace the stored one with the same ID"""
        pass

    @abstractmethod
    async def find(self, label_id: str) -> Label:
        """Get label by ID, raising NotFoundError if absent"""
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Label]:
        """Get label by name"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Label]:
        """Get all labels"""
        pass

    @abstractmethod
    async def delete(self, label: Label) -> None:
        """Delete label, raising NotFoundError if absent"""
        pass
