"""In-memory implementation of LabelRepository"""
import copy
import logging
from typing import Dict, List, Optional

from todo_api.domain.entities.label import Label
from todo_api.domain.errors import NotFoundError
from todo_api.domain.repositories.label_repository import LabelRepository
from todo_api.infrastructure.repositories.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class LabelRepositoryMemory(LabelRepository):
    """Label repository implementation with in-memory storage"""

    def __init__(self):
        self._labels: Dict[str, Label] = {}
        self._lock = ReadWriteLock()

    async def save(self, label: Label) -> None:
        with self._lock.write():
            self._labels[label.id] = copy.copy(label)
        logger.debug("Saved label %s", label.id)

    async def find(self, label_id: str) -> Label:
        with self._lock.read():
            label = self._labels.get(label_id)
            if label is None:
                raise NotFoundError(label_id)
            return copy.copy(label)

    async def find_by_name(self, name: str) -> Optional[Label]:
        with self._lock.read():
            for label in self._labels.values():
                if label.name == name:
                    return copy.copy(label)
        return None

    async def find_all(self) -> List[Label]:
        with self._lock.read():
            return [copy.copy(label) for label in self._labels.values()]

    async def delete(self, label: Label) -> None:
        with self._lock.write():
            if label.id not in self._labels:
                raise NotFoundError(label.id)
            del self._labels[label.id]
        logger.debug("Deleted label %s", label.id)
