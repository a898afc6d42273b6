"""Database implementation of LabelRepository"""
import asyncio
import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from todo_api.domain.entities.label import Label
from todo_api.domain.errors import NotFoundError, UnexpectedError, ValidationError
from todo_api.domain.repositories.label_repository import LabelRepository
from todo_api.infrastructure.database.models import LabelModel
from todo_api.infrastructure.database.upsert import build_upsert

logger = logging.getLogger(__name__)


class LabelRepositoryDB(LabelRepository):
    """Database implementation of LabelRepository

    Sessions run on a worker thread so a database round trip does not block
    the event loop.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def _row_to_entity(self, row) -> Label:
        """Convert a labels row to Label entity"""
        try:
            return Label(id=str(row.id), name=row.name)
        except ValidationError as e:
            raise UnexpectedError(f"Invalid label row {row.id}: {e}") from e

    async def save(self, label: Label) -> None:
        await asyncio.to_thread(self._save, label)

    async def find(self, label_id: str) -> Label:
        return await asyncio.to_thread(self._find, label_id)

    async def find_by_name(self, name: str) -> Optional[Label]:
        return await asyncio.to_thread(self._find_by_name, name)

    async def find_all(self) -> List[Label]:
        """Get all labels, ordered by ID descending"""
        return await asyncio.to_thread(self._find_all)

    async def delete(self, label: Label) -> None:
        await asyncio.to_thread(self._delete, label)

    def _save(self, label: Label) -> None:
        try:
            with self.session_factory() as db:
                db.execute(
                    build_upsert(
                        LabelModel.__table__,
                        {"id": label.id, "name": label.name},
                        ["id"],
                        db.get_bind().dialect.name,
                    )
                )
                db.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to save label %s: %s", label.id, e)
            raise UnexpectedError(str(e)) from e

    def _find(self, label_id: str) -> Label:
        try:
            with self.session_factory() as db:
                row = db.execute(
                    select(LabelModel.id, LabelModel.name).where(LabelModel.id == label_id)
                ).first()
        except SQLAlchemyError as e:
            logger.error("Failed to find label %s: %s", label_id, e)
            raise UnexpectedError(str(e)) from e
        if row is None:
            raise NotFoundError(label_id)
        return self._row_to_entity(row)

    def _find_by_name(self, name: str) -> Optional[Label]:
        try:
            with self.session_factory() as db:
                row = db.execute(
                    select(LabelModel.id, LabelModel.name).where(LabelModel.name == name)
                ).first()
        except SQLAlchemyError as e:
            logger.error("Failed to find label by name: %s", e)
            raise UnexpectedError(str(e)) from e
        return self._row_to_entity(row) if row is not None else None

    def _find_all(self) -> List[Label]:
        try:
            with self.session_factory() as db:
                rows = db.execute(
                    select(LabelModel.id, LabelModel.name).order_by(LabelModel.id.desc())
                ).all()
        except SQLAlchemyError as e:
            logger.error("Failed to list labels: %s", e)
            raise UnexpectedError(str(e)) from e
        return [self._row_to_entity(row) for row in rows]

    def _delete(self, label: Label) -> None:
        try:
            with self.session_factory() as db:
                result = db.execute(delete(LabelModel).where(LabelModel.id == label.id))
                if result.rowcount == 0:
                    raise NotFoundError(label.id)
                db.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to delete label %s: %s", label.id, e)
            raise UnexpectedError(str(e)) from e
