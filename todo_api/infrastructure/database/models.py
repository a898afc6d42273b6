"""SQLAlchemy database models"""
from sqlalchemy import Boolean, Column, ForeignKey, String, Text

from todo_api.infrastructure.database.base import Base


class TodoModel(Base):
    """Todo database model"""
    __tablename__ = "todos"

    id = Column(String(36), primary_key=True)
    text = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)


class LabelModel(Base):
    """Label database model"""
    __tablename__ = "labels"

    id = Column(String(36), primary_key=True)
    name = Column(Text, nullable=False)


class TodoLabelModel(Base):
    """Many-to-many relationship between todos and labels"""
    __tablename__ = "todo_labels"

    todo_id = Column(
        String(36),
        ForeignKey("todos.id", ondelete="CASCADE"),
        primary_key=True
    )
    label_id = Column(
        String(36),
        ForeignKey("labels.id", ondelete="CASCADE"),
        primary_key=True
    )
