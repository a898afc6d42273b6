"""Todo domain entity"""
import uuid
from dataclasses import dataclass, field
from typing import Iterable, Optional, Set

from todo_api.domain.validators import validate_length

TODO_TEXT_MIN_LENGTH = 1
TODO_TEXT_MAX_LENGTH = 100


@dataclass(eq=False)
class Todo:
    """Todo domain entity

    Two todos are equal when they share the same ``id``; ``id`` cannot be
    reassigned once set.
    """
    id: str
    text: str
    completed: bool = False
    label_ids: Set[str] = field(default_factory=set)

    def __post_init__(self):
        validate_length("text", self.text, TODO_TEXT_MIN_LENGTH, TODO_TEXT_MAX_LENGTH)
        self.label_ids = set(self.label_ids)

    def __setattr__(self, name, value):
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Todo id cannot be changed")
        super().__setattr__(name, value)

    def __eq__(self, other):
        if not isinstance(other, Todo):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    @classmethod
    def new(cls, text: str, label_ids: Optional[Iterable[str]] = None) -> "Todo":
        """Create a todo with a fresh ID, not completed"""
        return cls(id=str(uuid.uuid4()), text=text, label_ids=set(label_ids or ()))

    def set_text(self, text: str) -> None:
        self.text = validate_length("text", text, TODO_TEXT_MIN_LENGTH, TODO_TEXT_MAX_LENGTH)

    def set_completed(self, completed: bool) -> None:
        self.completed = completed

    def set_label_ids(self, label_ids: Iterable[str]) -> None:
        self.label_ids = set(label_ids)

    def has_label(self, label_id: str) -> bool:
        return label_id in self.label_ids
