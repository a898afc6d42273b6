"""Label domain entity"""
import uuid
from dataclasses import dataclass

from todo_api.domain.validators import validate_length

LABEL_NAME_MIN_LENGTH = 1
LABEL_NAME_MAX_LENGTH = 15


@dataclass(eq=False)
class Label:
    """Label domain entity, equal by ``id``"""
    id: str
    name: str

    def __post_init__(self):
        validate_length("name", self.name, LABEL_NAME_MIN_LENGTH, LABEL_NAME_MAX_LENGTH)

    def __setattr__(self, name, value):
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Label id cannot be changed")
        super().__setattr__(name, value)

    def __eq__(self, other):
        if not isinstance(other, Label):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    @classmethod
    def new(cls, name: str) -> "Label":
        """Create a label with a fresh ID"""
        return cls(id=str(uuid.uuid4()), name=name)

    def set_name(self, name: str) -> None:
        self.name = validate_length("name", name, LABEL_NAME_MIN_LENGTH, LABEL_NAME_MAX_LENGTH)
