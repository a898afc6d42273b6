import pytest

from todo_api.domain.entities.label import Label
from todo_api.domain.entities.todo import Todo
from todo_api.domain.errors import ValidationError


def test_new_todo_has_fresh_id_and_is_not_completed():
    todo = Todo.new("buy milk")

    assert todo.id
    assert todo.text == "buy milk"
    assert todo.completed is False
    assert todo.label_ids == set()
    assert Todo.new("buy milk").id != todo.id


@pytest.mark.parametrize("text", ["a", "a" * 100])
def test_todo_text_bounds_are_accepted(text):
    assert Todo.new(text).text == text


@pytest.mark.parametrize("text, reason", [("", "Can not be empty"), ("a" * 101, "Over text length")])
def test_todo_text_out_of_bounds_is_rejected(text, reason):
    with pytest.raises(ValidationError) as exc_info:
        Todo.new(text)

    assert exc_info.value.field == "text"
    assert exc_info.value.reason == reason


def test_set_text_validates():
    todo = Todo.new("buy milk")

    with pytest.raises(ValidationError):
        todo.set_text("")
    assert todo.text == "buy milk"


def test_todo_equality_is_by_id():
    todo = Todo.new("buy milk")
    same_id = Todo(id=todo.id, text="other text", completed=True)

    assert todo == same_id
    assert hash(todo) == hash(same_id)
    assert todo != Todo.new("buy milk")


def test_todo_id_cannot_change():
    todo = Todo.new("buy milk")

    with pytest.raises(AttributeError):
        todo.id = "another-id"


def test_label_name_is_limited_to_15_characters():
    assert Label.new("a" * 15).name == "a" * 15
    with pytest.raises(ValidationError) as exc_info:
        Label.new("a" * 16)
    assert exc_info.value.field == "name"

    with pytest.raises(ValidationError):
        Label.new("")


def test_label_equality_is_by_id():
    label = Label.new("home")
    renamed = Label(id=label.id, name="work")

    assert label == renamed
    assert label != Label.new("home")
