import pytest
from fastapi.testclient import TestClient

from todo_api.infrastructure.config.settings import Settings
from todo_api.infrastructure.database.base import create_db_engine, create_session_factory, init_db
from todo_api.infrastructure.repositories.label_repository_db import LabelRepositoryDB
from todo_api.infrastructure.repositories.label_repository_memory import LabelRepositoryMemory
from todo_api.infrastructure.repositories.todo_repository_db import TodoRepositoryDB
from todo_api.infrastructure.repositories.todo_repository_memory import TodoRepositoryMemory
from todo_api.main import create_app


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture(params=["memory", "database"])
def repositories(request):
    """(todo_repository, label_repository) for both storage variants"""
    if request.param == "memory":
        return TodoRepositoryMemory(), LabelRepositoryMemory()
    session_factory = request.getfixturevalue("session_factory")
    return TodoRepositoryDB(session_factory), LabelRepositoryDB(session_factory)


@pytest.fixture
def todo_repository(repositories):
    return repositories[0]


@pytest.fixture
def label_repository(repositories):
    return repositories[1]


@pytest.fixture
def client(repositories):
    todo_repository, label_repository = repositories
    app = create_app(todo_repository, label_repository, app_settings=Settings(_env_file=None))
    with TestClient(app) as client:
        yield client


class VanishingTodoRepository(TodoRepositoryMemory):
    """Loses the todo between lookup and delete, like a concurrent delete would"""

    async def delete(self, todo):
        await super().delete(todo)
        await super().delete(todo)


@pytest.fixture
def vanishing_todo_repository():
    return VanishingTodoRepository()
