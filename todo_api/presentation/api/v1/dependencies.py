"""API dependencies

Repositories are created once at startup and stored on ``app.state`` by
``create_app``; these dependencies hand them to the use cases per request.
"""
from fastapi import Depends, Request

from todo_api.application.use_cases.label_use_cases import LabelUseCases
from todo_api.application.use_cases.todo_use_cases import TodoUseCases
from todo_api.domain.repositories.label_repository import LabelRepository
from todo_api.domain.repositories.todo_repository import TodoRepository


def get_todo_repository(request: Request) -> TodoRepository:
    """Get the application's todo repository"""
    return request.app.state.todo_repository


def get_label_repository(request: Request) -> LabelRepository:
    """Get the application's label repository"""
    return request.app.state.label_repository


def get_todo_use_cases(
    todo_repository: TodoRepository = Depends(get_todo_repository),
    label_repository: LabelRepository = Depends(get_label_repository),
) -> TodoUseCases:
    """Get todo use cases instance"""
    return TodoUseCases(todo_repository, label_repository)


def get_label_use_cases(
    label_repository: LabelRepository = Depends(get_label_repository),
    todo_repository: TodoRepository = Depends(get_todo_repository),
) -> LabelUseCases:
    """Get label use cases instance"""
    return LabelUseCases(label_repository, todo_repository)
