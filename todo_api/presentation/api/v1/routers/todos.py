"""Todos API router"""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from todo_api.application.dto.todo_dto import TodoCreateDTO, TodoResponseDTO, TodoUpdateDTO
from todo_api.application.use_cases.todo_use_cases import TodoUseCases
from todo_api.domain.errors import DomainError
from todo_api.presentation.api.v1.dependencies import get_todo_use_cases
from todo_api.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/todos", tags=["todos"], redirect_slashes=False)


@router.post("", response_model=TodoResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_todo(
    todo_data: TodoCreateDTO,
    use_cases: TodoUseCases = Depends(get_todo_use_cases),
):
    """Create a new todo

    ``text`` must be 1 to 100 characters; every entry of ``label_ids`` must
    name an existing label.
    """
    try:
        return await use_cases.create_todo(todo_data)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("", response_model=List[TodoResponseDTO])
async def get_all_todos(
    label_id: Optional[UUID] = None,
    use_cases: TodoUseCases = Depends(get_todo_use_cases),
):
    """Get all todos

    With ``label_id``, only the todos carrying that label are returned.
    """
    try:
        return await use_cases.get_all_todos(str(label_id) if label_id else None)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{todo_id}", response_model=TodoResponseDTO)
async def get_todo(
    todo_id: UUID,
    use_cases: TodoUseCases = Depends(get_todo_use_cases),
):
    """Get todo by ID"""
    try:
        return await use_cases.get_todo(str(todo_id))
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/{todo_id}", response_model=TodoResponseDTO)
async def update_todo(
    todo_id: UUID,
    todo_data: TodoUpdateDTO,
    use_cases: TodoUseCases = Depends(get_todo_use_cases),
):
    """Partial update of text, completed and label_ids"""
    try:
        return await use_cases.update_todo(str(todo_id), todo_data)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: UUID,
    use_cases: TodoUseCases = Depends(get_todo_use_cases),
):
    """Delete todo"""
    try:
        await use_cases.delete_todo(str(todo_id))
    except DomainError as e:
        raise to_http_exception(e)
