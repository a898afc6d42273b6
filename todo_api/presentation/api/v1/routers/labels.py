"""Labels API router"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from todo_api.application.dto.label_dto import LabelCreateDTO, LabelResponseDTO, LabelUpdateDTO
from todo_api.application.use_cases.label_use_cases import LabelUseCases
from todo_api.domain.errors import DomainError
from todo_api.presentation.api.v1.dependencies import get_label_use_cases
from todo_api.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/labels", tags=["labels"], redirect_slashes=False)


@router.post("", response_model=LabelResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_label(
    label_data: LabelCreateDTO,
    use_cases: LabelUseCases = Depends(get_label_use_cases),
):
    """Create a new label

    Names are 1 to 15 characters and must not already be in use.
    """
    try:
        return await use_cases.create_label(label_data)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("", response_model=List[LabelResponseDTO])
async def get_all_labels(
    use_cases: LabelUseCases = Depends(get_label_use_cases),
):
    """Get all labels"""
    try:
        return await use_cases.get_all_labels()
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{label_id}", response_model=LabelResponseDTO)
async def get_label(
    label_id: UUID,
    use_cases: LabelUseCases = Depends(get_label_use_cases),
):
    try:
        return await use_cases.get_label(str(label_id))
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/{label_id}", response_model=LabelResponseDTO)
async def update_label(
    label_id: UUID,
    label_data: LabelUpdateDTO,
    use_cases: LabelUseCases = Depends(get_label_use_cases),
):
    try:
        return await use_cases.update_label(str(label_id), label_data)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{label_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_label(
    label_id: UUID,
    use_cases: LabelUseCases = Depends(get_label_use_cases),
):
    """Delete label and remove it from every todo"""
    try:
        await use_cases.delete_label(str(label_id))
    except DomainError as e:
        raise to_http_exception(e)
