"""Todo DTOs"""
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel


class TodoCreateDTO(BaseModel):
    """DTO for creating a todo"""
    text: str
    label_ids: List[UUID] = []


class TodoUpdateDTO(BaseModel):
    """DTO for updating a todo; only fields sent by the client are applied"""
    text: Optional[str] = None
    completed: Optional[bool] = None
    label_ids: Optional[List[UUID]] = None


class TodoResponseDTO(BaseModel):
    """DTO for todo response"""
    id: str
    text: str
    completed: bool
    label_ids: List[str] = []

    model_config = {"from_attributes": True}
