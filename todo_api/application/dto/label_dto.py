"""Label DTOs"""
from typing import Optional
from pydantic import BaseModel


class LabelCreateDTO(BaseModel):
    """DTO for creating a label"""
    name: str


class LabelUpdateDTO(BaseModel):
    """DTO for updating a label"""
    name: Optional[str] = None


class LabelResponseDTO(BaseModel):
    """DTO for label response"""
    id: str
    name: str

    model_config = {"from_attributes": True}
