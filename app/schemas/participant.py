"""Participant schemas"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import PaginationMeta


class ParticipantCreate(BaseModel):
    """Schema for registering a participant"""

    id: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)


class ParticipantResponse(BaseModel):
    """Schema for participant response"""

    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class ParticipantListResponse(BaseModel):
    """Response schema for participant list"""

    items: List[ParticipantResponse]
    pagination: PaginationMeta
