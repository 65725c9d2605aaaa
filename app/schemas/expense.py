"""Expense schemas"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.expense import SplitType
from app.schemas.common import PaginationMeta
from app.schemas.participant import ParticipantResponse


class SplitInput(BaseModel):
    """Input schema for one split of an expense"""

    participant_id: str = Field(..., min_length=1)
    declared_value: Optional[float] = Field(
        default=None,
        description="Exact amount (EXACT) or percentage (PERCENT); ignored for EQUAL",
    )


class ExpenseCreate(BaseModel):
    """Schema for recording an expense"""

    label: str = Field(..., min_length=1, max_length=500)
    total_amount: float = Field(..., gt=0)
    payer_id: str = Field(..., min_length=1)
    split_type: SplitType
    splits: List[SplitInput] = Field(..., min_length=1)


class SplitResponse(BaseModel):
    """Response schema for a resolved split"""

    participant: ParticipantResponse
    declared_value: Optional[float] = None
    resolved_amount: float

    model_config = ConfigDict(from_attributes=True)


class ExpenseResponse(BaseModel):
    """Complete expense response schema"""

    id: int
    label: str
    total_amount: float
    split_type: SplitType
    payer: ParticipantResponse
    splits: List[SplitResponse]

    model_config = ConfigDict(from_attributes=True)


class ExpenseListResponse(BaseModel):
    """Response schema for expense list"""

    items: List[ExpenseResponse]
    pagination: PaginationMeta
