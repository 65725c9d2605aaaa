"""Participant endpoints"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.deps import get_ledger_service
from app.schemas.common import PaginationMeta
from app.schemas.participant import (ParticipantCreate, ParticipantListResponse,
                                     ParticipantResponse)
from app.services.ledger_service import LedgerService

router = APIRouter(prefix="/participants", tags=["Participants"])


@router.post("", response_model=ParticipantResponse, status_code=status.HTTP_201_CREATED)
def register_participant(
    participant_data: ParticipantCreate,
    service: LedgerService = Depends(get_ledger_service),
):
    """
    Register a participant.

    Registering an ID that already exists returns the existing participant
    unchanged.

    Args:
        participant_data: Participant ID and display name
        service: Ledger service

    Returns:
        Registered participant
    """
    participant = service.register_participant(participant_data.id, participant_data.name)
    return ParticipantResponse.model_validate(participant)


@router.get("", response_model=ParticipantListResponse)
def list_participants(
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: Optional[int] = Query(None, ge=1, le=100, description="Items per page"),
    service: LedgerService = Depends(get_ledger_service),
):
    """
    Get participants in registration order.

    Args:
        page: Page number (1-indexed)
        page_size: Number of items per page (max 100, default all)
        service: Ledger service

    Returns:
        Paginated list of participants
    """
    participants, total_count = service.list_participants(page=page, page_size=page_size)

    pagination = PaginationMeta.from_counts(
        page=page, page_size=page_size or max(total_count, 1), total_items=total_count
    )

    return ParticipantListResponse(
        items=[ParticipantResponse.model_validate(p) for p in participants],
        pagination=pagination,
    )


@router.get("/{participant_id}", response_model=ParticipantResponse)
def get_participant(
    participant_id: str,
    service: LedgerService = Depends(get_ledger_service),
):
    """
    Get participant by ID.

    Raises:
        404: If the participant doesn't exist
    """
    return ParticipantResponse.model_validate(service.get_participant(participant_id))
