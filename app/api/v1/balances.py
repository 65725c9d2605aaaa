"""Balance endpoints"""

from fastapi import APIRouter, Depends

from app.api.deps import get_ledger_service
from app.schemas.balance import BalanceListResponse, BalanceSummary, ParticipantBalanceResponse
from app.services.ledger_service import LedgerService

router = APIRouter(prefix="/balances", tags=["Balances"])


@router.get("", response_model=BalanceListResponse)
def get_all_balances(service: LedgerService = Depends(get_ledger_service)):
    """
    Get every non-zero balance, one entry per pair of participants.

    A positive amount means the counterpart owes the participant, a negative
    amount means the participant owes the counterpart.
    """
    return BalanceListResponse(balances=service.query_all())


@router.get("/{participant_id}", response_model=ParticipantBalanceResponse)
def get_participant_balances(
    participant_id: str,
    service: LedgerService = Depends(get_ledger_service),
):
    """
    Get the non-zero balances of one participant.

    An empty list means the participant has no outstanding balance.

    Args:
        participant_id: Participant ID
        service: Ledger service

    Returns:
        Balances with each counterpart

    Raises:
        404: If the participant doesn't exist
    """
    balances = service.query_participant(participant_id)
    return ParticipantBalanceResponse(participant_id=participant_id, balances=balances)


@router.get("/{participant_id}/summary", response_model=BalanceSummary)
def get_balance_summary(
    participant_id: str,
    service: LedgerService = Depends(get_ledger_service),
):
    """
    Get balance summary for a participant.

    Provides an overview including:
    - Overall balance (positive = owed money, negative = owes money)
    - Total amount owed to the participant
    - Total amount the participant owes
    - Number of people involved in each direction
    """
    return service.get_balance_summary(participant_id)
