"""Settlement endpoint"""

from fastapi import APIRouter, Depends

from app.api.deps import get_ledger_service
from app.schemas.balance import SettlementResponse
from app.services.ledger_service import LedgerService
from app.utils.formatting import format_settlement

router = APIRouter(prefix="/settlement", tags=["Balances"])


def _name_of(service: LedgerService):
    return lambda participant_id: service.get_participant(participant_id).name


@router.get("", response_model=SettlementResponse)
def get_settlement(service: LedgerService = Depends(get_ledger_service)):
    """
    Get the settlement summary as readable lines.

    Each line reads "<debtor> owes <creditor>: <amount>". When nobody owes
    anything the summary is the single line "No balances".
    """
    return SettlementResponse(lines=format_settlement(service.query_all(), _name_of(service)))
