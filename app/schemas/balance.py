"""Balance schemas"""
from typing import List

from pydantic import BaseModel


class CounterpartBalance(BaseModel):
    """
    Balance of one participant with one counterpart.

    Positive amount: the counterpart owes the participant.
    Negative amount: the participant owes the counterpart.
    """
    counterpart_id: str
    amount: float


class PairwiseBalance(BaseModel):
    """Balance between two participants, reported once per pair"""
    participant_id: str
    counterpart_id: str
    amount: float  # > 0: counterpart owes participant, < 0: participant owes counterpart


class ParticipantBalanceResponse(BaseModel):
    """Response schema for one participant's balances"""
    participant_id: str
    balances: List[CounterpartBalance]


class BalanceListResponse(BaseModel):
    """Response schema for all pairwise balances"""
    balances: List[PairwiseBalance]


class BalanceSummary(BaseModel):
    """Summary of a participant's overall balance situation"""
    participant_id: str
    overall_balance: float
    total_you_owe: float
    total_owed_to_you: float
    num_people_you_owe: int
    num_people_owe_you: int


class SettlementResponse(BaseModel):
    """Printable settlement summary"""
    lines: List[str]
