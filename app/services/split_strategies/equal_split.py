"""Equal split strategy"""

from typing import List

from app.services.split_strategies.base import ParticipantSplit


def calculate_equal_splits(
    total_amount: float, participant_data: List[dict]
) -> List[ParticipantSplit]:
    """
    Calculate equal split for all participants.

    Every participant owes total_amount / n. The remainder left by float
    division is not redistributed, so the shares add up to the total only
    within floating-point tolerance.

    Args:
        total_amount: Total expense amount
        participant_data: List of participant information (participant_id, etc.)

    Returns:
        List of ParticipantSplit with equal amounts
    """
    share = total_amount / len(participant_data)

    return [
        ParticipantSplit(participant_id=participant["participant_id"], amount_owed=share)
        for participant in participant_data
    ]
