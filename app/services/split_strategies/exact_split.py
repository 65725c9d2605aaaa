"""Exact amount split strategy"""
from typing import List

from app.core.exceptions import InvalidSplitError
from app.models.expense import SplitType
from app.services.split_strategies.base import ParticipantSplit, declared_values
from app.utils.amount_utils import amounts_match, sum_amounts


def calculate_exact_splits(
    total_amount: float,
    participant_data: List[dict],
    tolerance: float
) -> List[ParticipantSplit]:
    """
    Use the declared amounts as each participant's share.

    Args:
        total_amount: Total expense amount
        participant_data: List of dicts with participant_id and declared_value
        tolerance: Accepted absolute difference between the sum and the total

    Returns:
        List of ParticipantSplit with the declared amounts

    Raises:
        InvalidSplitError: If amounts are missing, negative, or don't sum to total_amount
    """
    amounts = declared_values(SplitType.EXACT, participant_data)

    try:
        total_assigned = sum_amounts(amounts)
    except OverflowError:
        raise InvalidSplitError(
            f"Sum of exact amounts exceeds the float range, total amount is {total_amount}",
            split_type=SplitType.EXACT.value,
            expected=total_amount,
        )

    if not amounts_match(total_assigned, total_amount, tolerance):
        raise InvalidSplitError(
            f"Sum of exact amounts ({total_assigned}) must equal total amount ({total_amount})",
            split_type=SplitType.EXACT.value,
            expected=total_amount,
            actual=total_assigned,
        )

    return [
        ParticipantSplit(
            participant_id=participant["participant_id"],
            declared_value=amount,
            amount_owed=amount
        )
        for participant, amount in zip(participant_data, amounts)
    ]
