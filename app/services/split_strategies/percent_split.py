"""Percentage split strategy"""

from typing import List

from app.core.exceptions import InvalidSplitError
from app.models.expense import SplitType
from app.services.split_strategies.base import ParticipantSplit, declared_values
from app.utils.amount_utils import amounts_match, sum_amounts

FULL_PERCENT = 100.0


def calculate_percent_splits(
    total_amount: float, participant_data: List[dict], tolerance: float
) -> List[ParticipantSplit]:
    """
    Calculate percentage-based split for participants.

    Each share is at most total_amount, so it stays finite for any finite total.

    Args:
        total_amount: Total expense amount
        participant_data: List of dicts with participant_id and declared_value (percent)
        tolerance: Accepted absolute difference between the percentage sum and 100

    Returns:
        List of ParticipantSplit with calculated amounts

    Raises:
        InvalidSplitError: If a percentage is out of range or they don't sum to 100
    """
    percentages = declared_values(SplitType.PERCENT, participant_data)

    for percentage in percentages:
        if percentage > FULL_PERCENT:
            raise InvalidSplitError(
                f"Percentage must be between 0 and 100, got {percentage}",
                split_type=SplitType.PERCENT.value,
            )

    total_percentage = sum_amounts(percentages)
    if not amounts_match(total_percentage, FULL_PERCENT, tolerance):
        raise InvalidSplitError(
            f"Percentages must sum to 100%, got {total_percentage}%",
            split_type=SplitType.PERCENT.value,
            expected=FULL_PERCENT,
            actual=total_percentage,
        )

    return [
        ParticipantSplit(
            participant_id=participant["participant_id"],
            declared_value=percentage,
            amount_owed=total_amount * (percentage / FULL_PERCENT),
        )
        for participant, percentage in zip(participant_data, percentages)
    ]
