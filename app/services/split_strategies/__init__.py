"""Split calculation strategies"""

import math
from typing import List, Optional

from app.config import get_settings
from app.core.exceptions import InvalidSplitError, ValidationError
from app.models.expense import SplitType
from app.services.split_strategies.base import ParticipantSplit
from app.services.split_strategies.equal_split import calculate_equal_splits
from app.services.split_strategies.exact_split import calculate_exact_splits
from app.services.split_strategies.percent_split import calculate_percent_splits


def _validate_request(
    split_type: SplitType, total_amount: float, participant_data: List[dict]
) -> None:
    """Reject input that no split type can resolve"""
    if not math.isfinite(total_amount) or total_amount <= 0:
        raise InvalidSplitError(
            f"Total amount must be a positive number, got {total_amount}",
            split_type=split_type.value,
        )

    if not participant_data:
        raise InvalidSplitError(
            "At least one split is required",
            split_type=split_type.value,
        )

    seen = set()
    for participant in participant_data:
        participant_id = participant["participant_id"]
        if participant_id in seen:
            raise InvalidSplitError(
                f"Participant {participant_id} appears in more than one split",
                split_type=split_type.value,
            )
        seen.add(participant_id)


def calculate_splits(
    split_type: SplitType,
    total_amount: float,
    participant_data: List[dict],
    tolerance: Optional[float] = None,
) -> List[ParticipantSplit]:
    """
    Resolve the owed amount of every participant for one split type.

    Either every participant gets an amount or an error is raised; nothing is
    computed partially.

    Args:
        split_type: Type of split (EQUAL, EXACT or PERCENT)
        total_amount: Total expense amount
        participant_data: List of dicts with participant_id and declared_value
        tolerance: Absolute tolerance for sum checks (default from settings)

    Returns:
        ParticipantSplit per participant, in input order

    Raises:
        InvalidSplitError: If the splits are invalid for the split type
        ValidationError: If split_type is not recognized
    """
    if tolerance is None:
        tolerance = get_settings().split_tolerance

    try:
        split_type = SplitType(split_type)
    except ValueError:
        raise ValidationError(f"Unknown split type: {split_type}")

    _validate_request(split_type, total_amount, participant_data)

    if split_type is SplitType.EQUAL:
        return calculate_equal_splits(total_amount, participant_data)
    elif split_type is SplitType.EXACT:
        return calculate_exact_splits(total_amount, participant_data, tolerance)
    elif split_type is SplitType.PERCENT:
        return calculate_percent_splits(total_amount, participant_data, tolerance)

    raise ValidationError(f"Unknown split type: {split_type}")


__all__ = [
    "ParticipantSplit",
    "calculate_splits",
    "calculate_equal_splits",
    "calculate_exact_splits",
    "calculate_percent_splits",
]
