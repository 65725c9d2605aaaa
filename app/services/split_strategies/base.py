"""Shared split calculation types and checks"""

import math
from typing import List, Optional

from pydantic import BaseModel

from app.core.exceptions import InvalidSplitError
from app.models.expense import SplitType


class ParticipantSplit(BaseModel):
    """Result of split calculation for a participant"""

    participant_id: str
    declared_value: Optional[float] = None
    amount_owed: float


def declared_values(split_type: SplitType, participant_data: List[dict]) -> List[float]:
    """
    Collect the declared value of every participant.

    Args:
        split_type: Split type being calculated (used in error messages)
        participant_data: List of dicts with participant_id and declared_value

    Returns:
        Declared values in participant order

    Raises:
        InvalidSplitError: If a value is missing, not finite or negative
    """
    values = []
    for participant in participant_data:
        value = participant.get("declared_value")
        if value is None:
            raise InvalidSplitError(
                f"{split_type.value} split for participant "
                f"{participant['participant_id']} is missing a declared value",
                split_type=split_type.value,
            )

        value = float(value)
        if not math.isfinite(value) or value < 0:
            raise InvalidSplitError(
                f"Declared value must be a non-negative number, got {value}",
                split_type=split_type.value,
            )
        values.append(value)

    return values
