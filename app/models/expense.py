"""Expense and split models"""
import enum
import math
from typing import Optional, Tuple

from pydantic import (BaseModel, ConfigDict, Field, ValidationInfo, field_validator,
                      model_validator)

from app.config import get_settings
from app.models.participant import Participant


class SplitType(str, enum.Enum):
    """Enum for split types"""
    EQUAL = "EQUAL"
    EXACT = "EXACT"
    PERCENT = "PERCENT"


class Split(BaseModel):
    """
    One participant's resolved share of an expense.

    ``declared_value`` is the caller-supplied amount (EXACT) or percentage
    (PERCENT) and is None for EQUAL splits. ``resolved_amount`` is set once,
    when the split strategy builds the split.
    """

    participant: Participant
    split_type: SplitType
    declared_value: Optional[float] = None
    resolved_amount: float = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("resolved_amount")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Reject NaN and infinite amounts"""
        if not math.isfinite(v):
            raise ValueError("resolved_amount must be finite")
        return v


class Expense(BaseModel):
    """Accepted shared expense, immutable once recorded"""

    id: int
    label: str
    total_amount: float = Field(..., gt=0)
    payer: Participant
    split_type: SplitType
    splits: Tuple[Split, ...] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_splits(self, info: ValidationInfo) -> "Expense":
        """
        Every split must carry the expense's split type, and the resolved
        amounts must add up to total_amount.

        The sum is checked within the "tolerance" validation context value
        (the split tolerance from settings by default), absolute or relative
        to the total, whichever is looser. Percent shares differ from the
        total by at most that tolerance in relative terms.
        """
        for split in self.splits:
            if split.split_type != self.split_type:
                raise ValueError(
                    f"Split type {split.split_type.value} does not match "
                    f"expense split type {self.split_type.value}"
                )

        tolerance = (info.context or {}).get("tolerance")
        if tolerance is None:
            tolerance = get_settings().split_tolerance

        try:
            resolved_total = math.fsum(split.resolved_amount for split in self.splits)
        except OverflowError:
            raise ValueError("Resolved amounts exceed the float range")
        if not math.isclose(
            resolved_total, self.total_amount, rel_tol=tolerance, abs_tol=tolerance
        ):
            raise ValueError(
                f"Resolved amounts sum to {resolved_total}, "
                f"expected total amount {self.total_amount}"
            )
        return self

    def __repr__(self) -> str:
        return (
            f"<Expense(id={self.id}, label={self.label}, "
            f"total_amount={self.total_amount}, split_type={self.split_type.value})>"
        )
