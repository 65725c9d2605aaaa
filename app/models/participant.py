"""Participant model"""

from pydantic import BaseModel, ConfigDict, Field


class Participant(BaseModel):
    """Identity record for someone who shares expenses"""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return f"<Participant(id={self.id}, name={self.name})>"
