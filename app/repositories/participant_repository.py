"""Participant registry"""
from typing import Dict, List, Optional

from app.models.participant import Participant


class ParticipantRepository:
    """In-memory registry of participants keyed by ID"""

    def __init__(self):
        self._participants: Dict[str, Participant] = {}

    def create(self, participant: Participant) -> Participant:
        """
        Add a participant to the registry.

        Args:
            participant: Participant to add

        Returns:
            Added participant
        """
        self._participants[participant.id] = participant
        return participant

    def get_by_id(self, participant_id: str) -> Optional[Participant]:
        """
        Get participant by ID.

        Args:
            participant_id: Participant ID

        Returns:
            Participant if found, None otherwise
        """
        return self._participants.get(participant_id)

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[Participant]:
        """
        Get participants in registration order.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return (None = all)

        Returns:
            List of participants
        """
        participants = list(self._participants.values())
        end = None if limit is None else skip + limit
        return participants[skip:end]

    def count(self) -> int:
        """Count registered participants"""
        return len(self._participants)
