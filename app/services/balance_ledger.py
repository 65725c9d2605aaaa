"""Pairwise balance ledger"""

import logging
from typing import Dict, List, Optional, Tuple

from app.config import get_settings
from app.core.exceptions import UnknownParticipantError
from app.models.expense import Expense
from app.schemas.balance import CounterpartBalance, PairwiseBalance
from app.utils.amount_utils import is_zero, sum_amounts

logger = logging.getLogger(__name__)


class BalanceLedger:
    """
    Signed net amounts between every pair of participants.

    ``get_balance(a, b)`` is the amount ``b`` owes ``a``; a negative value
    means ``a`` owes ``b``. Participants get an index when they are added and
    only the cell with the lower index first is stored, so
    ``get_balance(a, b) == -get_balance(b, a)`` always holds and a single
    write updates both directions.
    """

    def __init__(self, tolerance: Optional[float] = None):
        self.tolerance = tolerance if tolerance is not None else get_settings().split_tolerance
        self._ids: List[str] = []
        self._index: Dict[str, int] = {}
        self._cells: Dict[Tuple[int, int], float] = {}

    def add_participant(self, participant_id: str) -> None:
        """
        Allocate a row for a participant.

        Adding an existing participant is a no-op.

        Args:
            participant_id: Participant ID
        """
        if participant_id in self._index:
            return
        self._index[participant_id] = len(self._ids)
        self._ids.append(participant_id)

    def _index_of(self, participant_id: str) -> int:
        index = self._index.get(participant_id)
        if index is None:
            raise UnknownParticipantError(participant_id)
        return index

    def _read(self, i: int, j: int) -> float:
        if i < j:
            return self._cells.get((i, j), 0.0)
        return -self._cells.get((j, i), 0.0)

    def apply_expense(self, expense: Expense) -> None:
        """
        Apply a validated expense to the ledger.

        For each split the participant's share is moved onto the payer's
        side: the participant now owes the payer that much more. The payer's
        own share touches nothing.

        Args:
            expense: Expense produced by a successful split calculation

        Raises:
            UnknownParticipantError: If the payer or a split participant has no row
        """
        payer_index = self._index_of(expense.payer.id)
        updates = []
        for split in expense.splits:
            participant_index = self._index_of(split.participant.id)
            if participant_index != payer_index:
                updates.append((participant_index, split.resolved_amount))

        # Indexes are resolved before any cell is written
        for participant_index, amount in updates:
            if payer_index < participant_index:
                key = (payer_index, participant_index)
                self._cells[key] = self._cells.get(key, 0.0) + amount
            else:
                key = (participant_index, payer_index)
                self._cells[key] = self._cells.get(key, 0.0) - amount

        logger.debug(
            "Applied expense %s: %d ledger cells updated", expense.id, len(updates)
        )

    def get_balance(self, participant_id: str, counterpart_id: str) -> float:
        """
        Get the signed balance between two participants.

        Args:
            participant_id: Participant whose side the balance is seen from
            counterpart_id: Other participant

        Returns:
            Amount counterpart owes participant (negative = participant owes counterpart)

        Raises:
            UnknownParticipantError: If either participant is unknown
            ValueError: If both IDs are the same
        """
        i = self._index_of(participant_id)
        j = self._index_of(counterpart_id)
        if i == j:
            raise ValueError("A participant has no balance with themselves")
        return self._read(i, j)

    def query_participant(self, participant_id: str) -> List[CounterpartBalance]:
        """
        Get every non-zero balance of one participant.

        An empty list means the participant has no outstanding balance.

        Args:
            participant_id: Participant ID

        Returns:
            CounterpartBalance per counterpart, in registration order

        Raises:
            UnknownParticipantError: If participant is unknown
        """
        i = self._index_of(participant_id)

        balances = []
        for j, counterpart_id in enumerate(self._ids):
            if j == i:
                continue
            amount = self._read(i, j)
            if not is_zero(amount, self.tolerance):
                balances.append(
                    CounterpartBalance(counterpart_id=counterpart_id, amount=amount)
                )

        return balances

    def query_all(self) -> List[PairwiseBalance]:
        """
        Get every non-zero balance, one entry per pair of participants.

        The earlier registered participant comes first in each entry.

        Returns:
            List of PairwiseBalance ordered by registration
        """
        balances = []
        for (i, j), amount in sorted(self._cells.items()):
            if not is_zero(amount, self.tolerance):
                balances.append(
                    PairwiseBalance(
                        participant_id=self._ids[i],
                        counterpart_id=self._ids[j],
                        amount=amount,
                    )
                )

        return balances

    def snapshot(self) -> Dict[Tuple[str, str], float]:
        """
        Get the raw stored cells keyed by participant ID pair.

        Returns:
            Mapping (earlier ID, later ID) -> signed amount
        """
        return {
            (self._ids[i], self._ids[j]): amount
            for (i, j), amount in sorted(self._cells.items())
        }

    def total(self) -> float:
        """Sum of every directed cell; zero by construction"""
        n = len(self._ids)
        return sum_amounts(self._read(i, j) for i in range(n) for j in range(n) if i != j)
