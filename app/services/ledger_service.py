"""Expense recording and balance reporting"""

import logging
import threading
from typing import List, Optional, Sequence, Tuple

from app.config import get_settings
from app.core.exceptions import AppException, NotFoundError, UnknownParticipantError
from app.models.expense import Expense, Split, SplitType
from app.models.participant import Participant
from app.repositories.expense_repository import ExpenseRepository
from app.repositories.participant_repository import ParticipantRepository
from app.schemas.balance import BalanceSummary, CounterpartBalance, PairwiseBalance
from app.schemas.expense import SplitInput
from app.services.balance_ledger import BalanceLedger
from app.services.split_strategies import calculate_splits

logger = logging.getLogger(__name__)


class LedgerService:
    """
    Owns the participant registry, the expense history and the balance ledger.

    Every public method runs under one lock, so recording an expense (history
    append plus ledger update) is atomic with respect to other callers.
    """

    def __init__(self, tolerance: Optional[float] = None):
        self.tolerance = tolerance if tolerance is not None else get_settings().split_tolerance
        self.participants = ParticipantRepository()
        self.expenses = ExpenseRepository()
        self.ledger = BalanceLedger(self.tolerance)
        self._lock = threading.RLock()

    def register_participant(self, participant_id: str, name: str) -> Participant:
        """
        Register a participant and give them a ledger row.

        Registering an ID that already exists returns the existing record
        unchanged.

        Args:
            participant_id: Unique participant ID
            name: Display name

        Returns:
            Registered participant
        """
        with self._lock:
            existing = self.participants.get_by_id(participant_id)
            if existing is not None:
                if existing.name != name:
                    logger.warning(
                        "Participant %s already registered as %r, ignoring name %r",
                        participant_id, existing.name, name,
                    )
                return existing

            participant = self.participants.create(Participant(id=participant_id, name=name))
            self.ledger.add_participant(participant.id)
            logger.info("Registered participant %s (%s)", participant.id, participant.name)
            return participant

    def get_participant(self, participant_id: str) -> Participant:
        """
        Get participant by ID.

        Raises:
            UnknownParticipantError: If participant not found
        """
        with self._lock:
            participant = self.participants.get_by_id(participant_id)
            if participant is None:
                raise UnknownParticipantError(participant_id)
            return participant

    def list_participants(
        self, page: int = 1, page_size: Optional[int] = None
    ) -> Tuple[List[Participant], int]:
        """
        Get participants in registration order.

        Args:
            page: Page number (1-indexed)
            page_size: Items per page (None = all)

        Returns:
            Tuple of (participants list, total count)
        """
        with self._lock:
            skip = (page - 1) * page_size if page_size else 0
            participants = self.participants.get_all(skip=skip, limit=page_size)
            return participants, self.participants.count()

    def record_expense(
        self,
        split_type: SplitType,
        total_amount: float,
        payer_id: str,
        splits: Sequence[SplitInput],
        label: str,
    ) -> Expense:
        """
        Validate an expense, add it to the history and apply it to the ledger.

        A rejected expense leaves the history and the ledger untouched.

        Args:
            split_type: How the total is divided (EQUAL, EXACT or PERCENT)
            total_amount: Total expense amount
            payer_id: ID of the participant who paid
            splits: One SplitInput per participant sharing the expense
            label: Description of the expense

        Returns:
            Recorded expense

        Raises:
            UnknownParticipantError: If payer or a split participant is not registered
            InvalidSplitError: If the splits are invalid for the split type
        """
        with self._lock:
            payer = self.get_participant(payer_id)
            split_participants = [self.get_participant(s.participant_id) for s in splits]

            participant_data = [s.model_dump() for s in splits]
            try:
                calculated_splits = calculate_splits(
                    split_type, total_amount, participant_data, self.tolerance
                )
            except AppException as e:
                logger.warning("Rejected expense %r: %s", label, e)
                raise

            split_type = SplitType(split_type)
            expense = Expense.model_validate(
                {
                    "id": self.expenses.next_id(),
                    "label": label,
                    "total_amount": total_amount,
                    "payer": payer,
                    "split_type": split_type,
                    "splits": tuple(
                        Split(
                            participant=participant,
                            split_type=split_type,
                            declared_value=calculated.declared_value,
                            resolved_amount=calculated.amount_owed,
                        )
                        for participant, calculated in zip(split_participants, calculated_splits)
                    ),
                },
                context={"tolerance": self.tolerance},
            )

            self.expenses.append(expense)
            self.ledger.apply_expense(expense)

            logger.info(
                "Recorded expense %d %r: %s %.2f paid by %s across %d splits",
                expense.id, expense.label, split_type.value, total_amount,
                payer.id, len(expense.splits),
            )
            return expense

    def get_expense(self, expense_id: int) -> Expense:
        """
        Get expense by ID.

        Raises:
            NotFoundError: If expense not found
        """
        with self._lock:
            expense = self.expenses.get_by_id(expense_id)
            if expense is None:
                raise NotFoundError(f"Expense with ID {expense_id} not found")
            return expense

    def list_expenses(
        self,
        page: int = 1,
        page_size: Optional[int] = None,
        participant_id: Optional[str] = None,
    ) -> Tuple[List[Expense], int]:
        """
        Get recorded expenses in recording order.

        Args:
            page: Page number (1-indexed)
            page_size: Items per page (None = all)
            participant_id: Only expenses involving this participant

        Returns:
            Tuple of (expenses list, total count)

        Raises:
            UnknownParticipantError: If participant_id is given but not registered
        """
        with self._lock:
            if participant_id is not None:
                self.get_participant(participant_id)

            skip = (page - 1) * page_size if page_size else 0
            expenses = self.expenses.get_all(
                skip=skip, limit=page_size, participant_id=participant_id
            )
            return expenses, self.expenses.count(participant_id)

    def query_participant(self, participant_id: str) -> List[CounterpartBalance]:
        """
        Get the non-zero balances of one participant.

        Raises:
            UnknownParticipantError: If participant not found
        """
        with self._lock:
            self.get_participant(participant_id)
            return self.ledger.query_participant(participant_id)

    def query_all(self) -> List[PairwiseBalance]:
        """Get every non-zero pairwise balance, each pair once"""
        with self._lock:
            return self.ledger.query_all()

    def get_balance_summary(self, participant_id: str) -> BalanceSummary:
        """
        Get balance summary for a participant.

        Args:
            participant_id: Participant ID

        Returns:
            BalanceSummary object

        Raises:
            UnknownParticipantError: If participant not found
        """
        balances = self.query_participant(participant_id)

        owed_to_you = [b.amount for b in balances if b.amount > 0]
        you_owe = [-b.amount for b in balances if b.amount < 0]
        total_owed_to_you = sum(owed_to_you)
        total_you_owe = sum(you_owe)

        return BalanceSummary(
            participant_id=participant_id,
            overall_balance=total_owed_to_you - total_you_owe,
            total_you_owe=total_you_owe,
            total_owed_to_you=total_owed_to_you,
            num_people_you_owe=len(you_owe),
            num_people_owe_you=len(owed_to_you),
        )

    def replay_ledger(self) -> BalanceLedger:
        """
        Rebuild a ledger from scratch out of the expense history.

        Returns:
            New BalanceLedger with every participant and expense replayed
        """
        with self._lock:
            ledger = BalanceLedger(self.tolerance)
            for participant in self.participants.get_all():
                ledger.add_participant(participant.id)
            for expense in self.expenses.get_all():
                ledger.apply_expense(expense)
            return ledger
