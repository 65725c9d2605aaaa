"""Expense history"""
from typing import List, Optional

from app.models.expense import Expense


class ExpenseRepository:
    """Append-only in-memory history of recorded expenses"""

    def __init__(self):
        self._expenses: List[Expense] = []

    def next_id(self) -> int:
        """ID the next appended expense will get (1-based position)"""
        return len(self._expenses) + 1

    def append(self, expense: Expense) -> Expense:
        """
        Append an expense to the history.

        Args:
            expense: Expense to append; its ID must be next_id()

        Returns:
            Appended expense

        Raises:
            ValueError: If the expense ID is out of sequence
        """
        if expense.id != self.next_id():
            raise ValueError(
                f"Expense ID {expense.id} out of sequence, expected {self.next_id()}"
            )
        self._expenses.append(expense)
        return expense

    def get_by_id(self, expense_id: int) -> Optional[Expense]:
        """
        Get expense by ID.

        Args:
            expense_id: Expense ID

        Returns:
            Expense if found, None otherwise
        """
        if 1 <= expense_id <= len(self._expenses):
            return self._expenses[expense_id - 1]
        return None

    def get_all(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
        participant_id: Optional[str] = None
    ) -> List[Expense]:
        """
        Get expenses in the order they were recorded.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return (None = all)
            participant_id: Only expenses paid by or split with this participant

        Returns:
            List of expenses
        """
        expenses = self._filter(participant_id)
        end = None if limit is None else skip + limit
        return expenses[skip:end]

    def count(self, participant_id: Optional[str] = None) -> int:
        """Count expenses, optionally only those involving a participant"""
        return len(self._filter(participant_id))

    def _filter(self, participant_id: Optional[str]) -> List[Expense]:
        if participant_id is None:
            return list(self._expenses)
        return [
            expense for expense in self._expenses
            if expense.payer.id == participant_id
            or any(split.participant.id == participant_id for split in expense.splits)
        ]
