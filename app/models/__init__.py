"""Domain models"""
from app.models.participant import Participant
from app.models.expense import Expense, Split, SplitType

__all__ = ["Participant", "Expense", "Split", "SplitType"]
