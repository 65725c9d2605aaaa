"""Expense endpoints"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.deps import get_ledger_service
from app.schemas.common import PaginationMeta
from app.schemas.expense import ExpenseCreate, ExpenseListResponse, ExpenseResponse
from app.services.ledger_service import LedgerService

router = APIRouter(prefix="/expenses", tags=["Expenses"])


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
def record_expense(
    expense_data: ExpenseCreate,
    service: LedgerService = Depends(get_ledger_service),
):
    """
    Record a new expense and apply it to the balances.

    Args:
        expense_data: Expense with split type, payer and splits
        service: Ledger service

    Returns:
        Recorded expense with resolved split amounts

    Raises:
        400: If the splits are invalid (sum mismatch, duplicates, missing values)
        404: If the payer or a split participant isn't registered
    """
    expense = service.record_expense(
        expense_data.split_type,
        expense_data.total_amount,
        expense_data.payer_id,
        expense_data.splits,
        expense_data.label,
    )
    return ExpenseResponse.model_validate(expense)


@router.get("", response_model=ExpenseListResponse)
def list_expenses(
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(20, ge=1, le=100, description="Items per page"),
    participant_id: Optional[str] = Query(
        None, description="Only expenses paid by or split with this participant"
    ),
    service: LedgerService = Depends(get_ledger_service),
):
    """
    Get recorded expenses in recording order.

    Args:
        page: Page number (1-indexed)
        page_size: Number of items per page (max 100)
        participant_id: Optional participant filter
        service: Ledger service

    Returns:
        Paginated list of expenses
    """
    expenses, total_count = service.list_expenses(
        page=page, page_size=page_size, participant_id=participant_id
    )

    return ExpenseListResponse(
        items=[ExpenseResponse.model_validate(e) for e in expenses],
        pagination=PaginationMeta.from_counts(page, page_size, total_count),
    )


@router.get("/{expense_id}", response_model=ExpenseResponse)
def get_expense(
    expense_id: int,
    service: LedgerService = Depends(get_ledger_service),
):
    """
    Get a recorded expense.

    Raises:
        404: If no expense has this ID
    """
    return ExpenseResponse.model_validate(service.get_expense(expense_id))
