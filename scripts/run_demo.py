"""Demo: record the sample trip expenses and print settlement summaries"""
import sys
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.append(str(Path(__file__).parent.parent))

from app.core.exceptions import AppException
from app.core.logging import configure_logging
from app.models.expense import SplitType
from app.schemas.expense import SplitInput
from app.services.ledger_service import LedgerService
from app.utils.formatting import format_participant_balances, format_settlement

PARTICIPANTS = [
    ("1", "Alice"),
    ("2", "Bob"),
    ("3", "Charlie"),
]

EXPENSES = [
    {
        "label": "Dinner",
        "split_type": SplitType.EQUAL,
        "total_amount": 90,
        "payer_id": "1",
        "splits": [("1", None), ("2", None), ("3", None)],
    },
    {
        "label": "Cruise",
        "split_type": SplitType.EXACT,
        "total_amount": 150,
        "payer_id": "2",
        "splits": [("1", 50), ("2", 50), ("3", 50)],
    },
    {
        "label": "Breakfast",
        "split_type": SplitType.PERCENT,
        "total_amount": 50,
        "payer_id": "1",
        "splits": [("1", 50), ("2", 50)],
    },
    {
        "label": "Lunch",
        "split_type": SplitType.EQUAL,
        "total_amount": 120,
        "payer_id": "1",
        "splits": [("1", None), ("2", None)],
    },
]


def _name_resolver(service: LedgerService):
    return lambda participant_id: service.get_participant(participant_id).name


def print_settlement(service: LedgerService, title: str) -> None:
    """Print every outstanding balance under a title"""
    print(f"\n{title}")
    for line in format_settlement(service.query_all(), _name_resolver(service)):
        print(f"  {line}")


def print_participant_balances(service: LedgerService) -> None:
    """Print each participant's own balances"""
    participants, _ = service.list_participants()
    for participant in participants:
        balances = service.query_participant(participant.id)
        print(f"\n{participant.name}:")
        for line in format_participant_balances(
            participant.id, balances, _name_resolver(service)
        ):
            print(f"  {line}")


def run_demo(service: LedgerService) -> None:
    """Register the sample participants and record the sample expenses"""
    for participant_id, name in PARTICIPANTS:
        service.register_participant(participant_id, name)

    for expense_data in EXPENSES:
        splits = [
            SplitInput(participant_id=participant_id, declared_value=value)
            for participant_id, value in expense_data["splits"]
        ]
        try:
            expense = service.record_expense(
                expense_data["split_type"],
                expense_data["total_amount"],
                expense_data["payer_id"],
                splits,
                expense_data["label"],
            )
        except AppException as e:
            print(f"\n❌ {expense_data['label']} rejected: {e.message}")
            continue

        print_settlement(service, f"Summary of Bill Settlement for {expense.label}:")

    print_settlement(service, "📊 Overall Summary of Bill Settlement:")
    print_participant_balances(service)


def main():
    """Main function to run the demo"""
    configure_logging("WARNING")
    run_demo(LedgerService())


if __name__ == "__main__":
    main()
