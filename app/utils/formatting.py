"""Settlement summary formatting"""

from typing import Callable, List

from app.schemas.balance import CounterpartBalance, PairwiseBalance

NO_BALANCES = "No balances"


def format_balance_line(
    participant_name: str, counterpart_name: str, amount: float
) -> str:
    """
    Describe a signed balance as "<debtor> owes <creditor>: <amount>".

    Args:
        participant_name: Name of the participant the balance belongs to
        counterpart_name: Name of the counterpart
        amount: Amount counterpart owes participant (negative = the reverse)

    Returns:
        Line with the amount shown to two decimals
    """
    if amount < 0:
        return f"{participant_name} owes {counterpart_name}: {-amount:.2f}"
    return f"{counterpart_name} owes {participant_name}: {amount:.2f}"


def format_participant_balances(
    participant_id: str,
    balances: List[CounterpartBalance],
    name_of: Callable[[str], str],
) -> List[str]:
    """
    Format one participant's balances, or NO_BALANCES if there are none.

    Args:
        participant_id: Participant the balances belong to
        balances: Result of a per-participant balance query
        name_of: Resolves a participant ID to a display name
    """
    if not balances:
        return [NO_BALANCES]
    return [
        format_balance_line(name_of(participant_id), name_of(b.counterpart_id), b.amount)
        for b in balances
    ]


def format_settlement(
    balances: List[PairwiseBalance], name_of: Callable[[str], str]
) -> List[str]:
    """
    Format a settlement summary, one line per pair, or NO_BALANCES.

    Args:
        balances: Result of an all-pairs balance query
        name_of: Resolves a participant ID to a display name
    """
    if not balances:
        return [NO_BALANCES]
    return [
        format_balance_line(name_of(b.participant_id), name_of(b.counterpart_id), b.amount)
        for b in balances
    ]
