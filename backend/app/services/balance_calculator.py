"""Net balance per group member from the group's expense history."""
import logging
from typing import Any, Iterable

logger = logging.getLogger(__name__)


def compute_balances(members: Iterable[str], expenses: Iterable[Any]) -> dict[str, int]:
    """
    members: member ids, in the order balances should be reported.
    expenses: objects with `paid_by_user_id` and `splits` (each with `user_id`, `amount`).
    Returns user_id -> balance (positive = is owed money, negative = owes money).

    Every member is present in the result, including those with a zero balance.
    Splits are trusted to sum to their expense total; that is checked when the
    expense is created, not here.
    """
    balances: dict[str, int] = {member_id: 0 for member_id in members}
    for e in expenses:
        for s in e.splits:
            balances[s.user_id] = balances.get(s.user_id, 0) - s.amount
            balances[e.paid_by_user_id] = balances.get(e.paid_by_user_id, 0) + s.amount
    logger.debug("Computed balances for %d members", len(balances))
    return balances


def balances_to_list(balances: dict[str, int]) -> list[dict]:
    return [{"user_id": uid, "balance": bal} for uid, bal in balances.items()]
