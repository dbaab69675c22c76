"""Turn net balances into a list of transfers that settles everyone (who owes whom)."""
from typing import NamedTuple


class Transfer(NamedTuple):
    from_user_id: str
    to_user_id: str
    amount: int

    def as_dict(self) -> dict:
        return self._asdict()


def plan_settlement(balances: dict[str, int]) -> list[Transfer]:
    """
    balances: user_id -> net balance (positive = is owed money, negative = owes money).
    Balances must sum to zero.

    Debtors and creditors are paired greedily in the order they appear in
    `balances`; they are not sorted by size, so the number of transfers is not
    necessarily minimal, but it is never more than debtors + creditors - 1.
    """
    debtors = [[uid, bal] for uid, bal in balances.items() if bal < 0]
    creditors = [[uid, bal] for uid, bal in balances.items() if bal > 0]

    out: list[Transfer] = []
    i, j = 0, 0
    while i < len(debtors) and j < len(creditors):
        debtor = debtors[i]
        creditor = creditors[j]
        amount = min(creditor[1], -debtor[1])
        if amount > 0:
            out.append(Transfer(from_user_id=debtor[0], to_user_id=creditor[0], amount=amount))
            debtor[1] += amount
            creditor[1] -= amount
        if debtor[1] == 0:
            i += 1
        if creditor[1] == 0:
            j += 1
    return out
