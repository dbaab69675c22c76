"""Balances and settle-up plan for a group (who owes whom)."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, selectinload

from app.database import get_db
from app.models import User, Expense
from app.schemas import BalancesResponse, SettleResponse, BalanceItem, TransferItem
from app.auth import get_current_user
from app.group_access import ensure_member, member_ids
from app.services.balance_calculator import compute_balances, balances_to_list
from app.services.settlement_calculator import plan_settlement

router = APIRouter(prefix="/groups/{group_id}", tags=["balances"])


def _group_balances(db: Session, group_id: str) -> dict[str, int]:
    expenses = (
        db.query(Expense)
        .options(selectinload(Expense.splits))
        .filter(Expense.group_id == group_id)
        .all()
    )
    return compute_balances(member_ids(db, group_id), expenses)


@router.get("/balances", response_model=BalancesResponse)
def get_balances(
    group_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_member(db, current_user.id, group_id)
    balances = _group_balances(db, group_id)
    return BalancesResponse(
        group_id=group_id,
        balances=[BalanceItem(**b) for b in balances_to_list(balances)],
    )


@router.get("/settle", response_model=SettleResponse)
def get_settle(
    group_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_member(db, current_user.id, group_id)
    transfers = plan_settlement(_group_balances(db, group_id))
    return SettleResponse(
        group_id=group_id,
        transfers=[TransferItem(**t.as_dict()) for t in transfers],
    )
