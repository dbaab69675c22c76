"""Expenses: create, list, get. Splits are validated here before anything is stored."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.models import User, Expense, ExpenseSplit
from app.schemas import ExpenseCreate, ExpenseResponse, ExpenseDetail, ExpensePage, SplitItem
from app.auth import get_current_user
from app.group_access import ensure_member, ensure_users_in_group
from app.services.split_allocator import SplitError, allocate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/groups/{group_id}/expenses", tags=["expenses"])


def _resolve_splits(data: ExpenseCreate) -> list[SplitItem]:
    if data.splits is not None:
        if sum(s.amount for s in data.splits) != data.amount:
            raise HTTPException(status_code=400, detail="Splits must sum to amount")
        user_ids = [s.user_id for s in data.splits]
        if len(set(user_ids)) != len(user_ids):
            raise HTTPException(status_code=400, detail="Duplicate split user")
        return data.splits

    if len(set(data.participant_ids)) != len(data.participant_ids):
        raise HTTPException(status_code=400, detail="Duplicate split user")
    try:
        allocation = allocate(data.amount, data.participant_ids)
    except SplitError as e:
        raise HTTPException(status_code=400, detail=str(e))
    # Participants whose share rounds down to nothing are not recorded.
    return [SplitItem(user_id=s.member_id, amount=s.amount) for s in allocation if s.amount > 0]


@router.post("", response_model=ExpenseResponse)
def create_expense(
    group_id: str,
    data: ExpenseCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_member(db, current_user.id, group_id)
    splits = _resolve_splits(data)
    ensure_users_in_group(db, group_id, [data.paid_by_user_id] + [s.user_id for s in splits])

    expense = Expense(
        group_id=group_id,
        description=data.description,
        amount=data.amount,
        paid_by_user_id=data.paid_by_user_id,
    )
    expense.splits = [ExpenseSplit(user_id=s.user_id, amount=s.amount) for s in splits]
    db.add(expense)
    db.commit()
    db.refresh(expense)
    logger.info("Expense %s (%d) added to group %s", expense.id, expense.amount, group_id)
    return ExpenseResponse.model_validate(expense)


@router.get("", response_model=ExpensePage)
def list_expenses(
    group_id: str,
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_member(db, current_user.id, group_id)
    q = db.query(Expense).filter(Expense.group_id == group_id)
    total = q.count()
    expenses = (
        q.order_by(Expense.created_at.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return ExpensePage(
        items=[ExpenseResponse.model_validate(e) for e in expenses],
        page=page,
        page_size=page_size,
        total=total,
    )


@router.get("/{expense_id}", response_model=ExpenseDetail)
def get_expense(
    group_id: str,
    expense_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_member(db, current_user.id, group_id)
    expense = (
        db.query(Expense)
        .filter(Expense.id == expense_id, Expense.group_id == group_id)
        .first()
    )
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    return ExpenseDetail.model_validate(expense)
