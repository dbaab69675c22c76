"""Group membership checks shared by the routers."""
from typing import Iterable

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.models import Group, GroupMember


def ensure_member(db: Session, user_id: str, group_id: str) -> Group:
    group = db.query(Group).filter(Group.id == group_id).first()
    if not group:
        raise HTTPException(status_code=404, detail="Group not found")
    membership = (
        db.query(GroupMember)
        .filter(GroupMember.group_id == group_id, GroupMember.user_id == user_id)
        .first()
    )
    if not membership:
        raise HTTPException(status_code=403, detail="Not a group member")
    return group


def ensure_owner(db: Session, user_id: str, group_id: str, action: str) -> Group:
    group = db.query(Group).filter(Group.id == group_id).first()
    if not group:
        raise HTTPException(status_code=404, detail="Group not found")
    if group.owner_id != user_id:
        raise HTTPException(status_code=403, detail=f"Only owner can {action} members")
    return group


def member_ids(db: Session, group_id: str) -> list[str]:
    """Member user ids in join order."""
    rows = (
        db.query(GroupMember.user_id)
        .filter(GroupMember.group_id == group_id)
        .order_by(GroupMember.id)
        .all()
    )
    return [r.user_id for r in rows]


def ensure_users_in_group(db: Session, group_id: str, user_ids: Iterable[str]) -> None:
    wanted = set(user_ids)
    found = (
        db.query(GroupMember.user_id)
        .filter(GroupMember.group_id == group_id, GroupMember.user_id.in_(wanted))
        .count()
    )
    if found != len(wanted):
        raise HTTPException(status_code=400, detail="User not in group")
