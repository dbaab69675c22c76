"""Groups: create, list, get, add/remove members."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.models import User, Group, GroupMember
from app.schemas import GroupCreate, GroupResponse, GroupDetail, GroupPage, GroupAddMember, MemberInfo
from app.auth import get_current_user
from app.group_access import ensure_owner

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/groups", tags=["groups"])


def _member_info(membership: GroupMember) -> MemberInfo:
    return MemberInfo(
        id=membership.user.id,
        email=membership.user.email,
        role=membership.role,
        joined_at=membership.created_at,
    )


@router.post("", response_model=GroupResponse)
def create_group(
    data: GroupCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    group = Group(name=data.name, owner_id=current_user.id)
    group.members = [GroupMember(user_id=current_user.id, role="owner")]
    db.add(group)
    db.commit()
    db.refresh(group)
    logger.info("Group %s created by %s", group.id, current_user.id)
    return GroupResponse.model_validate(group)


@router.get("", response_model=GroupPage)
def list_groups(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    q = db.query(Group).filter(Group.members.any(GroupMember.user_id == current_user.id))
    total = q.count()
    groups = (
        q.order_by(Group.created_at.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return GroupPage(
        items=[GroupResponse.model_validate(g) for g in groups],
        page=page,
        page_size=page_size,
        total=total,
    )


@router.get("/{group_id}", response_model=GroupDetail)
def get_group(
    group_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    group = db.query(Group).filter(Group.id == group_id).first()
    # Non-members get the same 404 as a missing group.
    if not group or not any(m.user_id == current_user.id for m in group.members):
        raise HTTPException(status_code=404, detail="Group not found")
    return GroupDetail(
        id=group.id,
        name=group.name,
        owner_id=group.owner_id,
        created_at=group.created_at,
        members=[_member_info(m) for m in group.members],
    )


@router.post("/{group_id}/members", response_model=MemberInfo)
def add_group_member(
    group_id: str,
    data: GroupAddMember,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    group = ensure_owner(db, current_user.id, group_id, "add")
    user = db.query(User).filter(User.email == data.email).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    if any(m.user_id == user.id for m in group.members):
        raise HTTPException(status_code=409, detail="User already a member")
    membership = GroupMember(group_id=group.id, user_id=user.id, role="member")
    db.add(membership)
    db.commit()
    db.refresh(membership)
    logger.info("User %s added to group %s", user.id, group.id)
    return _member_info(membership)


@router.delete("/{group_id}/members/{user_id}")
def remove_group_member(
    group_id: str,
    user_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    group = ensure_owner(db, current_user.id, group_id, "remove")
    membership = next((m for m in group.members if m.user_id == user_id), None)
    if not membership:
        raise HTTPException(status_code=404, detail="Member not found")
    db.delete(membership)
    db.commit()
    logger.info("User %s removed from group %s", user_id, group.id)
    return {"ok": True}
