"""Pydantic schemas for request/response. Amounts are integer pence."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, model_validator


# ----- User -----
class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8)


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    id: str
    email: EmailStr
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


# ----- Group -----
class GroupCreate(BaseModel):
    name: str = Field(min_length=1)


class GroupAddMember(BaseModel):
    email: EmailStr


class MemberInfo(BaseModel):
    id: str
    email: EmailStr
    role: str
    joined_at: Optional[datetime] = None


class GroupResponse(BaseModel):
    id: str
    name: str
    owner_id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class GroupDetail(GroupResponse):
    members: list[MemberInfo] = []


class GroupPage(BaseModel):
    items: list[GroupResponse]
    page: int
    page_size: int
    total: int


# ----- Expense -----
class SplitItem(BaseModel):
    user_id: str = Field(min_length=1)
    amount: int = Field(ge=1)

    class Config:
        from_attributes = True


class ExpenseCreate(BaseModel):
    description: str = Field(min_length=1)
    amount: int = Field(ge=1)
    paid_by_user_id: str = Field(min_length=1)
    splits: Optional[list[SplitItem]] = None
    # Equal split among these members, in order, when `splits` is not given.
    participant_ids: Optional[list[str]] = None

    @model_validator(mode="after")
    def _one_split_source(self):
        if (self.splits is None) == (self.participant_ids is None):
            raise ValueError("Provide exactly one of splits or participant_ids")
        if self.splits is not None and not self.splits:
            raise ValueError("At least one split required")
        return self


class ExpenseResponse(BaseModel):
    id: str
    group_id: str
    description: str
    amount: int
    paid_by_user_id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ExpenseDetail(ExpenseResponse):
    splits: list[SplitItem] = []


class ExpensePage(BaseModel):
    items: list[ExpenseResponse]
    page: int
    page_size: int
    total: int


# ----- Balances / settlement -----
class BalanceItem(BaseModel):
    user_id: str
    balance: int


class BalancesResponse(BaseModel):
    group_id: str
    balances: list[BalanceItem]


class TransferItem(BaseModel):
    from_user_id: str
    to_user_id: str
    amount: int


class SettleResponse(BaseModel):
    group_id: str
    transfers: list[TransferItem]
