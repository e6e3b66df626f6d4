from pydantic import BaseModel
from typing import Dict, List, Optional
from groupledger.schemas.balances import SettlementOut
from groupledger.schemas.expense import ExpenseOut

class GroupCreate(BaseModel):
    name: Optional[str] = None

class MemberCreate(BaseModel):
    name: Optional[str] = None

class MemberOut(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True

class GroupSnapshot(BaseModel):
    id: str
    name: str
    members: List[MemberOut]
    expenses: List[ExpenseOut]
    balances: Dict[str, float]
    settlements: List[SettlementOut]

class GroupCreatedOut(BaseModel):
    id: str
    group: GroupSnapshot

class GroupOut(BaseModel):
    group: GroupSnapshot

class MemberJoinedOut(BaseModel):
    member: MemberOut
    group: GroupSnapshot

class ExpenseCreatedOut(BaseModel):
    expense: ExpenseOut
    group: GroupSnapshot
