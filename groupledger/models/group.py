from dataclasses import dataclass, field
from typing import List, Optional

from groupledger.models.expense import Expense
from groupledger.models.member import Member


@dataclass
class Group:
    id: str
    name: str
    members: List[Member] = field(default_factory=list)
    expenses: List[Expense] = field(default_factory=list)

    def find_member(self, member_id: str) -> Optional[Member]:
        return next((m for m in self.members if m.id == member_id), None)

    def find_member_by_name(self, name: str) -> Optional[Member]:
        wanted = name.casefold()
        return next((m for m in self.members if m.name.casefold() == wanted), None)
