from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Tuple


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Expense:
    id: str
    description: str
    amount: Decimal
    paid_by: str
    split_between: Tuple[str, ...]
    created_at: datetime = field(default_factory=_utcnow)
