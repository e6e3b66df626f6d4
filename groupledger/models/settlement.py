from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Settlement:
    """`from_member` should pay `amount` to `to_member`."""

    from_member: str
    to_member: str
    amount: Decimal
