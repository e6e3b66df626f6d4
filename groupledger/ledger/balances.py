from decimal import Decimal
from typing import Dict, Iterable, Sequence

from groupledger.core.errors import LedgerIntegrityError
from groupledger.core.utils import ZERO
from groupledger.models.expense import Expense
from groupledger.models.member import Member


def compute_balances(
    members: Sequence[Member],
    expenses: Iterable[Expense],
) -> Dict[str, Decimal]:
    """
    Returns:
        {
            member_id: net_balance (Decimal, unrounded)
        }

    net_balance = total_paid - total_owed

    Every member appears, including those with no expenses. Shares are
    not rounded here; the planner and the snapshot round at their own
    boundary.
    """
    balances: Dict[str, Decimal] = {m.id: ZERO for m in members}

    for exp in expenses:
        if not exp.split_between:
            raise LedgerIntegrityError(f"Expense {exp.id} has an empty split")

        if exp.paid_by not in balances:
            raise LedgerIntegrityError(
                f"Expense {exp.id} is paid by unknown member {exp.paid_by}"
            )

        unknown = [mid for mid in exp.split_between if mid not in balances]
        if unknown:
            raise LedgerIntegrityError(
                f"Expense {exp.id} is split with unknown members {unknown}"
            )

        # paid_by increases balance
        balances[exp.paid_by] += exp.amount

        # each participant owes an equal share
        share = exp.amount / len(exp.split_between)
        for mid in exp.split_between:
            balances[mid] -= share

    return balances
