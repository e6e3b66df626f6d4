import logging
from collections import deque
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

from groupledger.core.utils import CENTS, DEAD_ZONE, ZERO, round2
from groupledger.ledger.balances import compute_balances
from groupledger.models.expense import Expense
from groupledger.models.member import Member
from groupledger.models.settlement import Settlement

logger = logging.getLogger(__name__)


def settle_balances(balances: Dict[str, Decimal]) -> List[Settlement]:
    """
    Greedy debt resolution: the largest creditor is matched against the
    largest debtor until one side runs out.

    Not guaranteed to produce the minimum number of transfers. Members
    with equal balances keep the order they have in `balances`.
    """
    creditors = []
    debtors = []

    for mid, raw in balances.items():
        bal = round2(raw)
        if bal > DEAD_ZONE:
            creditors.append([mid, bal])
        elif bal < -DEAD_ZONE:
            debtors.append([mid, bal])

    creditors.sort(key=lambda x: x[1], reverse=True)
    debtors.sort(key=lambda x: x[1])  # most negative first

    creditors = deque(creditors)
    debtors = deque(debtors)

    transfers: List[Settlement] = []

    while creditors and debtors:
        cred_id, cred_amt = creditors[0]
        debt_id, debt_amt = debtors[0]

        pay_amt = min(cred_amt, -debt_amt)

        if pay_amt > DEAD_ZONE:
            transfers.append(Settlement(debt_id, cred_id, round2(pay_amt)))

        new_cred = round2(cred_amt - pay_amt)
        new_debt = round2(debt_amt + pay_amt)

        creditors.popleft()
        debtors.popleft()

        if new_cred > DEAD_ZONE:
            creditors.appendleft([cred_id, new_cred])
        if new_debt < -DEAD_ZONE:
            debtors.appendleft([debt_id, new_debt])

    if creditors or debtors:
        residual = sum((amt for _, amt in [*creditors, *debtors]), ZERO)
        # up to a cent per member is ordinary share-rounding leftover
        tolerated = abs(residual) <= CENTS * len(balances)
        logger.log(
            logging.DEBUG if tolerated else logging.WARNING,
            "Unsettled residual of %s left after planning (%d creditors, %d debtors)",
            residual,
            len(creditors),
            len(debtors),
        )

    return transfers


def compute_settlements(
    members: Sequence[Member],
    expenses: Iterable[Expense],
) -> List[Settlement]:
    return settle_balances(compute_balances(members, expenses))
