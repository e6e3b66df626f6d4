from groupledger.core.utils import to_float
from groupledger.ledger.balances import compute_balances
from groupledger.ledger.settlements import settle_balances
from groupledger.models.expense import Expense
from groupledger.models.group import Group
from groupledger.models.member import Member
from groupledger.models.settlement import Settlement
from groupledger.schemas.balances import SettlementOut
from groupledger.schemas.expense import ExpenseOut
from groupledger.schemas.group import GroupSnapshot, MemberOut


def member_out(member: Member) -> MemberOut:
    return MemberOut(id=member.id, name=member.name)


def expense_out(expense: Expense) -> ExpenseOut:
    return ExpenseOut(
        id=expense.id,
        description=expense.description,
        amount=to_float(expense.amount),
        paid_by=expense.paid_by,
        split_between=list(expense.split_between),
        created_at=expense.created_at,
    )


def settlement_out(settlement: Settlement) -> SettlementOut:
    return SettlementOut(
        from_member=settlement.from_member,
        to_member=settlement.to_member,
        amount=to_float(settlement.amount),
    )


def build_snapshot(group: Group) -> GroupSnapshot:
    """
    Full externally visible state of a group.

    Recomputed from scratch on every call. Balances are rounded to cents
    here; the raw values from the calculator never leave this function.
    """
    balances = compute_balances(group.members, group.expenses)
    settlements = settle_balances(balances)

    return GroupSnapshot(
        id=group.id,
        name=group.name,
        members=[member_out(m) for m in group.members],
        expenses=[expense_out(e) for e in group.expenses],
        balances={mid: to_float(bal) for mid, bal in balances.items()},
        settlements=[settlement_out(s) for s in settlements],
    )
