import logging
from decimal import Decimal, InvalidOperation
from typing import Tuple
from groupledger.core.config import settings
from groupledger.core.errors import ValidationError
from groupledger.core.utils import generate_id, round2, to_decimal
from groupledger.db.repository import GroupRepository
from groupledger.ledger.snapshot import build_snapshot
from groupledger.models.expense import Expense
from groupledger.models.group import Group
from groupledger.schemas.expense import ExpenseCreate
from groupledger.schemas.group import GroupSnapshot

logger = logging.getLogger(__name__)

def parse_amount(value) -> Decimal:
    if value is None:
        raise ValidationError("Amount must be a positive number")

    try:
        amount = to_decimal(value)
    except (InvalidOperation, ValueError):
        raise ValidationError("Amount must be a positive number")

    if not amount.is_finite() or amount <= 0:
        raise ValidationError("Amount must be a positive number")

    if amount > settings.MAX_AMOUNT:
        raise ValidationError(f"Amount must not exceed {settings.MAX_AMOUNT}")

    amount = round2(amount)
    if amount <= 0:
        raise ValidationError("Amount must be at least 0.01")

    return amount

def validate_expense(group: Group, data: ExpenseCreate) -> Tuple[str, Decimal, str, Tuple[str, ...]]:
    # -----------------------------------
    # 1. Description
    # -----------------------------------
    description = (data.description or "").strip()
    if not description:
        raise ValidationError("Description is required")

    # -----------------------------------
    # 2. Amount
    # -----------------------------------
    amount = parse_amount(data.amount)

    # -----------------------------------
    # 3. Payer must be a member
    # -----------------------------------
    if not data.paid_by or not group.find_member(data.paid_by):
        raise ValidationError("Valid paidBy memberId is required")

    # -----------------------------------
    # 4. Split members
    # -----------------------------------
    member_ids = list(data.split_between or [])

    if not member_ids:
        raise ValidationError("splitBetween must include at least one valid memberId")

    if len(member_ids) != len(set(member_ids)):
        raise ValidationError("Duplicate members found in splitBetween")

    unknown = [mid for mid in member_ids if not group.find_member(mid)]
    if unknown:
        raise ValidationError(
            f"splitBetween contains unknown memberIds: {', '.join(unknown)}"
        )

    return description, amount, data.paid_by, tuple(member_ids)

def add_expense(
    repo: GroupRepository, group_id: str, data: ExpenseCreate
) -> Tuple[Expense, GroupSnapshot]:
    with repo.mutate(group_id) as group:
        description, amount, paid_by, split_between = validate_expense(group, data)

        expense_id = generate_id("e_", settings.ID_LENGTH)
        while any(e.id == expense_id for e in group.expenses):
            expense_id = generate_id("e_", settings.ID_LENGTH)

        expense = Expense(
            id=expense_id,
            description=description,
            amount=amount,
            paid_by=paid_by,
            split_between=split_between,
        )
        group.expenses.append(expense)

        # a group whose snapshot cannot be built must not keep the expense
        try:
            snapshot = build_snapshot(group)
        except Exception:
            group.expenses.pop()
            raise

        logger.info(
            "Expense %s of %s paid by %s split %d ways in group %s",
            expense.id, expense.amount, expense.paid_by, len(split_between), group.id,
        )

        return expense, snapshot
