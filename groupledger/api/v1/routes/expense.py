from fastapi import APIRouter, Depends
from groupledger.core.dependencies import get_broadcaster, get_repository
from groupledger.db.repository import GroupRepository
from groupledger.ledger.snapshot import expense_out
from groupledger.schemas.expense import ExpenseCreate
from groupledger.schemas.group import ExpenseCreatedOut
from groupledger.services.broadcast import GroupBroadcaster
from groupledger.services.expense_services import add_expense

router = APIRouter()

@router.post("/{group_id}/expenses", response_model=ExpenseCreatedOut, status_code=201)
async def create_expense(
    group_id: str,
    data: ExpenseCreate,
    repo: GroupRepository = Depends(get_repository),
    broadcaster: GroupBroadcaster = Depends(get_broadcaster),
):
    expense, snapshot = add_expense(repo, group_id, data)
    await broadcaster.publish(group_id, snapshot)
    return ExpenseCreatedOut(expense=expense_out(expense), group=snapshot)
