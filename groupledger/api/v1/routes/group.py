from fastapi import APIRouter, Depends, Response
from typing import Optional
from groupledger.core.dependencies import get_broadcaster, get_repository
from groupledger.db.repository import GroupRepository
from groupledger.ledger.snapshot import build_snapshot, member_out
from groupledger.schemas.group import GroupCreate, GroupCreatedOut, GroupOut, MemberCreate, MemberJoinedOut
from groupledger.services.broadcast import GroupBroadcaster
from groupledger.services.group_services import add_member, create_group, get_group_snapshot

router = APIRouter()

@router.post("", response_model=GroupCreatedOut, status_code=201)
async def create_new_group(
    data: Optional[GroupCreate] = None,
    repo: GroupRepository = Depends(get_repository),
):
    group = create_group(repo, data.name if data else None)
    return GroupCreatedOut(id=group.id, group=build_snapshot(group))

@router.post("/{group_id}/members", response_model=MemberJoinedOut, status_code=201)
async def join_group(
    group_id: str,
    data: MemberCreate,
    response: Response,
    repo: GroupRepository = Depends(get_repository),
    broadcaster: GroupBroadcaster = Depends(get_broadcaster),
):
    member, snapshot, created = add_member(repo, group_id, data.name)

    if created:
        await broadcaster.publish(group_id, snapshot)
    else:
        response.status_code = 200

    return MemberJoinedOut(member=member_out(member), group=snapshot)

@router.get("/{group_id}", response_model=GroupOut)
async def fetch_group(group_id: str, repo: GroupRepository = Depends(get_repository)):
    return GroupOut(group=get_group_snapshot(repo, group_id))
