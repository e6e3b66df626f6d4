from fastapi import APIRouter, Depends
from groupledger.core.dependencies import get_repository
from groupledger.db.repository import GroupRepository
from groupledger.services.system_services import system_metrics, system_health

router = APIRouter()

@router.get("/metrics")
async def metrics(
    repo: GroupRepository = Depends(get_repository)
):
    return await system_metrics(repo)

@router.get("/health")
async def health():
    return await system_health()
