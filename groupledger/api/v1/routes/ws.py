import logging
from typing import Any, Callable, Dict
from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from groupledger.core.dependencies import get_broadcaster, get_repository
from groupledger.core.errors import NotFound
from groupledger.db.repository import GroupRepository
from groupledger.services.broadcast import GroupBroadcaster
from groupledger.services.group_services import get_group_snapshot

logger = logging.getLogger(__name__)

router = APIRouter()

def error_message(error: str) -> Dict[str, Any]:
    return {"event": "error_message", "data": {"error": error}}

@router.websocket("/ws")
async def group_updates(
    websocket: WebSocket,
    repo: GroupRepository = Depends(get_repository),
    broadcaster: GroupBroadcaster = Depends(get_broadcaster),
):
    """
    Live snapshots. The client sends
    {"event": "join_group", "data": {"groupId": ...}} and gets the current
    snapshot as a "group_updated" event, then one more after every change
    to that group until it disconnects.
    """
    await websocket.accept()

    async def send_update(payload: Dict[str, Any]):
        await websocket.send_json({"event": "group_updated", "data": payload})

    unsubscribers: Dict[str, Callable[[], None]] = {}

    try:
        while True:
            try:
                message = await websocket.receive_json()
            # KeyError: a binary frame has no "text" to decode
            except (KeyError, ValueError):
                await websocket.send_json(error_message("Malformed message"))
                continue

            if not isinstance(message, dict) or message.get("event") != "join_group":
                await websocket.send_json(error_message("Unknown event"))
                continue

            data = message.get("data")
            group_id = str(data.get("groupId")) if isinstance(data, dict) else ""

            try:
                snapshot = get_group_snapshot(repo, group_id)
            except NotFound:
                await websocket.send_json(error_message("Group not found"))
                continue

            if group_id not in unsubscribers:
                unsubscribers[group_id] = broadcaster.subscribe(group_id, send_update)

            await send_update(snapshot.model_dump(mode="json", by_alias=True))
    except WebSocketDisconnect:
        logger.debug("Socket left groups %s", list(unsubscribers))
    finally:
        for unsubscribe in unsubscribers.values():
            unsubscribe()
