import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List

from groupledger.schemas.group import GroupSnapshot

logger = logging.getLogger(__name__)

Listener = Callable[[Dict[str, Any]], Awaitable[None]]


class GroupBroadcaster:
    """
    Fans group snapshots out to the listeners registered for that group.

    Delivery is best-effort: a listener that raises is logged and dropped.
    State is unaffected since any later read rebuilds the snapshot.
    """

    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def subscribe(self, group_id: str, listener: Listener) -> Callable[[], None]:
        self._listeners[group_id].append(listener)
        return lambda: self.unsubscribe(group_id, listener)

    def unsubscribe(self, group_id: str, listener: Listener):
        listeners = self._listeners.get(group_id)
        if not listeners or listener not in listeners:
            return
        listeners.remove(listener)
        if not listeners:
            del self._listeners[group_id]

    def listener_count(self, group_id: str) -> int:
        return len(self._listeners.get(group_id, ()))

    async def publish(self, group_id: str, snapshot: GroupSnapshot) -> int:
        payload = snapshot.model_dump(mode="json", by_alias=True)
        delivered = 0

        for listener in list(self._listeners.get(group_id, ())):
            try:
                await listener(payload)
                delivered += 1
            except Exception:
                logger.warning(
                    "Dropping listener for group %s after failed delivery",
                    group_id,
                    exc_info=True,
                )
                self.unsubscribe(group_id, listener)

        return delivered
