import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Dict, Iterator, List

from groupledger.core.config import settings
from groupledger.core.errors import NotFound
from groupledger.core.utils import generate_id
from groupledger.models.group import Group


class GroupRepository(ABC):
    """
    Storage for groups. Ledger computations never touch the repository
    directly; services fetch a group under `mutate` and hand it over.
    """

    @abstractmethod
    def get(self, group_id: str) -> Group:
        """Return the group or raise NotFound."""

    @abstractmethod
    def create(self, name: str) -> Group:
        ...

    @abstractmethod
    def mutate(self, group_id: str):
        """
        Context manager yielding the group with its lock held. Writers and
        snapshot readers both go through it so a half-applied change is
        never visible.
        """

    @abstractmethod
    def all(self) -> List[Group]:
        ...


class InMemoryGroupRepository(GroupRepository):
    """Process-lifetime store; everything is lost on restart."""

    def __init__(self, id_length: int = settings.ID_LENGTH):
        self._groups: Dict[str, Group] = {}
        self._locks: Dict[str, threading.RLock] = {}
        # guards the two dicts above, not the groups themselves
        self._registry_lock = threading.Lock()
        self._id_length = id_length

    def get(self, group_id: str) -> Group:
        group = self._groups.get(group_id)
        if group is None:
            raise NotFound()
        return group

    def create(self, name: str) -> Group:
        with self._registry_lock:
            group_id = generate_id("g_", self._id_length)
            while group_id in self._groups:
                group_id = generate_id("g_", self._id_length)

            group = Group(id=group_id, name=name)
            self._groups[group_id] = group
            self._locks[group_id] = threading.RLock()
            return group

    @contextmanager
    def mutate(self, group_id: str) -> Iterator[Group]:
        group = self.get(group_id)
        with self._locks[group_id]:
            yield group

    def all(self) -> List[Group]:
        with self._registry_lock:
            return list(self._groups.values())
