import logging
from typing import Optional, Tuple
from groupledger.core.config import settings
from groupledger.core.errors import ValidationError
from groupledger.core.utils import generate_id
from groupledger.db.repository import GroupRepository
from groupledger.ledger.snapshot import build_snapshot
from groupledger.models.group import Group
from groupledger.models.member import Member
from groupledger.schemas.group import GroupSnapshot

logger = logging.getLogger(__name__)

def create_group(repo: GroupRepository, name: Optional[str]) -> Group:
    name = (name or "").strip() or settings.DEFAULT_GROUP_NAME
    group = repo.create(name)
    logger.info("Created group %s (%s)", group.id, group.name)
    return group

def add_member(
    repo: GroupRepository, group_id: str, name: Optional[str]
) -> Tuple[Member, GroupSnapshot, bool]:
    """
    Join `name` to the group. Names match case-insensitively, so joining
    an existing name returns that member and `created` is False.
    """
    name = (name or "").strip()
    if not name:
        raise ValidationError("Member name is required")

    with repo.mutate(group_id) as group:
        existing = group.find_member_by_name(name)
        if existing:
            return existing, build_snapshot(group), False

        member_id = generate_id("m_", settings.ID_LENGTH)
        while group.find_member(member_id):
            member_id = generate_id("m_", settings.ID_LENGTH)

        member = Member(id=member_id, name=name)
        group.members.append(member)
        logger.info("Member %s (%s) joined group %s", member.id, member.name, group.id)

        return member, build_snapshot(group), True

def get_group_snapshot(repo: GroupRepository, group_id: str) -> GroupSnapshot:
    with repo.mutate(group_id) as group:
        return build_snapshot(group)
