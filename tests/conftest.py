"""
Pytest configuration and shared fixtures for groupledger tests.
"""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from groupledger.db.repository import InMemoryGroupRepository
from groupledger.main import create_app
from groupledger.models.expense import Expense
from groupledger.models.member import Member
from groupledger.services.broadcast import GroupBroadcaster


# =============================================================================
# Ledger fixtures
# =============================================================================

@pytest.fixture
def trio() -> list[Member]:
    """Alice, Bob and Carol, in join order."""
    return [
        Member(id="m_alice", name="Alice"),
        Member(id="m_bob", name="Bob"),
        Member(id="m_carol", name="Carol"),
    ]


def make_expense(amount, paid_by, split_between, expense_id="e_test", description="Dinner"):
    return Expense(
        id=expense_id,
        description=description,
        amount=Decimal(str(amount)),
        paid_by=paid_by,
        split_between=tuple(split_between),
    )


# =============================================================================
# App fixtures
# =============================================================================

@pytest.fixture
def repository() -> InMemoryGroupRepository:
    return InMemoryGroupRepository()


@pytest.fixture
def broadcaster() -> GroupBroadcaster:
    return GroupBroadcaster()


@pytest.fixture
def client(repository, broadcaster):
    app = create_app(repository=repository, broadcaster=broadcaster)
    with TestClient(app) as c:
        yield c
