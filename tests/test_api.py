from fastapi.testclient import TestClient
from groupledger.core.errors import LedgerIntegrityError
from groupledger.main import create_app

def new_group(client, name="Trip"):
    res = client.post("/groups", json={"name": name})
    assert res.status_code == 201
    return res.json()["id"]

def join(client, group_id, name):
    return client.post(f"/groups/{group_id}/members", json={"name": name}).json()["member"]["id"]

def test_root(client):
    assert "live" in client.get("/").json()["message"]

def test_create_group(client):
    res = client.post("/groups", json={"name": "Trip"})
    body = res.json()

    assert res.status_code == 201
    assert body["id"].startswith("g_")
    assert body["group"] == {
        "id": body["id"],
        "name": "Trip",
        "members": [],
        "expenses": [],
        "balances": {},
        "settlements": [],
    }

def test_create_group_without_body(client):
    res = client.post("/groups")
    assert res.status_code == 201
    assert res.json()["group"]["name"] == "New Group"

def test_get_unknown_group(client):
    res = client.get("/groups/g_nope")
    assert res.status_code == 404
    assert res.json() == {"error": "Group not found"}

def test_member_join_status_codes(client):
    gid = new_group(client)

    first = client.post(f"/groups/{gid}/members", json={"name": "Alex"})
    again = client.post(f"/groups/{gid}/members", json={"name": "ALEX"})

    assert first.status_code == 201
    assert again.status_code == 200
    assert first.json()["member"] == again.json()["member"]
    assert len(again.json()["group"]["members"]) == 1

def test_member_name_required(client):
    gid = new_group(client)
    res = client.post(f"/groups/{gid}/members", json={})
    assert res.status_code == 400
    assert res.json() == {"error": "Member name is required"}

def test_add_expense_flow(client):
    gid = new_group(client)
    alice = join(client, gid, "Alice")
    bob = join(client, gid, "Bob")
    carol = join(client, gid, "Carol")

    res = client.post(f"/groups/{gid}/expenses", json={
        "description": "  Dinner ",
        "amount": 30,
        "paidBy": alice,
        "splitBetween": [alice, bob, carol],
    })
    body = res.json()

    assert res.status_code == 201
    assert body["expense"]["description"] == "Dinner"
    assert body["expense"]["amount"] == 30.0
    assert body["expense"]["paidBy"] == alice
    assert body["group"]["balances"] == {alice: 20.0, bob: -10.0, carol: -10.0}
    assert sorted(body["group"]["settlements"], key=lambda s: s["from"]) == sorted([
        {"from": bob, "to": alice, "amount": 10.0},
        {"from": carol, "to": alice, "amount": 10.0},
    ], key=lambda s: s["from"])

    fetched = client.get(f"/groups/{gid}").json()["group"]
    assert fetched == body["group"]

def test_add_expense_validation_error(client):
    gid = new_group(client)
    alice = join(client, gid, "Alice")

    res = client.post(f"/groups/{gid}/expenses", json={
        "description": "Dinner",
        "amount": 30,
        "paidBy": alice,
        "splitBetween": [],
    })

    assert res.status_code == 400
    assert "splitBetween" in res.json()["error"]

def test_add_expense_bad_amount(client):
    gid = new_group(client)
    alice = join(client, gid, "Alice")

    res = client.post(f"/groups/{gid}/expenses", json={
        "description": "Dinner",
        "amount": -5,
        "paidBy": alice,
        "splitBetween": [alice],
    })

    assert res.status_code == 400
    assert res.json() == {"error": "Amount must be a positive number"}

def test_add_expense_malformed_body(client):
    gid = new_group(client)
    res = client.post(f"/groups/{gid}/expenses", json={"splitBetween": "everyone"})
    assert res.status_code == 400
    assert "error" in res.json()

def test_add_expense_unknown_group(client):
    res = client.post("/groups/g_nope/expenses", json={
        "description": "Dinner",
        "amount": 30,
        "paidBy": "m_x",
        "splitBetween": ["m_x"],
    })
    assert res.status_code == 404

def test_metrics_and_health(client):
    gid = new_group(client)
    alice = join(client, gid, "Alice")
    client.post(f"/groups/{gid}/expenses", json={
        "description": "Dinner", "amount": 12, "paidBy": alice, "splitBetween": [alice],
    })

    assert client.get("/api/v1/system/health").json() == {"status": "ok"}
    assert client.get("/api/v1/system/metrics").json() == {"groups": 1, "members": 1, "expenses": 1}

def test_integrity_error_is_a_500(repository, monkeypatch):
    def explode(group):
        raise LedgerIntegrityError("boom")

    monkeypatch.setattr("groupledger.services.group_services.build_snapshot", explode)
    group = repository.create("Broken")

    with TestClient(create_app(repository=repository), raise_server_exceptions=False) as c:
        res = c.get(f"/groups/{group.id}")

    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}

def test_huge_amount_is_rejected_and_group_stays_readable(client):
    gid = new_group(client)
    alice = join(client, gid, "Alice")
    bob = join(client, gid, "Bob")

    for amount in (9e25, 9e25, 1e30):
        res = client.post(f"/groups/{gid}/expenses", json={
            "description": "Yacht", "amount": amount, "paidBy": alice, "splitBetween": [bob],
        })
        assert res.status_code == 400
        assert "exceed" in res.json()["error"]

    res = client.get(f"/groups/{gid}")
    assert res.status_code == 200
    assert res.json()["group"]["expenses"] == []
