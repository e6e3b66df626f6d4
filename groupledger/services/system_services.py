from groupledger.db.repository import GroupRepository

async def system_health():
    return {
        "status": "ok"
    }

async def system_metrics(repo: GroupRepository):
    groups = repo.all()

    return {
        "groups": len(groups),
        "members": sum(len(g.members) for g in groups),
        "expenses": sum(len(g.expenses) for g in groups)
    }
