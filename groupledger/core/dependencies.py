from fastapi.requests import HTTPConnection
from groupledger.db.repository import GroupRepository
from groupledger.services.broadcast import GroupBroadcaster

# HTTPConnection so the same dependencies serve HTTP routes and websockets

def get_repository(conn: HTTPConnection) -> GroupRepository:
    return conn.app.state.repository

def get_broadcaster(conn: HTTPConnection) -> GroupBroadcaster:
    return conn.app.state.broadcaster
