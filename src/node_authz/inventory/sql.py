"""
node_authz.inventory.sql

SQL-backed node inventory.

Responsibilities:
- Implement `NodeLookup` on top of the async SQLAlchemy `Node` table.
- Translate driver/connectivity failures into `NodeLookupError`.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from node_authz.db.repositories.nodes import NodeRepo
from node_authz.inventory.base import NodeLookupError, NodeRecord


class SqlNodeInventory:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_node(self, hostname: str) -> NodeRecord | None:
        # One short read-only session per lookup; nothing is held across requests.
        try:
            async with self._session_factory() as session:
                node = await NodeRepo(session).get(hostname)
        except SQLAlchemyError as e:
            raise NodeLookupError(f"lookup of {hostname!r} failed: {e}") from e

        if node is None:
            return None
        return NodeRecord(hostname=node.hostname, parent_hostname=node.parent_hostname)


# --- Module Notes -----------------------------------------------------------
# The ORM row is copied into an immutable `NodeRecord` before the session closes.
